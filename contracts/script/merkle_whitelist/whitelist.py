import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from eth_utils import keccak

from .errors import EmptyTree
from .leaf import Entry, HashFn, leaf_hashes
from .tree import MerkleTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WhitelistItem:
    index: int
    entry: Entry
    leaf: bytes
    proof: Tuple[bytes, ...]


@dataclass(frozen=True)
class Whitelist:
    root: bytes
    items: Tuple[WhitelistItem, ...]

    def __len__(self) -> int:
        return len(self.items)

    def index_of(self, leaf: bytes) -> int:
        """
        Position of the first item whose leaf equals `leaf`.

        Leaves are not unique (identical entries hash identically), so this
        only ever answers with the first match. Use positions where it matters.
        """
        for item in self.items:
            if item.leaf == leaf:
                return item.index
        raise KeyError("0x" + leaf.hex())


def build_whitelist(entries: Sequence[Entry], hash_fn: HashFn = keccak) -> Whitelist:
    """
    Encode all entries, build the tree and attach a proof to each entry.
    Any malformed entry aborts the build before the tree is constructed.
    """
    if not entries:
        raise EmptyTree("whitelist has no entries")

    leaves = leaf_hashes(entries, hash_fn)
    tree = MerkleTree(leaves, hash_fn)

    items: List[WhitelistItem] = []
    for i, entry in enumerate(entries):
        items.append(WhitelistItem(
            index=i,
            entry=entry,
            leaf=leaves[i],
            proof=tuple(tree.get_proof(i)),
        ))

    logger.info("whitelist built: %d entries, root 0x%s", len(items), tree.root.hex())
    return Whitelist(root=tree.root, items=tuple(items))
