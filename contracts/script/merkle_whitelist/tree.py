"""
Sorted-pair Merkle tree (OpenZeppelin MerkleProof compatible).

Levels are stored bottom-up as tuples of 32-byte hashes; levels[0] are the
leaves in input order and levels[-1] holds the root. A level with an odd
number of nodes promotes its last node unchanged.
"""
import logging
from typing import Callable, List, Sequence, Tuple

from eth_utils import keccak

from .errors import EmptyTree, IndexOutOfRange, InvalidEncoding

logger = logging.getLogger(__name__)

HashFn = Callable[[bytes], bytes]
Level = Tuple[bytes, ...]


def hash_pair(a: bytes, b: bytes, hash_fn: HashFn = keccak) -> bytes:
    if a > b:
        a, b = b, a
    return hash_fn(a + b)


def build_tree(leaves: Sequence[bytes], hash_fn: HashFn = keccak) -> List[Level]:
    if not leaves:
        raise EmptyTree("cannot build a Merkle tree from zero leaves")
    for i, leaf in enumerate(leaves):
        if len(leaf) != 32:
            raise InvalidEncoding(f"leaf {i}: expected 32 bytes, got {len(leaf)}")

    current: Level = tuple(bytes(leaf) for leaf in leaves)
    tree = [current]
    while len(current) > 1:
        nxt: List[bytes] = []
        for i in range(0, len(current), 2):
            if i + 1 < len(current):
                nxt.append(hash_pair(current[i], current[i + 1], hash_fn))
            else:
                # Promote odd node
                nxt.append(current[i])
        current = tuple(nxt)
        tree.append(current)
    return tree


def get_root(levels: Sequence[Level]) -> bytes:
    return levels[-1][0]


def get_proof(levels: Sequence[Level], index: int) -> List[bytes]:
    size = len(levels[0])
    if not (0 <= index < size):
        raise IndexOutOfRange(index, size)

    proof: List[bytes] = []
    idx = index
    for level in levels[:-1]:
        pair_index = idx ^ 1
        if pair_index < len(level):
            proof.append(level[pair_index])
        idx //= 2
    return proof


def verify_proof(leaf: bytes, proof: Sequence[bytes], root: bytes, hash_fn: HashFn = keccak) -> bool:
    computed = leaf
    for sibling in proof:
        computed = hash_pair(computed, sibling, hash_fn)
    return computed == root


class MerkleTree:
    def __init__(self, leaves: Sequence[bytes], hash_fn: HashFn = keccak):
        self._hash_fn = hash_fn
        self._levels: Tuple[Level, ...] = tuple(build_tree(leaves, hash_fn))
        logger.debug("built tree: %d leaves, %d levels", len(self.leaves), len(self.levels))

    @property
    def hash_fn(self) -> HashFn:
        return self._hash_fn

    @property
    def levels(self) -> Tuple[Level, ...]:
        return self._levels

    @property
    def leaves(self) -> Level:
        return self.levels[0]

    @property
    def root(self) -> bytes:
        return get_root(self.levels)

    def __len__(self) -> int:
        return len(self.leaves)

    def get_proof(self, index: int) -> List[bytes]:
        return get_proof(self.levels, index)

    def verify_proof(self, leaf: bytes, proof: Sequence[bytes]) -> bool:
        return verify_proof(leaf, proof, self.root, self.hash_fn)
