"""
Leaf encoding for whitelist entries.

Matches the verifier's
keccak256(abi.encodePacked(address, uint256 amount, bytes32 refClaimUUID, address asset))
i.e. 20 + 32 + 32 + 20 = 104 packed bytes, no padding between fields.
"""
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence

from eth_utils import keccak

from .address import ADDRESS_SIZE, to_address_bytes, to_fixed_bytes
from .errors import InvalidEncoding

logger = logging.getLogger(__name__)

HASH_SIZE = 32
UINT256_MAX = 2**256 - 1
PACKED_SIZE = ADDRESS_SIZE + 32 + HASH_SIZE + ADDRESS_SIZE

HashFn = Callable[[bytes], bytes]

# strict digit strings only: no sign, underscores or whitespace
DECIMAL_RE = re.compile(r"[0-9]+")
HEX_RE = re.compile(r"0[xX][0-9a-fA-F]+")


@dataclass(frozen=True)
class Entry:
    # values as supplied: 0x hex / Tron Base58 strings or raw bytes, int or numeric string
    address: Any
    amount: Any
    ref_claim_uuid: Any
    asset: Any


@dataclass(frozen=True)
class EncodedEntry:
    address: bytes         # address (20)
    amount: int            # uint256
    ref_claim_uuid: bytes  # bytes32
    asset: bytes           # address (20)

    def packed(self) -> bytes:
        return (
            self.address
            + self.amount.to_bytes(32, "big")
            + self.ref_claim_uuid
            + self.asset
        )


def to_uint256(value, field: str = "amount") -> int:
    """Accept an int, a base-10 string or a 0x hex string; reject anything outside uint256."""
    if isinstance(value, bool):
        raise InvalidEncoding(f"{field}: expected integer, got bool")
    if isinstance(value, int):
        amount = value
    elif isinstance(value, str):
        if DECIMAL_RE.fullmatch(value):
            amount = int(value, 10)
        elif HEX_RE.fullmatch(value):
            amount = int(value[2:], 16)
        else:
            raise InvalidEncoding(f"{field}: not an integer: {value!r}")
    else:
        raise InvalidEncoding(f"{field}: unsupported type {type(value).__name__}")

    if not (0 <= amount <= UINT256_MAX):
        raise InvalidEncoding(f"{field} exceeds uint256: {amount}")
    return amount


def encode_fields(entry: Entry) -> EncodedEntry:
    return EncodedEntry(
        address=to_address_bytes(entry.address, "address"),
        amount=to_uint256(entry.amount, "amount"),
        ref_claim_uuid=to_fixed_bytes(entry.ref_claim_uuid, HASH_SIZE, "refClaimUUID"),
        asset=to_address_bytes(entry.asset, "asset"),
    )


def encode_entry(entry: Entry) -> bytes:
    return encode_fields(entry).packed()


def leaf_hash(entry: Entry, hash_fn: HashFn = keccak) -> bytes:
    return hash_fn(encode_entry(entry))


def leaf_hashes(entries: Sequence[Entry], hash_fn: HashFn = keccak) -> List[bytes]:
    """
    Hash every entry in order. The first malformed entry aborts the whole
    batch; the error names its position.
    """
    leaves: List[bytes] = []
    for i, entry in enumerate(entries):
        try:
            leaves.append(leaf_hash(entry, hash_fn))
        except InvalidEncoding as e:
            raise InvalidEncoding(f"entry {i}: {e}") from e
    logger.debug("encoded %d leaves", len(leaves))
    return leaves
