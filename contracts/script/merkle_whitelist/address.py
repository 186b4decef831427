import base58
from eth_utils import is_hex, remove_0x_prefix
from web3 import Web3

from .errors import InvalidEncoding

ADDRESS_SIZE = 20
TRON_PREFIX = 0x41


def is_tron_address(value) -> bool:
    return isinstance(value, str) and value.startswith("T") and len(value) == 34


def tron_to_evm_bytes(tron_addr: str) -> bytes:
    """
    Convert a Tron Base58Check address (T...) to its 20-byte EVM form
    by stripping the leading 0x41 byte.
    """
    try:
        decoded = base58.b58decode_check(tron_addr)
    except ValueError as e:
        raise InvalidEncoding(f"Invalid Tron address {tron_addr!r}: {e}") from e
    if len(decoded) != ADDRESS_SIZE + 1 or decoded[0] != TRON_PREFIX:
        raise InvalidEncoding(f"Invalid Tron address: {tron_addr}")
    return decoded[1:]


def to_fixed_bytes(value, size: int, field: str = "value") -> bytes:
    """
    Decode a 0x hex string (or raw bytes) into exactly `size` bytes.
    Short values are rejected, never left-padded.
    """
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text.startswith(("0x", "0X")) or not is_hex(text):
            raise InvalidEncoding(f"{field}: expected 0x-prefixed hex, got {value!r}")
        body = remove_0x_prefix(text)
        if len(body) != size * 2:
            raise InvalidEncoding(f"{field}: expected {size} bytes, got {len(body) / 2:g}")
        raw = bytes.fromhex(body)
    else:
        raise InvalidEncoding(f"{field}: unsupported type {type(value).__name__}")

    if len(raw) != size:
        raise InvalidEncoding(f"{field}: expected {size} bytes, got {len(raw)}")
    return raw


def to_address_bytes(value, field: str = "address") -> bytes:
    if is_tron_address(value):
        return tron_to_evm_bytes(value)
    return to_fixed_bytes(value, ADDRESS_SIZE, field)


def to_hex(raw: bytes) -> str:
    return "0x" + raw.hex()


def to_checksum(raw: bytes) -> str:
    return Web3.to_checksum_address(to_hex(raw))
