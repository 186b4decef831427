"""Whitelist Merkle root and proof generation (sorted-pair keccak256)."""

from .errors import EmptyTree, IndexOutOfRange, InvalidEncoding, WhitelistError
from .leaf import Entry, encode_entry, leaf_hash
from .tree import MerkleTree, build_tree, get_proof, get_root, hash_pair, verify_proof
from .whitelist import Whitelist, WhitelistItem, build_whitelist

__all__ = [
    "Entry",
    "EmptyTree",
    "IndexOutOfRange",
    "InvalidEncoding",
    "MerkleTree",
    "Whitelist",
    "WhitelistError",
    "WhitelistItem",
    "build_tree",
    "build_whitelist",
    "encode_entry",
    "get_proof",
    "get_root",
    "hash_pair",
    "leaf_hash",
    "verify_proof",
]
