"""
JSON artifact consumed by the claim contract tooling:

    {
      "merkleRoot": "0x...",
      "whiteList": [
        {"address", "amount", "refClaimUUID", "asset", "leaf", "proof"}, ...
      ]
    }

Hashes and addresses are lowercase 0x hex, amount is a decimal string.
"""
import json
import logging
import os
from typing import Any, Dict, List, Tuple

from eth_utils import keccak

from .address import to_fixed_bytes, to_hex
from .errors import EmptyTree, InvalidEncoding
from .leaf import HASH_SIZE, Entry, HashFn, encode_fields, leaf_hash
from .tree import verify_proof
from .whitelist import Whitelist

logger = logging.getLogger(__name__)

ENTRY_FIELDS = ("address", "amount", "refClaimUUID", "asset")


def entry_from_record(record: Dict[str, Any]) -> Entry:
    if not isinstance(record, dict):
        raise InvalidEncoding(f"entry record must be an object, got {type(record).__name__}")
    missing = [k for k in ENTRY_FIELDS if k not in record]
    if missing:
        raise InvalidEncoding(f"entry record missing field(s): {', '.join(missing)}")
    return Entry(
        address=record["address"],
        amount=record["amount"],
        ref_claim_uuid=record["refClaimUUID"],
        asset=record["asset"],
    )


def entries_from_records(records: List[Dict[str, Any]]) -> List[Entry]:
    entries = []
    for i, record in enumerate(records):
        try:
            entries.append(entry_from_record(record))
        except InvalidEncoding as e:
            raise InvalidEncoding(f"entry {i}: {e}") from e
    return entries


def load_entries(path: str) -> List[Entry]:
    """Read a JSON list of entry records, or an object holding one under "whiteList" / "entries"."""
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("whiteList", data.get("entries"))
    if not isinstance(data, list):
        raise InvalidEncoding(f"{path}: expected a list of entries")
    logger.info("loaded %d entries from %s", len(data), path)
    return entries_from_records(data)


def to_artifact(whitelist: Whitelist) -> Dict[str, Any]:
    items = []
    for item in whitelist.items:
        fields = encode_fields(item.entry)
        items.append({
            "address": to_hex(fields.address),
            "amount": str(fields.amount),  # uint256 as string for JSON safety
            "refClaimUUID": to_hex(fields.ref_claim_uuid),
            "asset": to_hex(fields.asset),
            "leaf": to_hex(item.leaf),
            "proof": [to_hex(p) for p in item.proof],
        })
    return {
        "merkleRoot": to_hex(whitelist.root),
        "whiteList": items,
    }


def save_json(data: Dict[str, Any], path: str) -> str:
    path = os.path.abspath(path)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    logger.info("saved %s", path)
    return path


def load_json(path: str) -> Dict[str, Any]:
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict) or "merkleRoot" not in data or "whiteList" not in data:
        raise InvalidEncoding(f"{path}: not a whitelist artifact (need merkleRoot and whiteList)")
    check_items(data["whiteList"])
    return data


def check_items(items) -> None:
    if not isinstance(items, list):
        raise InvalidEncoding("whiteList must be a list")
    if not items:
        raise EmptyTree("whiteList has no entries")


def record_leaf_and_proof(record: Dict[str, Any]) -> Tuple[bytes, List[bytes]]:
    """Decode the stored leaf and proof of one artifact record."""
    if not isinstance(record, dict):
        raise InvalidEncoding(f"entry record must be an object, got {type(record).__name__}")
    if "leaf" not in record or "proof" not in record:
        raise InvalidEncoding("entry record needs leaf and proof")
    if not isinstance(record["proof"], list):
        raise InvalidEncoding("proof must be a list")
    leaf = to_fixed_bytes(record["leaf"], HASH_SIZE, "leaf")
    proof = [to_fixed_bytes(p, HASH_SIZE, "proof") for p in record["proof"]]
    return leaf, proof


def verify_artifact(data: Dict[str, Any], hash_fn: HashFn = keccak) -> List[int]:
    """
    Recompute each item's leaf from its entry fields and fold its proof up to
    merkleRoot. Returns the positions that fail; an empty list means all good.
    An empty whiteList raises EmptyTree.
    """
    root = to_fixed_bytes(data["merkleRoot"], HASH_SIZE, "merkleRoot")
    check_items(data["whiteList"])
    failed: List[int] = []
    for i, record in enumerate(data["whiteList"]):
        try:
            leaf = leaf_hash(entry_from_record(record), hash_fn)
            stored, proof = record_leaf_and_proof(record)
        except InvalidEncoding as e:
            logger.warning("entry %d: %s", i, e)
            failed.append(i)
            continue
        if leaf != stored:
            logger.warning("entry %d: stored leaf does not match entry fields", i)
            failed.append(i)
        elif not verify_proof(leaf, proof, root, hash_fn):
            logger.warning("entry %d: proof does not reach merkleRoot", i)
            failed.append(i)
    return failed
