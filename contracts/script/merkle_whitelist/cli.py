import argparse
import json
import logging
import sys
from typing import List, Optional

from . import config
from .address import to_checksum, to_hex
from .artifact import (
    entries_from_records,
    load_entries,
    load_json,
    record_leaf_and_proof,
    save_json,
    to_artifact,
    verify_artifact,
)
from .errors import WhitelistError
from .leaf import encode_fields
from .tree import verify_proof
from .whitelist import Whitelist, build_whitelist

logger = logging.getLogger(__name__)


def print_results(whitelist: Whitelist) -> None:
    print("=" * 80)
    print("WHITELIST MERKLE ROOT")
    print("=" * 80)
    print(f"Merkle Root: {to_hex(whitelist.root)}")
    print(f"Entry Count: {len(whitelist)}")

    for item in whitelist.items:
        fields = encode_fields(item.entry)
        ok = verify_proof(item.leaf, item.proof, whitelist.root)
        print(f"\n--- Entry {item.index} ---")
        print(f"Address: {to_checksum(fields.address)}")
        print(f"Amount: {fields.amount}")
        print(f"Ref Claim UUID: {to_hex(fields.ref_claim_uuid)}")
        print(f"Asset: {to_checksum(fields.asset)}")
        print(f"Leaf: {to_hex(item.leaf)}")
        print(f"Proof Valid: {ok}")
        print("Proof: [" + ", ".join(to_hex(p) for p in item.proof) + "]")


def cmd_generate(args) -> int:
    if args.input:
        entries = load_entries(args.input)
    else:
        logger.info("no entries file given, using sample entries")
        entries = entries_from_records(config.SAMPLE_ENTRIES)

    whitelist = build_whitelist(entries)
    bad = [i.index for i in whitelist.items if not verify_proof(i.leaf, i.proof, whitelist.root)]
    if bad:
        logger.error("self-check failed for entries %s", bad)
        return 1

    if not args.quiet:
        print_results(whitelist)
    path = save_json(to_artifact(whitelist), args.output)
    print(f"\nMerkleTree generated: {path}")
    return 0


def cmd_verify(args) -> int:
    data = load_json(args.artifact)
    failed = verify_artifact(data)
    total = len(data["whiteList"])
    if failed:
        print(f"{len(failed)}/{total} entries FAILED: {failed}")
        return 1
    print(f"All {total} entries verified against {data['merkleRoot']}")
    return 0


def cmd_proof(args) -> int:
    data = load_json(args.artifact)
    items = data["whiteList"]
    if not (0 <= args.index < len(items)):
        logger.error("index %d out of range (0..%d)", args.index, len(items) - 1)
        return 1
    leaf, raw_proof = record_leaf_and_proof(items[args.index])
    proof = [to_hex(p) for p in raw_proof]
    print(f"Leaf: {to_hex(leaf)}")
    print("Proof: [" + ", ".join(proof) + "]")

    print("\n// Solidity")
    print(f"proof = new bytes32[]({len(proof)});")
    for i, p in enumerate(proof):
        print(f"proof[{i}] = {p};")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="merkle-whitelist",
        description="Build and check whitelist Merkle roots and proofs",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("generate", help="build root and proofs, write the JSON artifact")
    p.add_argument("-i", "--input", default=config.ENTRIES_FILE, help="JSON entries file")
    p.add_argument("-o", "--output", default=config.OUTPUT_FILE)
    p.add_argument("-q", "--quiet", action="store_true", help="skip per-entry output")
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser("verify", help="check every proof in an artifact")
    p.add_argument("artifact")
    p.set_defaults(func=cmd_verify)

    p = sub.add_parser("proof", help="print the proof for one entry position")
    p.add_argument("artifact")
    p.add_argument("--index", type=int, required=True)
    p.set_defaults(func=cmd_proof)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (WhitelistError, OSError, json.JSONDecodeError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
