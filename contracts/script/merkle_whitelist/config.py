import os

# --- CONFIGURATION ---

ENTRIES_FILE = os.getenv("WHITELIST_ENTRIES_FILE")  # None -> SAMPLE_ENTRIES
OUTPUT_FILE = os.getenv("WHITELIST_OUTPUT_FILE", "merkleTree.json")
LOG_LEVEL = os.getenv("WHITELIST_LOG_LEVEL", "INFO")

# Reference entries (same shape as an entries file)
SAMPLE_ENTRIES = [
    {
        "address": "0x1D96F2f6BeF1202E4Ce1Ff6Dad0c2CB002861d3e",
        "amount": "100000000",
        "refClaimUUID": "0xabc1230000000000000000000000000000000000000000000000000000000001",
        "asset": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
    },
    {
        "address": "0x1D96F2f6BeF1202E4Ce1Ff6Dad0c2CB002861d3e",
        "amount": "50000000",
        "refClaimUUID": "0xabc1240000000000000000000000000000000000000000000000000000000002",
        "asset": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
    },
    {
        "address": "0x1D96F2f6BeF1202E4Ce1Ff6Dad0c2CB002861d3e",
        "amount": "75000000",
        "refClaimUUID": "0xabc1250000000000000000000000000000000000000000000000000000000003",
        "asset": "0x2282c726f54c93193e6b8e5bf1b82303dc11d36e",
    },
]
