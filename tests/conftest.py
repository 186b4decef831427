"""
Pytest fixtures for the whitelist Merkle tests.
"""

import pytest
from eth_utils import keccak

from merkle_whitelist import config
from merkle_whitelist.artifact import entries_from_records


def make_leaves(n):
    return [keccak(i.to_bytes(32, "big")) for i in range(n)]


@pytest.fixture
def sample_records():
    return [dict(r) for r in config.SAMPLE_ENTRIES]


@pytest.fixture
def sample_entries(sample_records):
    return entries_from_records(sample_records)


@pytest.fixture
def three_leaves():
    return make_leaves(3)
