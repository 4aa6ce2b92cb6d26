"""
Shared pytest fixtures: the reference records (L1 anchor, header, transaction).

Raw reference values live in tests/vectors.py.
"""
from __future__ import annotations

import pytest

from sequencer_types.types import Header, L1BlockInfo, Transaction, U256

from tests.vectors import (
    BLOCK_MERKLE_ROOT,
    FEE_MERKLE_ROOT,
    L1_HASH_HEX,
    PAYLOAD_COMMITMENT,
)

# ---------- RECORD FIXTURES ----------

@pytest.fixture
def l1_info() -> L1BlockInfo:
    return L1BlockInfo(
        number=123,
        timestamp=U256(0x456),
        hash=bytes.fromhex(L1_HASH_HEX[2:]),
    )


@pytest.fixture
def header(l1_info: L1BlockInfo) -> Header:
    return Header(
        height=42,
        timestamp=789,
        l1_head=124,
        l1_finalized=l1_info,
        payload_commitment=PAYLOAD_COMMITMENT,
        block_merkle_tree_root=BLOCK_MERKLE_ROOT,
        fee_merkle_tree_root=FEE_MERKLE_ROOT,
    )


@pytest.fixture
def transaction() -> Transaction:
    return Transaction(vm=0, payload=bytes([1, 2, 3, 4, 5]))
