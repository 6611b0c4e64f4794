"""Pytest configuration and shared wire-format fixtures."""

import pytest

from typing import Any


BLOCK_HASH = "0x" + "ab" * 32
MINER = "0x95222290dd7278aa3ddd389cc1e1d165cc4bafe5"
SENDER = "0xf1a9e8f520b3427b6326356731a5cb4389337516"
RECIPIENT = "0x4d684f86ed2084484c6547975533151128b0c8bd"


@pytest.fixture
def fee_market_tx() -> dict[str, Any]:
    """Transaction with fee-market fields, as returned by eth_getTransactionByHash."""
    return {
        "blockHash": BLOCK_HASH,
        "blockNumber": "0xc1f251",  # 12710481
        "from": SENDER,
        "gas": "0x5208",  # 21000
        "gasPrice": "0x3b9aca00",  # 1 gwei
        "maxPriorityFeePerGas": "0x59682f00",  # 1.5 gwei
        "maxFeePerGas": "0x77359400",  # 2 gwei
        "hash": "0x" + "cd" * 32,
        "input": "0x",
        "nonce": "0x2a",
        "to": RECIPIENT,
        "transactionIndex": "0x0",
        "type": "0x2",
        "value": "0xde0b6b3a7640000",  # 1 ETH
    }


@pytest.fixture
def legacy_creation_tx() -> dict[str, Any]:
    """Legacy contract-creation transaction: no fee-market fields, null ``to``."""
    return {
        "blockHash": BLOCK_HASH,
        "blockNumber": "0xc1f251",
        "from": SENDER,
        "gas": "0x186a0",  # 100000
        "gasPrice": "0x4a817c800",  # 20 gwei
        "hash": "0x" + "ef" * 32,
        "input": "0x6080",
        "nonce": "0x0",
        "to": None,
        "transactionIndex": "0x1",
        "type": "0x0",
        "value": "0x0",
    }


@pytest.fixture
def block_result(
    fee_market_tx: dict[str, Any], legacy_creation_tx: dict[str, Any]
) -> dict[str, Any]:
    """Block with full transaction objects, as returned by eth_getBlockByNumber."""
    return {
        "baseFeePerGas": "0x7",
        "difficulty": "0x0",
        "extraData": "0x",
        "gasLimit": "0x1c9c380",  # 30000000
        "gasUsed": "0xa410",  # 42000
        "hash": BLOCK_HASH,
        "miner": MINER,
        "mixHash": "0x" + "11" * 32,
        "nonce": "0x0000000000000000",
        "number": "0xc1f251",
        "parentHash": "0x" + "22" * 32,
        "size": "0x220",  # 544
        "timestamp": "0x63b0cd00",  # 2023-01-01T00:00:00Z
        "totalDifficulty": "0x10000000000000000000000",  # 2**88
        "transactions": [fee_market_tx, legacy_creation_tx],
        "uncles": [],
    }

