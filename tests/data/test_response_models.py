"""Tests for wire and decoded block/transaction models."""

import pytest

from typing import Any

from pydantic import ValidationError

from ethrpc.data.models import (
    Block,
    BlockWire,
    Transaction,
    TransactionWire,
    decode_quantity,
    parse_block,
    parse_transaction,
)
from ethrpc.helpers.errors import MalformedHexError, ProtocolError


class TestDecodeQuantity:
    """Tests for scalar quantity results."""

    def test_decode_quantity(self) -> None:
        """Test a scalar result decodes with prefix stripping."""
        assert decode_quantity("0x3b9aca00") == 1_000_000_000

    def test_decode_quantity_tags_field(self) -> None:
        """Test the result field name is attached to errors."""
        with pytest.raises(MalformedHexError) as exc_info:
            decode_quantity("0xzz", field="result")

        assert exc_info.value.field == "result"


class TestTransactionDecode:
    """Tests for TransactionWire.decode."""

    def test_fee_market_transaction(self, fee_market_tx: dict[str, Any]) -> None:
        """Test every quantity of a fee-market transaction decodes."""
        tx = TransactionWire.model_validate(fee_market_tx).decode()

        assert tx == Transaction(
            block_hash=fee_market_tx["blockHash"],
            block_number=12710481,
            from_address=fee_market_tx["from"],
            gas=21000,
            gas_price=1_000_000_000,
            max_priority_fee_per_gas=1_500_000_000,
            max_fee_per_gas=2_000_000_000,
            hash=fee_market_tx["hash"],
            nonce=42,
            to=fee_market_tx["to"],
            transaction_index=0,
            value=10**18,
        )

    def test_missing_fee_fields_stay_absent(
        self, legacy_creation_tx: dict[str, Any]
    ) -> None:
        """Test absent maxFeePerGas/maxPriorityFeePerGas decode to None, not 0."""
        tx = TransactionWire.model_validate(legacy_creation_tx).decode()

        assert tx.max_fee_per_gas is None
        assert tx.max_priority_fee_per_gas is None
        assert tx.gas_price == 20_000_000_000

    def test_contract_creation_has_no_recipient(
        self, legacy_creation_tx: dict[str, Any]
    ) -> None:
        """Test a null ``to`` is preserved as None."""
        tx = TransactionWire.model_validate(legacy_creation_tx).decode()

        assert tx.to is None

    def test_to_passes_through_verbatim(self, fee_market_tx: dict[str, Any]) -> None:
        """Test the recipient address is not decoded."""
        fee_market_tx["to"] = "0x4D684F86ed2084484c6547975533151128b0c8bd"
        tx = TransactionWire.model_validate(fee_market_tx).decode()

        assert tx.to == "0x4D684F86ed2084484c6547975533151128b0c8bd"

    def test_pending_transaction(self, fee_market_tx: dict[str, Any]) -> None:
        """Test null block fields of a pending transaction stay absent."""
        fee_market_tx.update(blockHash=None, blockNumber=None, transactionIndex=None)
        tx = TransactionWire.model_validate(fee_market_tx).decode()

        assert tx.block_hash is None
        assert tx.block_number is None
        assert tx.transaction_index is None

    def test_malformed_field_is_named(self, fee_market_tx: dict[str, Any]) -> None:
        """Test the offending field is named in the error."""
        fee_market_tx["maxFeePerGas"] = "0xnothex"

        with pytest.raises(MalformedHexError) as exc_info:
            TransactionWire.model_validate(fee_market_tx).decode()

        assert exc_info.value.field == "maxFeePerGas"

    def test_decoded_transaction_is_frozen(self, fee_market_tx: dict[str, Any]) -> None:
        """Test decoded values are immutable."""
        tx = TransactionWire.model_validate(fee_market_tx).decode()

        with pytest.raises(ValidationError):
            tx.value = 0  # type: ignore[misc]


class TestBlockDecode:
    """Tests for BlockWire.decode."""

    def test_block_fields(self, block_result: dict[str, Any]) -> None:
        """Test block quantities decode and identifiers pass through."""
        block = BlockWire.model_validate(block_result).decode()

        assert block.base_fee_per_gas == 7
        assert block.difficulty == 0
        assert block.gas_limit == 30_000_000
        assert block.gas_used == 42_000
        assert block.hash == block_result["hash"]
        assert block.miner == block_result["miner"]
        assert block.mix_hash == block_result["mixHash"]
        assert block.nonce == 0
        assert block.number == 12710481
        assert block.parent_hash == block_result["parentHash"]
        assert block.size == 544
        assert block.timestamp == 1672531200
        assert block.total_difficulty == 2**88

    def test_transaction_order_is_preserved(self, block_result: dict[str, Any]) -> None:
        """Test transactions keep their wire order."""
        block = BlockWire.model_validate(block_result).decode()

        assert [tx.hash for tx in block.transactions] == [
            tx["hash"] for tx in block_result["transactions"]
        ]
        assert [tx.transaction_index for tx in block.transactions] == [0, 1]

    def test_empty_block_has_empty_transactions(
        self, block_result: dict[str, Any]
    ) -> None:
        """Test an empty transaction list decodes to zero transactions, not None."""
        block_result["transactions"] = []
        block = BlockWire.model_validate(block_result).decode()

        assert block.transactions == ()

    def test_pre_fee_market_block(self, block_result: dict[str, Any]) -> None:
        """Test blocks without baseFeePerGas or totalDifficulty keep them absent."""
        del block_result["baseFeePerGas"]
        del block_result["totalDifficulty"]
        block = BlockWire.model_validate(block_result).decode()

        assert block.base_fee_per_gas is None
        assert block.total_difficulty is None

    def test_malformed_transaction_aborts_block(
        self, block_result: dict[str, Any]
    ) -> None:
        """Test one bad transaction field aborts the whole block decode."""
        block_result["transactions"][1]["gasPrice"] = "0xoops"
        wire = BlockWire.model_validate(block_result)

        with pytest.raises(MalformedHexError) as exc_info:
            wire.decode()

        assert exc_info.value.field == "transactions[1].gasPrice"
        assert "transactions[1].gasPrice" in str(exc_info.value)

    def test_malformed_header_field_is_named(self, block_result: dict[str, Any]) -> None:
        """Test block header errors carry the header field name."""
        block_result["gasUsed"] = "0x12g4"

        with pytest.raises(MalformedHexError) as exc_info:
            BlockWire.model_validate(block_result).decode()

        assert exc_info.value.field == "gasUsed"

    def test_overflowing_difficulty_raises(self, block_result: dict[str, Any]) -> None:
        """Test quantities beyond 256 bits are rejected."""
        block_result["totalDifficulty"] = "0x1" + "0" * 64

        with pytest.raises(MalformedHexError, match="256-bit"):
            BlockWire.model_validate(block_result).decode()


class TestParseHelpers:
    """Tests for parse_block and parse_transaction."""

    def test_parse_block(self, block_result: dict[str, Any]) -> None:
        """Test a raw result parses into a Block."""
        block = parse_block(block_result)

        assert isinstance(block, Block)
        assert len(block.transactions) == 2

    def test_parse_block_wrong_shape(self, block_result: dict[str, Any]) -> None:
        """Test missing required fields surface as ProtocolError."""
        del block_result["miner"]

        with pytest.raises(ProtocolError, match="Unexpected block shape"):
            parse_block(block_result)

    def test_parse_block_with_hash_only_transactions(
        self, block_result: dict[str, Any]
    ) -> None:
        """Test a block without full transaction objects is rejected."""
        block_result["transactions"] = ["0x" + "cd" * 32]

        with pytest.raises(ProtocolError):
            parse_block(block_result)

    def test_parse_transaction(self, fee_market_tx: dict[str, Any]) -> None:
        """Test a raw result parses into a Transaction."""
        assert parse_transaction(fee_market_tx).nonce == 42

    def test_parse_transaction_wrong_shape(self) -> None:
        """Test a result that is not a transaction is rejected."""
        with pytest.raises(ProtocolError, match="Unexpected transaction shape"):
            parse_transaction({"hash": "0x1"})

    def test_parse_transaction_requires_gas_price(
        self, fee_market_tx: dict[str, Any]
    ) -> None:
        """Test gasPrice is required even when fee market fields are present."""
        del fee_market_tx["gasPrice"]

        with pytest.raises(ProtocolError, match="Unexpected transaction shape"):
            parse_transaction(fee_market_tx)
