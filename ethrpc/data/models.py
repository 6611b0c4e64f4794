"""Pydantic models for JSON-RPC block and transaction results.

Each result shape has a wire model, which mirrors the JSON the node sends
(quantities as hex strings, camelCase keys), and a decoded model holding
plain integers. ``decode()`` on a wire model is the only way from one to the
other; it either returns a complete decoded value or raises.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ethrpc.helpers.errors import MalformedHexError, ProtocolError
from ethrpc.helpers.parsers import decode_hex, decode_optional_hex


type Quantity = int


def decode_quantity(hex_value: str, field: str | None = None) -> Quantity:
    """Decode a scalar quantity result such as a gas price or balance."""
    return decode_hex(hex_value, strip_prefix=True, field=field)


class Transaction(BaseModel):
    """Decoded transaction."""

    block_hash: str | None
    block_number: int | None
    from_address: str
    gas: int
    gas_price: int
    max_priority_fee_per_gas: int | None = None
    max_fee_per_gas: int | None = None
    hash: str
    nonce: int
    to: str | None = None
    transaction_index: int | None
    value: int

    model_config = ConfigDict(frozen=True)


class TransactionWire(BaseModel):
    """Transaction object as returned by the node."""

    block_hash: str | None = Field(default=None, alias="blockHash")
    block_number: str | None = Field(default=None, alias="blockNumber")
    from_address: str = Field(..., alias="from")
    gas: str
    gas_price: str = Field(..., alias="gasPrice")
    max_priority_fee_per_gas: str | None = Field(
        default=None, alias="maxPriorityFeePerGas"
    )
    max_fee_per_gas: str | None = Field(default=None, alias="maxFeePerGas")
    hash: str
    nonce: str
    to: str | None = None
    transaction_index: str | None = Field(default=None, alias="transactionIndex")
    value: str

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def decode(self) -> Transaction:
        """Decode hex quantities; absent optional fields stay absent."""
        return Transaction(
            block_hash=self.block_hash,
            block_number=decode_optional_hex(self.block_number, "blockNumber"),
            from_address=self.from_address,
            gas=decode_hex(self.gas, field="gas"),
            gas_price=decode_hex(self.gas_price, field="gasPrice"),
            max_priority_fee_per_gas=decode_optional_hex(
                self.max_priority_fee_per_gas, "maxPriorityFeePerGas"
            ),
            max_fee_per_gas=decode_optional_hex(self.max_fee_per_gas, "maxFeePerGas"),
            hash=self.hash,
            nonce=decode_hex(self.nonce, field="nonce"),
            to=self.to,
            transaction_index=decode_optional_hex(
                self.transaction_index, "transactionIndex"
            ),
            value=decode_hex(self.value, field="value"),
        )


class Block(BaseModel):
    """Decoded block. Hashes and the miner address are kept verbatim."""

    base_fee_per_gas: int | None = None
    difficulty: int
    gas_limit: int
    gas_used: int
    hash: str
    miner: str
    mix_hash: str
    nonce: int
    number: int
    parent_hash: str
    size: int
    timestamp: int
    total_difficulty: int | None = None
    transactions: tuple[Transaction, ...] = ()

    model_config = ConfigDict(frozen=True)


class BlockWire(BaseModel):
    """Block object as returned by the node with full transaction objects."""

    base_fee_per_gas: str | None = Field(default=None, alias="baseFeePerGas")
    difficulty: str
    gas_limit: str = Field(..., alias="gasLimit")
    gas_used: str = Field(..., alias="gasUsed")
    hash: str
    miner: str
    mix_hash: str = Field(..., alias="mixHash")
    nonce: str
    number: str
    parent_hash: str = Field(..., alias="parentHash")
    size: str
    timestamp: str
    total_difficulty: str | None = Field(default=None, alias="totalDifficulty")
    transactions: list[TransactionWire] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def decode(self) -> Block:
        """Decode every quantity, transactions included, preserving order.

        Raises:
            MalformedHexError: Tagged with the offending field path, e.g.
                ``transactions[3].gasPrice``. Nothing partial is returned.
        """
        transactions = []
        for idx, tx in enumerate(self.transactions):
            try:
                transactions.append(tx.decode())
            except MalformedHexError as e:
                raise e.with_field(f"transactions[{idx}]") from e

        return Block(
            base_fee_per_gas=decode_optional_hex(self.base_fee_per_gas, "baseFeePerGas"),
            difficulty=decode_hex(self.difficulty, field="difficulty"),
            gas_limit=decode_hex(self.gas_limit, field="gasLimit"),
            gas_used=decode_hex(self.gas_used, field="gasUsed"),
            hash=self.hash,
            miner=self.miner,
            mix_hash=self.mix_hash,
            nonce=decode_hex(self.nonce, field="nonce"),
            number=decode_hex(self.number, field="number"),
            parent_hash=self.parent_hash,
            size=decode_hex(self.size, field="size"),
            timestamp=decode_hex(self.timestamp, field="timestamp"),
            total_difficulty=decode_optional_hex(
                self.total_difficulty, "totalDifficulty"
            ),
            transactions=tuple(transactions),
        )


def parse_block(result: dict[str, Any]) -> Block:
    """Validate a raw ``eth_getBlockBy*`` result and decode it.

    Raises:
        ProtocolError: If the result does not have the block shape
        MalformedHexError: If any quantity fails to decode
    """
    try:
        wire = BlockWire.model_validate(result)
    except ValidationError as e:
        msg = f"Unexpected block shape: {e.error_count()} validation error(s)"
        raise ProtocolError(msg) from e
    return wire.decode()


def parse_transaction(result: dict[str, Any]) -> Transaction:
    """Validate a raw ``eth_getTransactionByHash`` result and decode it.

    Raises:
        ProtocolError: If the result does not have the transaction shape
        MalformedHexError: If any quantity fails to decode
    """
    try:
        wire = TransactionWire.model_validate(result)
    except ValidationError as e:
        msg = f"Unexpected transaction shape: {e.error_count()} validation error(s)"
        raise ProtocolError(msg) from e
    return wire.decode()


__all__ = [
    "Block",
    "BlockWire",
    "Quantity",
    "Transaction",
    "TransactionWire",
    "decode_quantity",
    "parse_block",
    "parse_transaction",
]
