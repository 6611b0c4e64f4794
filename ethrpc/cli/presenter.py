"""Render decoded RPC results as labeled lines.

Nothing here prints. ``render`` returns plain text and ``to_table`` returns a
rich ``Table``; the menu decides where either goes.
"""

from collections.abc import Sequence

from rich.table import Table

from ethrpc.data.models import Block, Transaction
from ethrpc.helpers.constants import MISSING_VALUE
from ethrpc.helpers.parsers import timestamp_to_datetime, wei_to_ether


type LabeledValues = Sequence[tuple[str, str]]
type Section = tuple[str, LabeledValues]

SECTION_SEPARATOR = "-" * 60


def format_optional(value: int | str | None) -> str:
    return MISSING_VALUE if value is None else str(value)


def format_timestamp(timestamp: int) -> str:
    """Show a Unix timestamp with its UTC date, or bare if out of range."""
    try:
        moment = timestamp_to_datetime(timestamp)
    except (OverflowError, OSError, ValueError):
        return str(timestamp)
    return f"{timestamp} ({moment.isoformat()})"


def render(labeled_values: LabeledValues) -> str:
    """Render ``(label, value)`` pairs as ``Label: value`` lines, in order."""
    return "".join(f"{label}: {value}\n" for label, value in labeled_values)


def to_table(labeled_values: LabeledValues, title: str | None = None) -> Table:
    """Build a two-column rich table from ``(label, value)`` pairs."""
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for label, value in labeled_values:
        table.add_row(label, value)
    return table


def quantity_lines(label: str, value: int) -> list[tuple[str, str]]:
    return [(label, str(value))]


def balance_lines(wei: int) -> list[tuple[str, str]]:
    """Balance in whole ether (truncated) and in wei."""
    return [("ETH", str(wei_to_ether(wei))), ("Wei", str(wei))]


def accounts_lines(accounts: Sequence[str]) -> list[tuple[str, str]]:
    if not accounts:
        return [("Accounts", "none")]
    return [(f"Account {idx}", address) for idx, address in enumerate(accounts)]


def transaction_lines(tx: Transaction) -> list[tuple[str, str]]:
    return [
        ("Hash", tx.hash),
        ("From", tx.from_address),
        ("To", format_optional(tx.to)),
        ("Value", str(tx.value)),
        ("Block Number", format_optional(tx.block_number)),
        ("Block Hash", format_optional(tx.block_hash)),
        ("Gas", str(tx.gas)),
        ("Gas Price", str(tx.gas_price)),
        ("Max Priority Fee Per Gas", format_optional(tx.max_priority_fee_per_gas)),
        ("Max Fee Per Gas", format_optional(tx.max_fee_per_gas)),
        ("Nonce", str(tx.nonce)),
        ("Transaction Index", format_optional(tx.transaction_index)),
    ]


def block_lines(block: Block) -> list[tuple[str, str]]:
    """Header fields of a block; transactions are rendered separately."""
    return [
        ("Hash", block.hash),
        ("Block Number", str(block.number)),
        ("Transactions Count", str(len(block.transactions))),
        ("Miner", block.miner),
        ("Base Fee Per Gas", format_optional(block.base_fee_per_gas)),
        ("Difficulty", str(block.difficulty)),
        ("Gas Limit", str(block.gas_limit)),
        ("Gas Used", str(block.gas_used)),
        ("Mix Hash", block.mix_hash),
        ("Nonce", str(block.nonce)),
        ("Parent Hash", block.parent_hash),
        ("Size", str(block.size)),
        ("Timestamp", format_timestamp(block.timestamp)),
        ("Total Difficulty", format_optional(block.total_difficulty)),
    ]


def block_sections(block: Block) -> list[Section]:
    """Block header section followed by one section per transaction, in order."""
    sections: list[Section] = [("Block", block_lines(block))]
    sections.extend(
        (f"Transaction {idx}", transaction_lines(tx))
        for idx, tx in enumerate(block.transactions)
    )
    return sections


def render_sections(sections: Sequence[Section]) -> str:
    """Render titled sections as plain text, separated by a rule line."""
    return f"{SECTION_SEPARATOR}\n".join(
        f"{title}\n{render(lines)}" for title, lines in sections
    )


__all__ = [
    "LabeledValues",
    "Section",
    "accounts_lines",
    "balance_lines",
    "block_lines",
    "block_sections",
    "format_optional",
    "format_timestamp",
    "quantity_lines",
    "render",
    "render_sections",
    "to_table",
    "transaction_lines",
]
