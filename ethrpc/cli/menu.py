"""Interactive numbered menu over the RPC client.

Each round shows the options, reads a selection and at most one parameter,
issues a single request, prints the report and asks whether to continue.
Any ``EthRpcError`` ends only the current round.
"""

from collections.abc import Callable
from enum import IntEnum
import re

import httpx
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ethrpc.cli.presenter import (
    Section,
    accounts_lines,
    balance_lines,
    block_sections,
    quantity_lines,
    render_sections,
    to_table,
    transaction_lines,
)
from ethrpc.helpers.errors import EthRpcError, InvalidUserInputError
from ethrpc.helpers.logging import get_logger
from ethrpc.helpers.rpc import RPCClient


logger = get_logger(__name__)

HASH_PATTERN = re.compile(r"0x[0-9a-fA-F]{64}")
DIGITS_PATTERN = re.compile(r"[0-9]+")


class MenuOption(IntEnum):
    """Operations offered by the menu, numbered as shown to the user."""

    GET_ACCOUNTS = 1
    GET_GAS_PRICE = 2
    GET_BLOCK_NUMBER = 3
    GET_BALANCE = 4
    GET_TRANSACTION_COUNT = 5
    GET_BLOCK_TRANSACTION_COUNT = 6
    GET_BLOCK = 7
    GET_TRANSACTION = 8

    @property
    def label(self) -> str:
        return MENU_LABELS[self]


MENU_LABELS: dict[MenuOption, str] = {
    MenuOption.GET_ACCOUNTS: "Get node accounts",
    MenuOption.GET_GAS_PRICE: "Get gas price",
    MenuOption.GET_BLOCK_NUMBER: "Get block number",
    MenuOption.GET_BALANCE: "Get balance",
    MenuOption.GET_TRANSACTION_COUNT: "Get transaction count for an address",
    MenuOption.GET_BLOCK_TRANSACTION_COUNT: "Get block transaction count",
    MenuOption.GET_BLOCK: "Get block info",
    MenuOption.GET_TRANSACTION: "Get transaction",
}


def parse_option(text: str) -> MenuOption:
    """Map a menu selection to an option.

    Raises:
        InvalidUserInputError: If the input is not one of the listed numbers
    """
    text = text.strip()
    if DIGITS_PATTERN.fullmatch(text) and int(text) in MenuOption:
        return MenuOption(int(text))
    msg = f"Invalid input: {text!r}"
    raise InvalidUserInputError(msg)


def parse_block_number(text: str) -> int | None:
    """Parse a decimal block number; ``0`` means the latest block.

    Only ASCII digits are accepted, so signs, underscores and other
    scripts' digits are rejected.

    Raises:
        InvalidUserInputError: If the input is not a non-negative integer
    """
    text = text.strip()
    if not DIGITS_PATTERN.fullmatch(text):
        msg = f"Invalid block number: {text!r}"
        raise InvalidUserInputError(msg)
    return int(text) or None


def parse_block_identifier(text: str) -> tuple[str | None, int | None]:
    """Parse either a 0x block hash or a decimal block number.

    Returns:
        ``(block_hash, None)`` for a hash, ``(None, block_number)`` otherwise
    """
    text = text.strip()
    if text.startswith("0x"):
        if not HASH_PATTERN.fullmatch(text):
            msg = f"Invalid block hash: {text!r}"
            raise InvalidUserInputError(msg)
        return text, None
    return None, parse_block_number(text)


def require_value(text: str, name: str) -> str:
    value = text.strip()
    if not value:
        msg = f"{name} must not be empty"
        raise InvalidUserInputError(msg)
    return value


def should_continue(answer: str) -> bool:
    """Anything except N/n continues."""
    return answer.strip() not in ("N", "n")


class Menu:
    """Interactive driver tying prompts, the RPC client and the presenter together."""

    def __init__(
        self,
        rpc_client: RPCClient,
        http_client: httpx.AsyncClient,
        console: Console | None = None,
        ask: Callable[[str], str] | None = None,
        *,
        plain: bool = False,
    ) -> None:
        """Initialize the menu.

        Args:
            rpc_client: Client used for every request
            http_client: HTTP client passed through to the RPC client
            console: Rich console for output (defaults to stdout)
            ask: Prompt function returning the user's answer
            plain: Print plain ``Label: value`` lines instead of tables
        """
        self.rpc_client = rpc_client
        self.http_client = http_client
        self.console = console or Console()
        self.ask = ask or (lambda prompt: Prompt.ask(prompt, console=self.console))
        self.plain = plain

    def show_options(self) -> None:
        for option in MenuOption:
            self.console.print(f"[bold cyan]{option.value}) {option.label}[/bold cyan]")

    def display(self, sections: list[Section]) -> None:
        if self.plain:
            self.console.print(render_sections(sections), markup=False, highlight=False)
            return
        for title, lines in sections:
            self.console.print(to_table(lines, title=title))

    async def execute(self, option: MenuOption) -> list[Section]:
        """Collect the option's parameter, run its request and return the report."""
        rpc, client = self.rpc_client, self.http_client

        match option:
            case MenuOption.GET_ACCOUNTS:
                with self.console.status("Fetching..."):
                    accounts = await rpc.get_accounts(client)
                return [("Accounts", accounts_lines(accounts))]

            case MenuOption.GET_GAS_PRICE:
                with self.console.status("Fetching..."):
                    gas_price = await rpc.get_gas_price(client)
                return [("Gas Price", quantity_lines("Wei", gas_price))]

            case MenuOption.GET_BLOCK_NUMBER:
                with self.console.status("Fetching..."):
                    number = await rpc.get_block_number(client)
                return [("Latest Block", quantity_lines("Block", number))]

            case MenuOption.GET_BALANCE:
                address = require_value(self.ask("Address"), "Address")
                with self.console.status("Fetching..."):
                    wei = await rpc.get_balance(client, address)
                return [("Balance", balance_lines(wei))]

            case MenuOption.GET_TRANSACTION_COUNT:
                address = require_value(self.ask("Address"), "Address")
                with self.console.status("Fetching..."):
                    count = await rpc.get_transaction_count(client, address)
                return [("Transaction Count", quantity_lines("Transactions", count))]

            case MenuOption.GET_BLOCK_TRANSACTION_COUNT:
                block_hash, block_number = parse_block_identifier(
                    self.ask("Block number or hash (0 for latest)")
                )
                with self.console.status("Fetching..."):
                    count = await rpc.get_block_transaction_count(
                        client, block_hash=block_hash, block_number=block_number
                    )
                return [("Block Transaction Count", quantity_lines("Transactions", count))]

            case MenuOption.GET_BLOCK:
                block_hash, block_number = parse_block_identifier(
                    self.ask("Block number or hash (0 for latest)")
                )
                with self.console.status("Fetching..."):
                    block = await rpc.get_block(
                        client, block_hash=block_hash, block_number=block_number
                    )
                return block_sections(block)

            case MenuOption.GET_TRANSACTION:
                tx_hash = require_value(self.ask("Transaction hash"), "Transaction hash")
                with self.console.status("Fetching..."):
                    tx = await rpc.get_transaction(client, tx_hash)
                return [("Transaction", transaction_lines(tx))]

    async def run_once(self) -> bool:
        """Run one menu round.

        Returns:
            Whether the user wants another round
        """
        self.show_options()
        try:
            option = parse_option(self.ask("Select an option"))
            self.console.print(f"{option.label}...")
            self.display(await self.execute(option))
        except EthRpcError as e:
            logger.warning("%s: %s", type(e).__name__, e)
            self.console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")

        return should_continue(self.ask("Continue? (Y/N)"))

    async def run(self) -> None:
        """Loop until the user declines to continue or closes input."""
        while True:
            try:
                if not await self.run_once():
                    break
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break


__all__ = [
    "Menu",
    "MenuOption",
    "parse_block_identifier",
    "parse_block_number",
    "parse_option",
    "require_value",
    "should_continue",
]
