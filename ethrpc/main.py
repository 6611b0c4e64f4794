"""Interactive Ethereum JSON-RPC client.

Usage:
    eth-rpc-cli --rpc-url https://eth.llamarpc.com
    python -m ethrpc.main            # reads ETH_RPC_URL from the environment
"""

from argparse import ArgumentParser, Namespace
from asyncio import run
import sys

from rich.console import Console

from ethrpc.cli.menu import Menu
from ethrpc.helpers.config import get_eth_rpc_url, get_log_level, get_rpc_timeout
from ethrpc.helpers.logging import get_logger, set_log_level
from ethrpc.helpers.rpc import RPCClient, create_http_client


logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> Namespace:
    parser = ArgumentParser(description="Query an Ethereum JSON-RPC endpoint")
    parser.add_argument(
        "--rpc-url",
        default=None,
        help="JSON-RPC endpoint URL (default: ETH_RPC_URL)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: ETH_RPC_TIMEOUT or 30)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print plain 'Label: value' lines instead of tables",
    )
    return parser.parse_args(argv)


async def main(rpc_url: str, timeout: float, *, plain: bool = False) -> None:
    """Run the interactive menu against one endpoint."""
    rpc_client = RPCClient(rpc_url, timeout=timeout)
    logger.info("Using RPC endpoint %s", rpc_url)

    async with create_http_client(timeout=timeout) as http_client:
        await Menu(rpc_client, http_client, console=Console(), plain=plain).run()


def cli(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    args = parse_args(argv)
    try:
        set_log_level(get_log_level(args.log_level))
        rpc_url = get_eth_rpc_url(args.rpc_url)
        timeout = get_rpc_timeout(args.timeout)
    except ValueError as e:
        Console(stderr=True).print(f"[bold red]Configuration error:[/bold red] {e}")
        return 2

    try:
        run(main(rpc_url, timeout, plain=args.plain))
    except KeyboardInterrupt:
        # asyncio.run cancels the menu task on Ctrl-C and re-raises here
        Console(stderr=True).print()
        logger.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(cli())
