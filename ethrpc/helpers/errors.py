"""Error taxonomy for RPC calls, response decoding and user input."""

from typing import Any


class EthRpcError(Exception):
    """Base class for every error the menu loop knows how to report."""


class MalformedHexError(EthRpcError, ValueError):
    """A hex quantity contained non-hex characters or overflowed 256 bits."""

    def __init__(self, value: str, reason: str, field: str | None = None) -> None:
        self.value = value
        self.reason = reason
        self.field = field
        super().__init__(str(self))

    def with_field(self, field: str) -> "MalformedHexError":
        """Return a copy of this error tagged with a (prefixed) field path."""
        path = field if self.field is None else f"{field}.{self.field}"
        return MalformedHexError(self.value, self.reason, path)

    def __str__(self) -> str:
        location = f" in field '{self.field}'" if self.field else ""
        return f"Malformed hex value {self.value!r}{location}: {self.reason}"


class TransportError(EthRpcError):
    """The HTTP round trip to the RPC endpoint failed."""


class ProtocolError(EthRpcError):
    """The endpoint answered with something that is not a usable JSON-RPC body."""


class MissingResultError(EthRpcError):
    """The response carried no usable ``result``."""


class RpcResponseError(MissingResultError):
    """The endpoint returned a JSON-RPC error object instead of a result."""

    def __init__(self, code: int | None, message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"RPC error {code}: {message}")


class InvalidUserInputError(EthRpcError, ValueError):
    """Interactive input could not be turned into a request parameter."""


__all__ = [
    "EthRpcError",
    "InvalidUserInputError",
    "MalformedHexError",
    "MissingResultError",
    "ProtocolError",
    "RpcResponseError",
    "TransportError",
]
