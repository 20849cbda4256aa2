"""
Errors raised by the harness.

None of these are meant to be recovered from: they abort the test that hit them.
"""


class HarnessError(Exception):
    """Base class for harness failures."""


class SetupError(HarnessError):
    """Raised when the bitcoind executable is missing or the node fails to start."""


class RpcError(HarnessError):
    """Raised when an RPC call fails or the node cannot be reached."""

    def __init__(self, step: str, error: dict | None = None):
        error = error or {}
        self.step = step
        self.code = error.get("code")
        self.message = error.get("message")
        if self.code is not None:
            super().__init__(f"{step}: RPC Error {self.code}: {self.message}")
        else:
            super().__init__(step)


class DecodingError(HarnessError):
    """Raised when an RPC response can't be interpreted as the expected type."""
