"""
Pytest configuration and fixtures for the harness.

The unit tests run against fakes of the bitcoind proxy and service. The
integration tests start real nodes and are skipped when no bitcoind can be found.
"""

# pylint: disable=redefined-outer-name

import logging
from collections.abc import Callable
from typing import Any

import pytest
from bitcoinlib.services.authproxy import JSONRPCException

from harness.errors import SetupError
from harness.node import exe_path

TXID_A = "a" * 64
TXID_B = "b" * 64
BLOCK_HASH = "0f" * 32
ADDRESS = "bcrt1qharnessaddress0000000000000000000000"


class FakeProxy:
    """
    Stand-in for `AuthServiceProxy`.

    `responses` maps a method to either a value or a callable taking the call's
    params. Exceptions are raised instead of returned. Every call is recorded.
    """

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, tuple]] = []

    def __getattr__(self, method: str) -> Callable[..., Any]:
        if method.startswith("__"):
            raise AttributeError(method)

        def call(*params):
            self.calls.append((method, params))
            if method not in self.responses:
                raise JSONRPCException({"code": -32601, "message": "Method not found"})
            response = self.responses[method]
            if isinstance(response, Exception):
                raise response
            if callable(response):
                return response(*params)
            return response

        return call

    def methods(self) -> list[str]:
        return [m for m, _ in self.calls]


class FakeClient:
    def __init__(self, proxy: FakeProxy):
        self.proxy = proxy


class FakeNode:
    def __init__(self, proxy: FakeProxy):
        self.client = FakeClient(proxy)


def scenario_responses(block_txs: list[dict] | None = None) -> dict[str, Any]:
    """Responses for a wallet that can fund, mine and send."""
    if block_txs is None:
        block_txs = [{"txid": TXID_B, "vout": []}, {"txid": TXID_A, "vout": []}]
    return {
        "getnewaddress": ADDRESS,
        "generatetoaddress": lambda n, _addr: [BLOCK_HASH] * n,
        "sendtoaddress": TXID_A,
        "getbestblockhash": BLOCK_HASH,
        "getblock": {"hash": BLOCK_HASH, "tx": block_txs},
    }


@pytest.fixture
def proxy() -> FakeProxy:
    return FakeProxy(scenario_responses())


@pytest.fixture
def fake_node(proxy) -> FakeNode:
    return FakeNode(proxy)


@pytest.fixture
def restore_root_logger():
    """Undo handler/filter changes a test makes to the root logger."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    filters = {h: list(h.filters) for h in handlers}
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler, saved in filters.items():
        handler.filters = saved
    root.setLevel(level)


def bitcoind_available() -> bool:
    try:
        exe_path()
    except SetupError:
        return False
    return True


requires_bitcoind = pytest.mark.skipif(
    not bitcoind_available(), reason="bitcoind not found (set BITCOIND_EXE or PATH)"
)
