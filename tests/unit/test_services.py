"""Service readiness and the runtime's per-test bitcoind description."""

import logging

import flexitest
import pytest

from harness import test_logging
from harness.config import ServiceType
from harness.runtime import BitcoindTestRuntime, describe_bitcoind
from harness.services import BitcoinService


class FakeEnv:
    def __init__(self, services):
        self.services = services


class PropsService:
    def __init__(self, **props):
        self.props = props

    def get_prop(self, name):
        return self.props[name]


def _service() -> BitcoinService:
    return BitcoinService({"rpc_url": "http://u:p@127.0.0.1:1"}, ["bitcoind"], name="bitcoin")


def test_wait_for_ready_fails_fast_when_process_exits(monkeypatch):
    svc = _service()
    monkeypatch.setattr(svc, "check_status", lambda: False)

    with pytest.raises(RuntimeError, match="'bitcoin' exited before becoming ready"):
        svc.wait_for_ready(timeout=60, interval=0.01)


def test_wait_for_ready_returns_once_healthy(monkeypatch):
    svc = _service()
    monkeypatch.setattr(svc, "check_status", lambda: True)
    monkeypatch.setattr(svc, "check_health", lambda: True)

    svc.wait_for_ready(timeout=1, interval=0.01)


def test_wait_for_ready_times_out_while_unhealthy(monkeypatch):
    svc = _service()
    monkeypatch.setattr(svc, "check_status", lambda: True)
    monkeypatch.setattr(svc, "check_health", lambda: False)

    with pytest.raises(AssertionError, match="'bitcoin' not ready"):
        svc.wait_for_ready(timeout=0.05, interval=0.01)


def test_describe_bitcoind():
    svc = PropsService(rpc_port=18443, datadir="/tmp/dd/bitcoin")
    env = FakeEnv({ServiceType.Bitcoin: svc})

    assert describe_bitcoind(env) == "bitcoind on rpc port 18443, datadir /tmp/dd/bitcoin"


def test_describe_bitcoind_without_bitcoin_service():
    assert describe_bitcoind(FakeEnv({})) is None


def test_runtime_tags_test_and_logs_bitcoind(monkeypatch, caplog):
    seen = {}

    def fake_exec(self, test_name, env):
        seen["current"] = test_logging._current_test_name
        return "result"

    monkeypatch.setattr(flexitest.TestRuntime, "_exec_test", fake_exec)
    runtime = object.__new__(BitcoindTestRuntime)
    env = FakeEnv({ServiceType.Bitcoin: PropsService(rpc_port=18443, datadir="/dd")})

    with caplog.at_level(logging.INFO, logger="harness.runtime"):
        assert runtime._exec_test("test_fund_wallet", env) == "result"

    assert seen["current"] == "test_fund_wallet"
    assert test_logging._current_test_name is None
    assert "bitcoind on rpc port 18443, datadir /dd" in caplog.text
