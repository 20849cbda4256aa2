"""
Test runtime that tags logs with the running test and says which bitcoind it uses.
"""

import logging

import flexitest

from harness.config import ServiceType
from harness.test_logging import set_current_test

logger = logging.getLogger(__name__)


def describe_bitcoind(env) -> str | None:
    """
    Where the env's bitcoind listens and keeps its datadir, `None` if the env has none.

    Its `service.log` and `regtest/debug.log` live in that datadir.
    """
    svc = env.services.get(ServiceType.Bitcoin)
    if svc is None:
        return None
    return f"bitcoind on rpc port {svc.get_prop('rpc_port')}, datadir {svc.get_prop('datadir')}"


class BitcoindTestRuntime(flexitest.TestRuntime):
    def _exec_test(self, test_name: str, env):
        set_current_test(test_name)
        try:
            desc = describe_bitcoind(env)
            if desc is not None:
                logger.info(f"running against {desc}")
            return super()._exec_test(test_name, env)
        finally:
            set_current_test(None)
