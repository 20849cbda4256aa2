"""
Process service that is only ready once its RPC answers.
"""

import logging
from typing import Any

import flexitest

from harness.wait import wait_until


class RpcService(flexitest.service.ProcService):
    """
    flexitest `ProcService` with an RPC client and a readiness wait.

    Subclasses build the client from `self.props` in `create_rpc()` and pick the
    call that proves the daemon is serving in `_rpc_health_check()`.
    """

    def __init__(
        self,
        props: dict[str, Any],
        cmd: list[str],
        stdout: str | None = None,
        name: str | None = None,
    ):
        """
        Initialize service wrapper.

        Args:
            props: Service properties (ports, URLs, etc.)
            cmd: Command and arguments to execute
            stdout: Path to log file for stdout/stderr, None to inherit ours
            name: Service name for logging
        """
        super().__init__(props, cmd, stdout)
        self._name = name or cmd[0]
        self._logger = logging.getLogger(f"service.{self._name}")

    @property
    def name(self) -> str:
        return self._name

    def create_rpc(self):
        """
        Create RPC client for this service.

        Raises:
            NotImplementedError: If subclass doesn't implement this method
            RuntimeError: If service is not running
        """
        raise NotImplementedError("Subclass must implement create_rpc()")

    def _rpc_health_check(self, rpc: Any) -> None:
        """
        Perform RPC call to verify service health.

        Subclasses override this to call a simple RPC method that proves the service is responsive.
        This method should raise an exception if the service is unhealthy.
        """
        raise NotImplementedError("Subclass must implement _rpc_health_check()")

    def check_health(self) -> bool:
        """
        Check if service is healthy and ready to accept requests.

        Checks process status and performs RPC health check via _rpc_health_check().
        """
        if not self.check_status():
            return False

        try:
            rpc = self.create_rpc()
            self._rpc_health_check(rpc)
            return True
        except Exception:
            return False

    def _ready_or_exited(self) -> bool:
        return not self.check_status() or self.check_health()

    def wait_for_ready(self, timeout: int = 30, interval: float = 0.5) -> None:
        """
        Wait until service is healthy and ready.

        Raises:
            RuntimeError: If the process exits before it is ready
            AssertionError: If service doesn't become ready within timeout
        """
        self._logger.debug(f"waiting up to {timeout}s for '{self._name}' to become ready")
        wait_until(
            self._ready_or_exited,
            error_with=f"Service '{self._name}' not ready",
            timeout=timeout,
            step=interval,
        )
        if not self.check_status():
            raise RuntimeError(f"Service '{self._name}' exited before becoming ready")
