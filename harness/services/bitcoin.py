"""
Bitcoin service wrapper with Bitcoin-specific health checks.
"""

from typing import TypedDict

from bitcoinlib.services.bitcoind import BitcoindClient

from harness.services.base import RpcService


class BitcoinProps(TypedDict):
    """Properties for Bitcoin service."""

    p2p_port: int
    rpc_port: int
    rpc_user: str
    rpc_password: str
    rpc_url: str
    datadir: str
    walletname: str | None
    txindex: bool


class BitcoinService(RpcService):
    """
    RpcService for Bitcoin with health check via `getblockchaininfo`.
    """

    props: BitcoinProps

    def __init__(
        self,
        props: BitcoinProps,
        cmd: list[str],
        stdout: str | None = None,
        name: str | None = None,
    ):
        super().__init__(dict(props), cmd, stdout, name)

    def _rpc_health_check(self, rpc):
        """Check Bitcoin health by calling getblockchaininfo."""
        rpc.proxy.getblockchaininfo()

    def rpc_url(self) -> str:
        return self.props["rpc_url"]

    def rpc_url_with_wallet(self, walletname: str) -> str:
        return f"{self.props['rpc_url']}/wallet/{walletname}"

    def create_rpc(self) -> BitcoindClient:
        """Client for node-scoped calls, not bound to any wallet."""
        if not self.check_status():
            raise RuntimeError("Service is not running")

        return BitcoindClient(base_url=self.rpc_url(), network="regtest")

    def create_wallet_rpc(self, walletname: str | None = None) -> BitcoindClient:
        """
        Client bound to `walletname`, or to the wallet this service was configured with.
        """
        if not self.check_status():
            raise RuntimeError("Service is not running")

        walletname = walletname or self.props["walletname"]
        if walletname is None:
            raise RuntimeError(f"Service '{self.name}' has no wallet configured")

        return BitcoindClient(base_url=self.rpc_url_with_wallet(walletname), network="regtest")
