"""
Configuration dataclasses for the bitcoind service.
"""

from dataclasses import dataclass, field

from harness.config.constants import DEFAULT_WALLET


@dataclass
class LaunchConfig:
    """
    Launch configuration for a regtest `bitcoind`.

    `wallet` is the wallet created once the node is ready, `None` for a node
    without a wallet. `args` are passed to the daemon before the harness-managed
    flags (datadir, ports, credentials).
    """

    wallet: str | None = field(default=DEFAULT_WALLET)
    args: list[str] = field(default_factory=lambda: ["-regtest", "-fallbackfee=0.0001"])
    view_stdout: bool = field(default=False)
    staticdir: str | None = field(default=None)
    tmpdir: str | None = field(default=None)
    rpc_user: str = field(default="harness")
    ready_timeout: int = field(default=30)

    def build_cmd(
        self,
        exe: str,
        datadir: str,
        p2p_port: int,
        rpc_port: int,
        rpc_password: str,
    ) -> list[str]:
        # fmt: off
        return [
            exe,
            *self.args,
            "-listen=0",
            "-printtoconsole",
            f"-port={p2p_port}",
            f"-datadir={datadir}",
            f"-rpcport={rpc_port}",
            f"-rpcuser={self.rpc_user}",
            f"-rpcpassword={rpc_password}",
        ]
        # fmt: on
