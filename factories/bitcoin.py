"""
Bitcoin service factory.
Creates Bitcoin regtest nodes for testing.
"""

import flexitest

from harness.config import LaunchConfig, ServiceType
from harness.node import exe_path, start_bitcoin_service
from harness.services import BitcoinService


class BitcoinFactory(flexitest.Factory):
    """
    Factory for creating Bitcoin regtest nodes.

    Usage:
        factory = BitcoinFactory(range(18443, 18543))
        bitcoin = factory.create_regtest(resolve_conf(NoWallet(), txindex=True))
        rpc = bitcoin.create_rpc()
    """

    def __init__(self, port_range: range):
        ports = list(port_range)
        if any(p < 1024 or p > 65535 for p in ports):
            raise ValueError(
                f"BitcoinFactory: Port range must be between 1024 and 65535. "
                f"Got: {port_range.start}-{port_range.stop - 1}"
            )
        super().__init__(ports)

    @flexitest.with_ectx("ctx")
    def create_regtest(self, conf: LaunchConfig | None = None, **kwargs) -> BitcoinService:
        """
        Create a Bitcoin regtest node in the env's service dir.

        Returns:
            Service with RPC access via .create_rpc() and .create_wallet_rpc()

        Raises:
            SetupError: If bitcoind can't be found, spawned or reached
        """
        # The `with_ectx` ensures this is available.
        ctx: flexitest.EnvContext = kwargs["ctx"]
        conf = conf or LaunchConfig()

        exe = exe_path()
        datadir = ctx.make_service_dir(ServiceType.Bitcoin)
        p2p_port = self.next_port()
        rpc_port = self.next_port()

        return start_bitcoin_service(
            exe, conf, datadir, p2p_port, rpc_port, name=str(ServiceType.Bitcoin)
        )
