"""Single-bitcoind environment configurations."""

from typing import cast

import flexitest

from factories.bitcoin import BitcoinFactory
from harness.config import ServiceType
from harness.node import DefaultWallet, LoadWallet, NoWallet, Wallet, resolve_conf

NAMED_WALLET = "harness_wallet"


class BitcoinEnvConfig(flexitest.EnvConfig):
    """
    One regtest bitcoind set up for a wallet intent, optionally with `-txindex`.
    """

    def __init__(self, wallet: Wallet, txindex: bool = False):
        self.wallet = wallet
        self.txindex = txindex

    def init(self, ectx: flexitest.EnvContext) -> flexitest.LiveEnv:
        btc_factory = cast(BitcoinFactory, ectx.get_factory(ServiceType.Bitcoin))

        conf = resolve_conf(self.wallet, self.txindex)
        bitcoind = btc_factory.create_regtest(conf)

        return flexitest.LiveEnv({ServiceType.Bitcoin: bitcoind})


def node_variant_envs() -> dict[str, flexitest.EnvConfig]:
    """The six node variants, keyed by env name."""
    return {
        "default_wallet": BitcoinEnvConfig(DefaultWallet()),
        "default_wallet_txindex": BitcoinEnvConfig(DefaultWallet(), txindex=True),
        "named_wallet": BitcoinEnvConfig(LoadWallet(NAMED_WALLET)),
        "named_wallet_txindex": BitcoinEnvConfig(LoadWallet(NAMED_WALLET), txindex=True),
        "no_wallet": BitcoinEnvConfig(NoWallet()),
        "no_wallet_txindex": BitcoinEnvConfig(NoWallet(), txindex=True),
    }
