"""Environment configurations for functional tests."""

from envconfigs.bitcoin import NAMED_WALLET, BitcoinEnvConfig, node_variant_envs

__all__ = [
    "BitcoinEnvConfig",
    "NAMED_WALLET",
    "node_variant_envs",
]
