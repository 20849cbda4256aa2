"""
Configuration dataclasses and constants.
"""

from harness.config.config import LaunchConfig
from harness.config.constants import (
    BITCOIND_EXE_ENV,
    COIN,
    DEFAULT_WALLET,
    FUND_BLOCKS,
    TEMPDIR_ROOT_ENV,
    TRANSFER_AMOUNT_SATS,
    TXINDEX_FLAG,
    ServiceType,
)

__all__ = [
    # config.py
    "LaunchConfig",
    # constants.py
    "ServiceType",
    "FUND_BLOCKS",
    "TRANSFER_AMOUNT_SATS",
    "COIN",
    "TXINDEX_FLAG",
    "DEFAULT_WALLET",
    "BITCOIND_EXE_ENV",
    "TEMPDIR_ROOT_ENV",
]
