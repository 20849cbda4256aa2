"""
Constants used throughout the harness.
"""

from enum import Enum


class ServiceType(str, Enum):
    """
    Service type identifiers for test environments.

    Using str Enum allows direct string comparison while providing
    IDE autocomplete and type safety.

    Usage:
        services = {ServiceType.Bitcoin: bitcoind}
        bitcoin = self.get_service(ServiceType.Bitcoin)
    """

    Bitcoin = "bitcoin"

    def __str__(self) -> str:
        """Allow direct use in f-strings and format operations."""
        return self.value


# Coinbase outputs need 100 confirmations, so block 101 makes the first reward spendable.
FUND_BLOCKS = 101

TRANSFER_AMOUNT_SATS = 1_000_000
COIN = 100_000_000

TXINDEX_FLAG = "-txindex"
DEFAULT_WALLET = "default"

BITCOIND_EXE_ENV = "BITCOIND_EXE"
TEMPDIR_ROOT_ENV = "TEMPDIR_ROOT"
