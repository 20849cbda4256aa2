"""
Regtest bitcoind harness for integration tests.
Provides node setup per wallet/txindex intent, and scenario helpers that drive a
node into known chain and wallet states.
"""

from .errors import DecodingError, HarnessError, RpcError, SetupError
from .node import BitcoinNode, DefaultWallet, LoadWallet, NoWallet, Wallet
from .scenarios import (
    create_mempool_transaction,
    create_mined_transaction,
    fund_wallet,
    mine_a_block,
)
from .test_logging import init_logger
from .util import random_tmp_file

__all__ = [
    "BitcoinNode",
    "DefaultWallet",
    "LoadWallet",
    "NoWallet",
    "Wallet",
    "fund_wallet",
    "mine_a_block",
    "create_mempool_transaction",
    "create_mined_transaction",
    "HarnessError",
    "SetupError",
    "RpcError",
    "DecodingError",
    "init_logger",
    "random_tmp_file",
]
