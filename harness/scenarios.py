"""
Fixed RPC sequences that put a node into a known chain/wallet state.

Every call goes through `rpc_call`, so a failing step aborts the scenario with an
`RpcError` naming it. Nothing is retried.

The node must have a wallet loaded, and must not be used concurrently: the
mined-transaction scenario finds its transaction by position in the new block.
"""

import logging
import re
from typing import Any, Protocol, TypedDict

from bitcoinlib.services.bitcoind import BitcoindClient

from harness.config import COIN, FUND_BLOCKS, TRANSFER_AMOUNT_SATS
from harness.errors import DecodingError
from harness.rpc import rpc_call

logger = logging.getLogger(__name__)

_TXID_RE = re.compile(r"^[0-9a-f]{64}$")

# Verbosity 2 makes getblock return decoded transactions instead of txids.
_BLOCK_VERBOSITY_TXS = 2


class NodeHandle(Protocol):
    client: BitcoindClient


class Transaction(TypedDict, total=False):
    """Decoded transaction as returned inside `getblock <hash> 2`."""

    txid: str
    hash: str
    version: int
    size: int
    vsize: int
    weight: int
    locktime: int
    vin: list[dict[str, Any]]
    vout: list[dict[str, Any]]
    hex: str


def _new_address(node: NodeHandle) -> str:
    return rpc_call(node.client, "failed to get new address", "getnewaddress")


def _generate_to_address(node: NodeHandle, nblocks: int, address: str) -> list[str]:
    return rpc_call(
        node.client,
        "failed to generate to address",
        "generatetoaddress",
        nblocks,
        address,
    )


def _parse_txid(value: Any) -> str:
    if not isinstance(value, str) or not _TXID_RE.match(value):
        raise DecodingError(f"failed to convert hex to txid: {value!r}")
    return value


def fund_wallet(node: NodeHandle) -> None:
    """Generate `FUND_BLOCKS` blocks to a new address of the loaded wallet."""
    address = _new_address(node)
    _generate_to_address(node, FUND_BLOCKS, address)
    logger.debug(f"funded wallet with {FUND_BLOCKS} blocks to {address}")


def mine_a_block(node: NodeHandle) -> None:
    """Mine one block, paying the reward to a new address of the loaded wallet."""
    address = _new_address(node)
    _generate_to_address(node, 1, address)


def create_mempool_transaction(node: NodeHandle) -> tuple[str, str]:
    """
    Send `TRANSFER_AMOUNT_SATS` to a new address and leave it unconfirmed.

    Returns:
        The receive address and the txid.
    """
    address = _new_address(node)
    amount_btc = TRANSFER_AMOUNT_SATS / COIN

    result = rpc_call(
        node.client,
        "failed to send to address",
        "sendtoaddress",
        address,
        amount_btc,
    )
    txid = _parse_txid(result)

    logger.debug(f"sent {amount_btc} BTC to {address} in {txid}")
    return address, txid


def create_mined_transaction(node: NodeHandle) -> tuple[str, Transaction]:
    """
    Create a transaction and mine a block that includes it.

    The new block must hold only the coinbase and this transaction.

    Returns:
        The receive address and the decoded transaction.

    Raises:
        DecodingError: If the best block doesn't have that shape.
    """
    address, txid = create_mempool_transaction(node)
    mine_a_block(node)

    best_block_hash = rpc_call(
        node.client, "failed to get best block hash", "getbestblockhash"
    )
    best_block = rpc_call(
        node.client,
        "failed to get best block",
        "getblock",
        best_block_hash,
        _BLOCK_VERBOSITY_TXS,
    )

    txs = best_block.get("tx") if isinstance(best_block, dict) else None
    if not isinstance(txs, list) or len(txs) != 2:
        n = len(txs) if isinstance(txs, list) else None
        raise DecodingError(
            f"expected block {best_block_hash} to contain 2 transactions, got {n}"
        )

    tx: Transaction = txs[1]
    if tx.get("txid") != txid:
        raise DecodingError(
            f"expected {txid} at position 1 of {best_block_hash}, got {tx.get('txid')}"
        )

    return address, tx
