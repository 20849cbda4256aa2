"""
Step-labelled RPC calls against a bitcoind client.
"""

import http.client
import logging
from typing import Any

from bitcoinlib.services.authproxy import JSONRPCException
from bitcoinlib.services.bitcoind import BitcoindClient

from harness.errors import RpcError

logger = logging.getLogger(__name__)


def rpc_call(client: BitcoindClient, step: str, method: str, *params) -> Any:
    """
    Call `method` on the client's proxy.

    Any failure is raised as `RpcError` carrying `step`, e.g. "failed to get new address".

    Usage:
        addr = rpc_call(node.client, "failed to get new address", "getnewaddress")
    """
    logger.debug(f"RPC call: {method}{params}")
    try:
        return getattr(client.proxy, method)(*params)
    except JSONRPCException as e:
        logger.warning(f"{step}: RPC error: {e.error}")
        raise RpcError(step, e.error) from e
    except (OSError, http.client.HTTPException, ValueError) as e:
        logger.warning(f"{step}: RPC request failed: {e}")
        raise RpcError(step) from e
