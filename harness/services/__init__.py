"""
Service wrappers for test infrastructure.
"""

from harness.services.base import RpcService
from harness.services.bitcoin import BitcoinProps, BitcoinService

__all__ = [
    "RpcService",
    "BitcoinService",
    "BitcoinProps",
]
