"""Service factories for creating test services."""

from factories.bitcoin import BitcoinFactory

__all__ = ["BitcoinFactory"]
