"""Wallet-related exceptions."""

from ..core.error import BaseError


class WalletError(BaseError):
    """General wallet exception."""


class KeyGenerationError(WalletError):
    """Key material could not be generated or exported."""
