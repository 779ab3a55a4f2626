"""Interface contracts for captain_claw.

This module exports all Protocol-based interfaces for dependency injection.
"""

from captain_claw.interfaces.provider import ProviderInterface
from captain_claw.interfaces.storage import StorageInterface

__all__ = [
    "ProviderInterface",
    "StorageInterface",
]
