"""Identifier helpers for captain_claw records."""

import uuid

__all__ = [
    "new_id",
]


def new_id() -> str:
    """Generate a random record ID."""
    return str(uuid.uuid4())
