"""Utility functions for captain_claw.

This module contains internal utility functions.
"""

from captain_claw.utils.ids import new_id
from captain_claw.utils.text import summarize_text, text_metadata

__all__ = [
    "new_id",
    "summarize_text",
    "text_metadata",
]
