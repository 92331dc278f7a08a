"""
Utility functions
"""

from app.utils.markdown import (
    escape,
    quote_for_reply,
    render,
)

__all__ = [
    "escape",
    "quote_for_reply",
    "render",
]
