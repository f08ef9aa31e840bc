# ds_lab/core/errors.py
from __future__ import annotations


class Empty(Exception):
    """Raised on dequeue/peek/pop from a container with no elements."""
