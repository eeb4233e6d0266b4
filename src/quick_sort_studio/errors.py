"""Exceptions raised by Quick Sort Studio."""

from __future__ import annotations


class QuickSortStudioError(Exception):
    """Base class for all Quick Sort Studio errors."""


class InvalidInput(QuickSortStudioError, ValueError):
    """Raised when an input array cannot produce a trace."""
