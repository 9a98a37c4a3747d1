"""Reference implementations for django-signing testing.

This package provides deterministic collaborators for the interfaces
defined in django_signing.interfaces.
"""

from .clock import FixedTimestamper

__all__ = [
    "FixedTimestamper",
]
