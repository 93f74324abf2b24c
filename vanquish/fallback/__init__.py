"""
Read-only sample data used when a provider call fails or returns nothing.
Callers copy before mutating.
"""
from .characters import CHARACTERS, SILVER_SABLE
from .comics import COMICS

__all__ = ["CHARACTERS", "SILVER_SABLE", "COMICS"]
