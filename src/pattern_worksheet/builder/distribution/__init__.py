"""
Module: builder.distribution

Purpose:
    Spread a per-section question target across the selected patterns.

Key Functions:
    - distribute(): Per-section ordered question lists
    - allocate_takes(): Base + remainder allocation

Used By:
    - builder.controller: Main build controller
"""

from .distributor import distribute, allocate_takes, DEFAULT_TARGET_COUNT

__all__ = [
    "distribute",
    "allocate_takes",
    "DEFAULT_TARGET_COUNT",
]
