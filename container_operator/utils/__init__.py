"""Utilities for container-operator."""

from .path_finder import PathFinder

__all__ = [
    'PathFinder'
]
