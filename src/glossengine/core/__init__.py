"""Core utilities shared by the model and runtime layers.

Exports:
    resolve_path: Dotted-path lookup returning None for absent paths

Python 3.13+.
"""

from .paths import resolve_path

__all__ = ["resolve_path"]
