"""Core building blocks shared by property and runner layers.

This package provides the structures every other layer depends on:
the seeded random source, lazy streams and shrink tree nodes.
By isolating them here, we maintain a clean dependency graph:

    core <- property <- runner

Exports:
    Random: Seeded, deterministic integer source
    Stream: Single-pass lazy sequence
    Shrinkable: Value plus lazy sequence of simpler values

Python 3.13+.
"""

from .random_source import Random
from .shrinkable import ShrinkFactory, Shrinkable
from .stream import Stream

__all__ = ["Random", "ShrinkFactory", "Shrinkable", "Stream"]
