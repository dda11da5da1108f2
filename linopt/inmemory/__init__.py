"""
In-memory matrices.

Public API:
    Matrix                  dense n x m matrix over a ring element type
    dump(s) / load(s)       textual serialization
    iter_loads(text)        read concatenated matrices from one stream
"""

from linopt.inmemory.matrix import Matrix
from linopt.inmemory.textio import dump, dumps, iter_loads, load, loads

__all__ = [
    "Matrix",
    "dump",
    "dumps",
    "load",
    "loads",
    "iter_loads",
]
