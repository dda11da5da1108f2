"""
Core protocols for linopt.

These define structural interfaces rather than base classes. Element
types never inherit from anything: an int, a Fraction or a user-defined
polynomial is a valid matrix entry as long as it has the right operators.

Design Principles:
    - Ring capability is a static bound on a TypeVar, not a runtime hierarchy
    - MatrixLike is the contract any matrix backing (in-memory today,
      paged on-disk later) must satisfy
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable


class RingElement(Protocol):
    """
    An element closed under addition, subtraction and multiplication.

    Examples: int, float, complex, fractions.Fraction, decimal.Decimal.
    """

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...


E = TypeVar('E', bound=RingElement)  # Element type


@runtime_checkable
class MatrixLike(Protocol):
    """
    Element-access and arithmetic contract shared by all matrix backings.

    linopt.inmemory.Matrix implements it over a resident ndarray. A
    disk-backed matrix keyed by a filesystem path would implement the same
    members over paged storage, adding its own open/flush/close lifecycle.
    """

    @property
    def n(self) -> int:
        """Number of rows."""
        ...

    @property
    def m(self) -> int:
        """Number of columns."""
        ...

    def get(self, r: int, c: int) -> Any:
        """Entry at (r, c), bounds-checked."""
        ...

    def set(self, r: int, c: int, value: Any) -> None:
        """Overwrite entry at (r, c), bounds-checked."""
        ...

    def transpose(self) -> MatrixLike:
        """New matrix with rows and columns exchanged."""
        ...

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...
