"""Typed domain errors for the Smart City Route Finder.

Structural errors raised by the graph store. They are reported to the
immediate caller and never leave a mutation half-applied.

"No path" is not an error: the engine returns an empty ``RouteResult``
with an infinite total instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RouteFinderError(Exception):
    """Base error for the route finder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateNodeError(RouteFinderError):
    """An intersection with this identifier already exists.

    Attributes:
        node_id: The identifier that was already taken
    """

    node_id: str = ""


@dataclass
class UnknownNodeError(RouteFinderError):
    """The referenced intersection is not in the road network.

    Attributes:
        node_id: The identifier that was not found
    """

    node_id: str = ""


@dataclass
class InvalidWeightError(RouteFinderError):
    """A road segment weight is not a finite number.

    Attributes:
        weight: The rejected value
    """

    weight: Any = None
