"""Capability protocols for data-access objects.

Structural types describing the three shapes a data-access layer may hand to
the authorization layer: a single record, a collection of records, and a lazy
query over a collection.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Entity(Protocol):
    """A single domain record loaded from or destined for a repository."""

    def is_new(self) -> bool:
        """Return True if the entity has not been persisted yet."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """Return the entity's fields as a plain dictionary."""
        ...


@runtime_checkable
class Repository(Protocol):
    """A collection or table abstraction.

    Attributes:
        alias: Name the collection is known by (e.g., "articles")
    """

    alias: str


@runtime_checkable
class Query(Protocol):
    """A lazy, composable request bound to exactly one repository."""

    def repository(self) -> Repository:
        """Return the repository this query reads from."""
        ...
