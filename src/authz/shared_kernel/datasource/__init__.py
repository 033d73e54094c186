"""Data-access capabilities shared across bounded contexts.

The authorization layer only needs to recognise what kind of data-access
object a resource is. These protocols describe those shapes without tying
callers to any particular ORM.
"""

from shared_kernel.datasource.protocols import Entity, Query, Repository

__all__ = [
    "Entity",
    "Query",
    "Repository",
]
