"""Policy resolver protocol.

Defines the interface for looking up the policy object governing a resource,
allowing for swappable implementations (map-based, chained, test doubles).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PolicyResolver(Protocol):
    """Protocol for policy resolvers.

    A policy is opaque to the resolver: whatever object is returned is
    handed to the caller, which then runs its permission checks.
    """

    def resolve(self, resource: Any) -> Any:
        """Return the policy governing a resource.

        Args:
            resource: The domain object an authorization decision is about

        Returns:
            The policy object for the resource

        Raises:
            InvalidResourceError: If the resource is not an object
            MissingPolicyError: If no policy is defined for the resource
        """
        ...
