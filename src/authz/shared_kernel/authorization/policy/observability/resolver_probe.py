"""Domain probe for policy resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to building the policy map and looking
up policies for resources.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PolicyResolverProbe(Protocol):
    """Domain probe for policy resolver operations."""

    def policy_registered(self, resource_type: str, policy_kind: str) -> None:
        """Record that a policy was mapped to a resource type."""
        ...

    def policy_registration_rejected(self, resource_type: str, reason: str) -> None:
        """Record that a resource-to-policy mapping was rejected."""
        ...

    def policy_resolved(self, resource_type: str, policy_kind: str) -> None:
        """Record that a policy was resolved for a resource."""
        ...

    def policy_missing(self, resource_type: str) -> None:
        """Record that no policy is defined for a resource."""
        ...

    def with_context(self, context: ObservationContext) -> PolicyResolverProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPolicyResolverProbe:
    """Default implementation of PolicyResolverProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultPolicyResolverProbe:
        """Create a new probe with observation context bound."""
        return DefaultPolicyResolverProbe(logger=self._logger, context=context)

    def policy_registered(self, resource_type: str, policy_kind: str) -> None:
        self._logger.info(
            "policy_registered",
            resource_type=resource_type,
            policy_kind=policy_kind,
            **self._get_context_kwargs(),
        )

    def policy_registration_rejected(self, resource_type: str, reason: str) -> None:
        self._logger.error(
            "policy_registration_rejected",
            resource_type=resource_type,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def policy_resolved(self, resource_type: str, policy_kind: str) -> None:
        # Runs on every authorization check
        self._logger.debug(
            "policy_resolved",
            resource_type=resource_type,
            policy_kind=policy_kind,
            **self._get_context_kwargs(),
        )

    def policy_missing(self, resource_type: str) -> None:
        self._logger.warning(
            "policy_missing",
            resource_type=resource_type,
            **self._get_context_kwargs(),
        )
