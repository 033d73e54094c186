"""Observation context for domain-oriented observability.

Observation contexts carry request-scoped metadata that probes attach to
every event they record.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable metadata included with all probe events.

    Attributes:
        request_id: Identifier of the request being authorized.
        user_id: Identifier of the user the decision is made for.
        tenant_id: Multi-tenant identifier (if applicable).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-123", user_id="user-456")
        probe = DefaultPolicyResolverProbe().with_context(context)
    """

    request_id: str | None = None
    user_id: str | None = None
    tenant_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging, skipping unset fields."""
        result: dict[str, Any] = {
            name: value
            for name, value in (
                ("request_id", self.request_id),
                ("user_id", self.user_id),
                ("tenant_id", self.tenant_id),
            )
            if value is not None
        }
        result.update(self.extra)
        return result

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return replace(self, extra={**self.extra, **kwargs})
