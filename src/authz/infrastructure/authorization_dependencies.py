"""Policy resolver dependency injection.

Provides the application-scoped policy resolver, built once from settings.
"""

from __future__ import annotations

from functools import lru_cache

from shared_kernel.authorization.policy import MapPolicyResolver, PolicyResolver
from shared_kernel.authorization.policy.observability import (
    DefaultPolicyResolverProbe,
)
from infrastructure.settings import get_policy_settings


@lru_cache
def get_policy_resolver() -> PolicyResolver:
    """Get the application policy resolver (singleton).

    The resolver map is read-only after this call returns, so the instance
    is safe to share across requests.

    Returns:
        MapPolicyResolver populated from AUTHZ_POLICY_RESOURCE_POLICIES

    Raises:
        InvalidPolicyConfigurationError: If a configured class does not exist
    """
    settings = get_policy_settings()
    return MapPolicyResolver(
        settings.resource_policies,
        probe=DefaultPolicyResolverProbe(),
    )
