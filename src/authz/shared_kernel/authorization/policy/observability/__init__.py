"""Observability for policy resolution."""

from shared_kernel.authorization.policy.observability.resolver_probe import (
    DefaultPolicyResolverProbe,
    PolicyResolverProbe,
)

__all__ = [
    "PolicyResolverProbe",
    "DefaultPolicyResolverProbe",
]
