"""Ordered collection of policy resolvers."""

from __future__ import annotations

from typing import Any, Iterable

from shared_kernel.authorization.policy.exceptions import MissingPolicyError
from shared_kernel.authorization.policy.protocols import PolicyResolver


class ChainPolicyResolver:
    """Delegates policy resolution to a sequence of resolvers.

    Each resolver is asked in registration order. A resolver that has no
    policy for the resource is skipped; the first policy found wins. Any
    other error stops the chain and propagates.
    """

    def __init__(self, resolvers: Iterable[PolicyResolver] = ()) -> None:
        self._resolvers: list[PolicyResolver] = list(resolvers)

    def add(self, resolver: PolicyResolver) -> ChainPolicyResolver:
        """Append a resolver to the end of the chain.

        Args:
            resolver: The resolver to append

        Returns:
            This chain, for chaining
        """
        self._resolvers.append(resolver)
        return self

    def resolve(self, resource: Any) -> Any:
        """Return the policy from the first resolver that has one.

        Raises:
            MissingPolicyError: If no resolver in the chain has a policy
        """
        for resolver in self._resolvers:
            try:
                return resolver.resolve(resource)
            except MissingPolicyError:
                continue
        raise MissingPolicyError(resource)
