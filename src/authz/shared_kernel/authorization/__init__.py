"""Authorization primitives shared across bounded contexts.

Bounded contexts register the policies for their resources here and look
them up when an action on a resource needs to be authorized.
"""

from shared_kernel.authorization.policy import (
    ChainPolicyResolver,
    MapPolicyResolver,
    MissingPolicyError,
    PolicyResolver,
)

__all__ = [
    "PolicyResolver",
    "MapPolicyResolver",
    "ChainPolicyResolver",
    "MissingPolicyError",
]
