"""Resource-to-policy resolution.

Maps resources (entities, repositories, queries and plain objects) to the
policy objects that decide whether an action on them is permitted.
"""

from shared_kernel.authorization.policy.chain_resolver import ChainPolicyResolver
from shared_kernel.authorization.policy.descriptors import (
    ClassRef,
    Factory,
    Instance,
    PolicyDescriptor,
    as_descriptor,
)
from shared_kernel.authorization.policy.exceptions import (
    InvalidPolicyConfigurationError,
    InvalidResourceError,
    MissingPolicyError,
    PolicyResolutionError,
)
from shared_kernel.authorization.policy.map_resolver import MapPolicyResolver
from shared_kernel.authorization.policy.protocols import PolicyResolver

__all__ = [
    "PolicyResolver",
    "MapPolicyResolver",
    "ChainPolicyResolver",
    "PolicyDescriptor",
    "ClassRef",
    "Instance",
    "Factory",
    "as_descriptor",
    "PolicyResolutionError",
    "InvalidPolicyConfigurationError",
    "InvalidResourceError",
    "MissingPolicyError",
]
