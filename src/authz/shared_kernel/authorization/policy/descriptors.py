"""Policy descriptors stored in a policy map.

A descriptor records how a policy is produced for a resource:

- ClassRef: a policy class, instantiated with no arguments on every lookup
- Instance: a prebuilt policy object, shared by every lookup
- Factory: a callable invoked with ``(resource, resolver)`` on every lookup

Example:
    >>> as_descriptor("app.policies.ArticlePolicy")
    ClassRef(policy_class=<class 'app.policies.ArticlePolicy'>)
    >>> as_descriptor(lambda resource, resolver: DenyAll())
    Factory(factory=<function <lambda> at ...>)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Literal, Union

from pydantic import ImportString, TypeAdapter, ValidationError

from shared_kernel.authorization.policy.exceptions import (
    InvalidPolicyConfigurationError,
)

if TYPE_CHECKING:
    from shared_kernel.authorization.policy.protocols import PolicyResolver

PolicyFactory = Callable[[Any, "PolicyResolver"], Any]

# Values that are data rather than objects with behaviour.
PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    dict,
    set,
    frozenset,
)

_import_adapter: TypeAdapter[Any] = TypeAdapter(ImportString)


def is_primitive(value: Any) -> bool:
    """Check whether a value is plain data rather than an object."""
    return isinstance(value, PRIMITIVE_TYPES)


def import_class(path: str) -> type | None:
    """Import a class from a dotted path.

    Accepts both ``"package.module.Class"`` and ``"package.module:Class"``,
    as well as nested classes (``"package.module.Outer.Inner"``).

    Args:
        path: Dotted import path

    Returns:
        The class, or None if the path cannot be imported or does not
        name a class
    """
    try:
        target = _import_adapter.validate_python(path)
    except ValidationError:
        owner_path, _, name = path.rpartition(".")
        if not owner_path or not name:
            return None
        owner = import_class(owner_path)
        target = getattr(owner, name, None) if owner is not None else None
    if not isinstance(target, type):
        return None
    return target


@dataclass(frozen=True)
class ClassRef:
    """Policy class constructed with no arguments on each resolution."""

    policy_class: type
    kind: ClassVar[Literal["class"]] = "class"

    def __post_init__(self) -> None:
        if not isinstance(self.policy_class, type):
            raise InvalidPolicyConfigurationError(
                f"Policy class `{self.policy_class!r}` does not exist."
            )

    def resolve(self, resource: Any, resolver: PolicyResolver) -> Any:
        return self.policy_class()


@dataclass(frozen=True)
class Instance:
    """Prebuilt policy returned unchanged on each resolution.

    The resolver holds a reference only; the caller owns the object.
    """

    policy: Any
    kind: ClassVar[Literal["instance"]] = "instance"

    def __post_init__(self) -> None:
        if is_primitive(self.policy):
            raise InvalidPolicyConfigurationError(
                "Policy must be a valid class name, an object or a callable, "
                f"`{type(self.policy).__name__}` given."
            )

    def resolve(self, resource: Any, resolver: PolicyResolver) -> Any:
        return self.policy


@dataclass(frozen=True)
class Factory:
    """Callable building a policy from the resource and the resolver."""

    factory: PolicyFactory
    kind: ClassVar[Literal["factory"]] = "factory"

    def __post_init__(self) -> None:
        if not callable(self.factory):
            raise InvalidPolicyConfigurationError(
                f"Policy factory `{self.factory!r}` is not callable."
            )

    def resolve(self, resource: Any, resolver: PolicyResolver) -> Any:
        return self.factory(resource, resolver)


PolicyDescriptor = Union[ClassRef, Instance, Factory]


def as_descriptor(policy: Any) -> PolicyDescriptor:
    """Convert a policy given in configuration into a descriptor.

    Conversion order:
    1. Descriptors are returned unchanged
    2. Strings are imported and must name a class (ClassRef)
    3. Classes become ClassRef
    4. Primitive values are rejected
    5. Other callables become Factory
    6. Anything else becomes Instance

    Args:
        policy: A dotted class path, a class, a callable, or a policy object

    Returns:
        The matching descriptor

    Raises:
        InvalidPolicyConfigurationError: If the policy is not a usable shape
    """
    if isinstance(policy, (ClassRef, Instance, Factory)):
        return policy

    if isinstance(policy, str):
        policy_class = import_class(policy)
        if policy_class is None:
            raise InvalidPolicyConfigurationError(
                f"Policy class `{policy}` does not exist."
            )
        return ClassRef(policy_class)

    if isinstance(policy, type):
        return ClassRef(policy)

    if is_primitive(policy):
        raise InvalidPolicyConfigurationError(
            "Policy must be a valid class name, an object or a callable, "
            f"`{type(policy).__name__}` given."
        )

    if callable(policy):
        return Factory(policy)

    return Instance(policy)
