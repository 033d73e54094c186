"""Exceptions for policy resolution."""

from __future__ import annotations

from typing import Any


def qualified_name(cls: type) -> str:
    """Return the dotted import path of a class (e.g., "app.models.Article").

    Nested classes keep their enclosing class in the path
    ("app.models.Article.Revision"); import_class resolves such paths.
    """
    return f"{cls.__module__}.{cls.__qualname__}"


class PolicyResolutionError(Exception):
    """Base exception for policy resolution errors."""

    pass


class InvalidPolicyConfigurationError(PolicyResolutionError, ValueError):
    """Raised when a resource-to-policy mapping cannot be registered.

    Registration is validated eagerly, so this surfaces during application
    setup rather than on the first authorization check.
    """

    pass


class InvalidResourceError(PolicyResolutionError, TypeError):
    """Raised when a policy is requested for a value that is not a resource."""

    pass


class MissingPolicyError(PolicyResolutionError):
    """Raised when no policy has been defined for a resource.

    Callers typically treat this as a denial, but it may also be allowed
    to propagate so that the missing mapping gets noticed.

    Attributes:
        resource: The resource a policy was requested for
        resource_type: Dotted name of the class the policy was looked up
            under; for a query this is its repository's class
    """

    def __init__(self, resource: Any, resource_class: type | None = None) -> None:
        self.resource = resource
        self.resource_type = qualified_name(resource_class or type(resource))
        message = f"Policy for `{self.resource_type}` has not been defined."
        if resource_class is not None and resource_class is not type(resource):
            message = (
                f"Policy for `{self.resource_type}` has not been defined "
                f"(resolving `{qualified_name(type(resource))}`)."
            )
        super().__init__(message)
