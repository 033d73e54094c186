"""Map-based policy resolver.

Maps resource classes to policy classes, policy objects or policy factories.
The map is built once during application setup and consulted on every
authorization check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from shared_kernel.authorization.policy.descriptors import (
    PolicyDescriptor,
    as_descriptor,
    import_class,
    is_primitive,
)
from shared_kernel.authorization.policy.exceptions import (
    InvalidPolicyConfigurationError,
    InvalidResourceError,
    MissingPolicyError,
    qualified_name,
)
from shared_kernel.authorization.policy.observability import (
    DefaultPolicyResolverProbe,
)
from shared_kernel.datasource import Entity, Query, Repository

if TYPE_CHECKING:
    from shared_kernel.authorization.policy.observability import (
        PolicyResolverProbe,
    )


class MapPolicyResolver:
    """Resolves policies from a resource class to policy map.

    Keys are resource classes, given either as the class itself or as a
    dotted import path. Values are one of:

    - a policy class (or its dotted path), instantiated on every lookup
    - a policy object, shared by every lookup
    - a callable ``factory(resource, resolver)``, invoked on every lookup

    Queries never have a policy of their own: they are resolved with the
    policy of the repository they are bound to.

    The map has no internal locking. Register everything during startup;
    hosts that mutate it while serving lookups must synchronise externally.

    Example:
        resolver = MapPolicyResolver(
            {
                "app.models.Article": "app.policies.ArticlePolicy",
                Comment: shared_comment_policy,
                ArticlesTable: lambda table, resolver: TablePolicy(table.alias),
            }
        )
        policy = resolver.resolve(article)
    """

    def __init__(
        self,
        policies: Mapping[type | str, Any] | None = None,
        probe: PolicyResolverProbe | None = None,
    ) -> None:
        """Initialize the resolver and register the given policies.

        Args:
            policies: Optional resource class to policy map
            probe: Optional domain probe for observability

        Raises:
            InvalidPolicyConfigurationError: If any entry is invalid
        """
        self._map: dict[type, PolicyDescriptor] = {}
        self._probe = probe or DefaultPolicyResolverProbe()

        for resource_type, policy in (policies or {}).items():
            self.register(resource_type, policy)

    def register(self, resource_type: type | str, policy: Any) -> MapPolicyResolver:
        """Map a resource class to a policy.

        Registering the same resource class again replaces the earlier
        policy.

        Args:
            resource_type: Resource class or its dotted import path
            policy: Policy class, dotted policy class path, policy object,
                callable factory, or a prebuilt descriptor

        Returns:
            This resolver, for chaining

        Raises:
            InvalidPolicyConfigurationError: If the resource class does not
                exist or the policy is not a valid shape
        """
        resource_class = self._load_resource_class(resource_type)
        resource_name = qualified_name(resource_class)

        try:
            descriptor = as_descriptor(policy)
        except InvalidPolicyConfigurationError as exc:
            self._probe.policy_registration_rejected(resource_name, str(exc))
            raise

        self._map[resource_class] = descriptor
        self._probe.policy_registered(resource_name, descriptor.kind)
        return self

    def resolve(self, resource: Any) -> Any:
        """Return the policy for a resource.

        Class descriptors and factories produce a new policy on every call;
        policy objects are returned as the same shared reference.

        Args:
            resource: The resource to find a policy for

        Returns:
            The policy object, unexamined

        Raises:
            InvalidResourceError: If the resource is a primitive value
            MissingPolicyError: If no policy is mapped for the resource
        """
        if is_primitive(resource):
            raise InvalidResourceError(
                f"Resource must be an object, `{type(resource).__name__}` given."
            )

        resource_class = self.resource_key(resource)
        descriptor = self._map.get(resource_class)
        if descriptor is None:
            self._probe.policy_missing(qualified_name(resource_class))
            raise MissingPolicyError(resource, resource_class)

        self._probe.policy_resolved(qualified_name(resource_class), descriptor.kind)
        return descriptor.resolve(resource, self)

    def resource_key(self, resource: Any) -> type:
        """Return the class a resource's policy is mapped under.

        Entities and repositories use their own class. Queries use the
        class of the repository they are bound to. Any other object uses
        its own class, including objects whose ``repository`` attribute is
        not callable or does not return a repository. The class is always
        the runtime class, so resources typed as a base class still resolve
        by their concrete class.

        Args:
            resource: The resource to classify

        Returns:
            The policy map key for the resource
        """
        if isinstance(resource, Entity):
            return self.entity_key(resource)
        if isinstance(resource, Repository):
            return self.repository_key(resource)
        if isinstance(resource, Query):
            repository = self._bound_repository(resource)
            if repository is not None:
                return self.repository_key(repository)
        return type(resource)

    def entity_key(self, entity: Entity) -> type:
        """Return the policy map key for an entity."""
        return type(entity)

    def repository_key(self, repository: Repository) -> type:
        """Return the policy map key for a repository."""
        return type(repository)

    def _bound_repository(self, query: Query) -> Repository | None:
        accessor = getattr(query, "repository", None)
        if not callable(accessor):
            return None
        repository = accessor()
        if not isinstance(repository, Repository):
            return None
        return repository

    def _load_resource_class(self, resource_type: type | str) -> type:
        if isinstance(resource_type, type):
            return resource_type

        resource_class = None
        if isinstance(resource_type, str):
            resource_class = import_class(resource_type)
        if resource_class is None:
            message = f"Resource class `{resource_type}` does not exist."
            self._probe.policy_registration_rejected(str(resource_type), message)
            raise InvalidPolicyConfigurationError(message)
        return resource_class
