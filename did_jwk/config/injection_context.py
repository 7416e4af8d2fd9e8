"""Injection context handed to DID resolvers."""

from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from .base import InjectionError
from .settings import Settings

InjectType = TypeVar("InjectType")


class InjectionContext:
    """Settings plus the shared instances resolvers look up.

    `resolver.setup` finds the host `DIDResolver` here and registers the
    did:jwk resolver into it; resolvers receive the same context on every
    `resolve` call.
    """

    def __init__(self, *, settings: Optional[Mapping[str, Any]] = None):
        """Initialize an `InjectionContext`."""
        self._settings = Settings(settings)
        self._instances: Dict[type, Any] = {}

    @property
    def settings(self) -> Settings:
        """Accessor for the context settings."""
        return self._settings

    def bind_instance(self, base_cls: Type[InjectType], instance: InjectType):
        """Bind an instance to the class it is looked up by.

        Raises:
            InjectionError: If the instance is not a `base_cls`

        """
        if not isinstance(instance, base_cls):
            raise InjectionError(
                f"Bound instance does not implement {base_cls.__name__}"
            )
        self._instances[base_cls] = instance

    def inject(self, base_cls: Type[InjectType]) -> InjectType:
        """Get the instance bound to a class.

        Raises:
            InjectionError: If nothing is bound

        """
        instance = self._instances.get(base_cls)
        if instance is None:
            raise InjectionError(f"No instance bound for {base_cls.__name__}")
        return instance

    def inject_or(
        self, base_cls: Type[InjectType], default: Optional[InjectType] = None
    ) -> Optional[InjectType]:
        """Get the instance bound to a class, or the default."""
        return self._instances.get(base_cls, default)
