"""Resolver contract shared by the did:jwk resolver and the host resolver."""

from abc import ABC, abstractmethod
from enum import Enum
import re
from typing import NamedTuple, Optional, Pattern, Sequence, Text, Union

from pydid import DID

from ..config.injection_context import InjectionContext
from ..core.error import BaseError


class ResolverError(BaseError):
    """A DID could not be resolved."""


class DIDNotFound(ResolverError):
    """A resolver has no document for the DID; the next resolver may."""


class DIDMethodNotSupported(ResolverError):
    """No resolver claims the DID's method."""


class ResolverType(Enum):
    """Native resolvers answer locally and are tried first."""

    NATIVE = "native"
    NON_NATIVE = "non-native"


class ResolutionMetadata(NamedTuple):
    """Which resolver answered, when, and how long it took (ms)."""

    resolver_type: ResolverType
    resolver: str
    retrieved_time: str
    duration: int

    def serialize(self) -> dict:
        """Return serialized resolution metadata."""
        return {**self._asdict(), "resolver_type": self.resolver_type.value}


class ResolutionResult(NamedTuple):
    """A resolved DID document with its resolution metadata."""

    did_document: dict
    metadata: ResolutionMetadata

    def serialize(self) -> dict:
        """Return serialized resolution result."""
        return {
            "did_document": self.did_document,
            "metadata": self.metadata.serialize(),
        }


class BaseDIDResolver(ABC):
    """One DID method's resolver.

    Subclasses name their methods in `supported_methods` and implement
    `_resolve`; `resolve` checks DID syntax and method support first.
    """

    def __init__(self, type_: Optional[ResolverType] = None):
        """Initialize the resolver as native or non-native (the default)."""
        self.type = type_ or ResolverType.NON_NATIVE

    @abstractmethod
    async def setup(self, context: InjectionContext):
        """Do asynchronous resolver setup."""

    @property
    def native(self) -> bool:
        """Return if this resolver is native."""
        return self.type is ResolverType.NATIVE

    @property
    def supported_methods(self) -> Sequence[str]:
        """Return the DID method names this resolver handles."""
        return []

    @property
    def supported_did_regex(self) -> Pattern:
        """Match any DID of one of the `supported_methods`.

        Raises:
            NotImplementedError: If there are no supported methods

        """
        if not self.supported_methods:
            raise NotImplementedError(
                f"{type(self).__name__} must name supported_methods "
                "or override supported_did_regex"
            )
        methods = "|".join(re.escape(method) for method in self.supported_methods)
        return re.compile(f"^did:(?:{methods}):.*$")

    async def supports(self, context: InjectionContext, did: str) -> bool:
        """Return if this resolver supports the given DID."""
        return bool(self.supported_did_regex.match(did))

    async def resolve(
        self,
        context: InjectionContext,
        did: Union[str, DID],
        service_accept: Optional[Sequence[Text]] = None,
    ) -> dict:
        """Resolve a DID using this resolver.

        Raises:
            InvalidDIDError: If the value is not DID syntax
            DIDMethodNotSupported: If this resolver does not handle the method

        """
        if isinstance(did, DID):
            did = str(did)
        else:
            DID.validate(did)
        if not await self.supports(context, did):
            raise DIDMethodNotSupported(
                f"{type(self).__name__} does not support DID method for: {did}"
            )
        return await self._resolve(context, did, service_accept)

    @abstractmethod
    async def _resolve(
        self,
        context: InjectionContext,
        did: str,
        service_accept: Optional[Sequence[Text]] = None,
    ) -> dict:
        """Resolve a DID this resolver supports."""
