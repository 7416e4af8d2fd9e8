"""Host resolver dispatching DIDs to the registered method resolvers."""

import asyncio
from datetime import datetime, timezone
import logging
from typing import List, Optional, Sequence, Text, Tuple, Union

from pydid import DID

from ..config.injection_context import InjectionContext
from .base import (
    BaseDIDResolver,
    DIDMethodNotSupported,
    DIDNotFound,
    ResolutionMetadata,
    ResolutionResult,
)

LOGGER = logging.getLogger(__name__)


class DIDResolver:
    """Dispatch DIDs to registered resolvers.

    Resolvers claiming a DID are tried native first, each group in registration
    order. A `DIDNotFound` moves on to the next resolver; any other error ends
    resolution.
    """

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        resolvers: Optional[List[BaseDIDResolver]] = None,
        *,
        timeout: Optional[int] = None,
    ):
        """Create DID Resolver."""
        self.resolvers = list(resolvers or [])
        self.timeout = timeout or self.DEFAULT_TIMEOUT

    def register_resolver(self, resolver: BaseDIDResolver):
        """Register a new resolver."""
        LOGGER.debug("Registering resolver %s", resolver)
        self.resolvers.append(resolver)

    @property
    def supported_methods(self) -> Sequence[str]:
        """Return the DID methods handled by any registered resolver."""
        methods = (m for resolver in self.resolvers for m in resolver.supported_methods)
        return list(dict.fromkeys(methods))

    async def _candidates(
        self, context: InjectionContext, did: str
    ) -> List[BaseDIDResolver]:
        """Return the resolvers claiming a DID, native resolvers first."""
        claiming = [r for r in self.resolvers if await r.supports(context, did)]
        if not claiming:
            raise DIDMethodNotSupported(f'No resolver supporting DID "{did}" loaded')
        return sorted(claiming, key=lambda resolver: not resolver.native)

    async def _resolve(
        self,
        context: InjectionContext,
        did: Union[str, DID],
        service_accept: Optional[Sequence[Text]] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[BaseDIDResolver, dict]:
        """Resolve a DID, returning the resolver that answered and the document."""
        if isinstance(did, DID):
            did = str(did)
        else:
            DID.validate(did)

        for resolver in await self._candidates(context, did):
            LOGGER.debug("Resolving DID %s with %s", did, resolver)
            try:
                document = await asyncio.wait_for(
                    resolver.resolve(context, did, service_accept),
                    self.timeout if timeout is None else timeout,
                )
            except DIDNotFound:
                LOGGER.debug("DID %s not found by resolver %s", did, resolver)
                continue
            return resolver, document

        raise DIDNotFound(f"DID {did} could not be resolved")

    async def resolve(
        self,
        context: InjectionContext,
        did: Union[str, DID],
        service_accept: Optional[Sequence[Text]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> dict:
        """Resolve a DID to its document.

        Raises:
            InvalidDIDError: If the value is not DID syntax
            DIDMethodNotSupported: If no registered resolver claims the DID
            DIDNotFound: If every claiming resolver reported the DID missing
            ResolverError: If a resolver failed, ie. a corrupted did:jwk

        """
        _, document = await self._resolve(context, did, service_accept, timeout)
        return document

    async def resolve_with_metadata(
        self,
        context: InjectionContext,
        did: Union[str, DID],
        *,
        timeout: Optional[float] = None,
    ) -> ResolutionResult:
        """Resolve a DID, recording which resolver answered and how long it took."""
        started = datetime.now(tz=timezone.utc)
        resolver, document = await self._resolve(context, did, timeout=timeout)
        finished = datetime.now(tz=timezone.utc)

        metadata = ResolutionMetadata(
            resolver.type,
            type(resolver).__qualname__,
            finished.strftime("%Y-%m-%dT%H:%M:%SZ"),
            int((finished - started).total_seconds() * 1000),
        )
        return ResolutionResult(document, metadata)
