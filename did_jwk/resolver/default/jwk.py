"""did:jwk: resolver implementation."""

import logging
from typing import Optional, Sequence, Text

from ...config.injection_context import InjectionContext
from ...did.did_jwk import DIDJWK
from ...did.error import MalformedDIDJWKError
from ...wallet.did_method import JWK
from ..base import BaseDIDResolver, ResolverError, ResolverType

LOGGER = logging.getLogger(__name__)


class JwkDIDResolver(BaseDIDResolver):
    """did:jwk: resolver implementation.

    Every `did:jwk:` value is claimed, corrupted ones included, so that a bad
    payload surfaces as a `ResolverError` rather than as an unsupported method.
    Resolution is local: the document is expanded from the key inside the DID.
    """

    def __init__(self):
        """Initialize the resolver."""
        super().__init__(ResolverType.NATIVE)

    async def setup(self, context: InjectionContext):
        """Perform required setup for the resolver."""

    @property
    def supported_methods(self) -> Sequence[str]:
        """Return supported methods."""
        return [JWK.method_name]

    async def _resolve(
        self,
        context: InjectionContext,
        did: str,
        service_accept: Optional[Sequence[Text]] = None,
    ) -> dict:
        """Resolve a did:jwk by expanding its embedded key."""
        try:
            doc = DIDJWK(did).did_doc
        except MalformedDIDJWKError as err:
            raise ResolverError(f"Unable to expand did:jwk: {did}") from err

        LOGGER.debug("Expanded did:jwk %s", did)
        return doc
