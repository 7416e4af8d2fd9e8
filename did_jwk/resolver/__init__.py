"""DID resolution: the host resolver and the did:jwk method resolver."""

import logging

from ..config.injection_context import InjectionContext
from .default.jwk import JwkDIDResolver
from .did_resolver import DIDResolver

LOGGER = logging.getLogger(__name__)


async def setup(context: InjectionContext):
    """Register the did:jwk resolver with the context's `DIDResolver`.

    The `resolver.timeout` setting (seconds) replaces the host default.
    """
    registry = context.inject_or(DIDResolver)
    if not registry:
        LOGGER.warning("No DID Resolver instance found in context")
        return

    timeout = context.settings.get_int("resolver.timeout")
    if timeout:
        registry.timeout = timeout

    jwk_resolver = JwkDIDResolver()
    await jwk_resolver.setup(context)
    registry.register_resolver(jwk_resolver)
