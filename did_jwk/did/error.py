"""did:jwk exceptions."""

from ..core.error import BaseError


class DIDJWKError(BaseError):
    """Base class for did:jwk errors."""


class UnsupportedKeyTypeError(DIDJWKError):
    """Requested key type cannot back a did:jwk."""


class DIDJWKSerializationError(DIDJWKError):
    """Public key could not be serialized into a did:jwk."""


class MalformedDIDJWKError(DIDJWKError):
    """Value is not a well-formed did:jwk."""


class InvalidPrefixError(MalformedDIDJWKError):
    """Value does not start with the did:jwk prefix."""


class MissingPayloadError(MalformedDIDJWKError):
    """Value has the did:jwk prefix but no encoded key."""


class InvalidEncodingError(MalformedDIDJWKError):
    """Encoded key is not unpadded base64url."""


class InvalidJWKError(MalformedDIDJWKError):
    """Decoded key is not a valid public JWK."""
