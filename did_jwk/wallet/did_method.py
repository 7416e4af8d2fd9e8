"""DID methods and the key types each one accepts."""

from typing import List

from .key_type import ED25519, P256, P384, P521, RSA, SECP256K1, X25519, KeyType


class DIDMethod:
    """Class to represent a did method."""

    def __init__(self, name: str, key_types: List[KeyType], rotation: bool = False):
        """Construct did method class."""
        self._method_name: str = name
        self._supported_key_types: List[KeyType] = key_types
        self._supports_rotation: bool = rotation

    @property
    def method_name(self):
        """Get method name."""
        return self._method_name

    @property
    def supports_rotation(self):
        """Check rotation support."""
        return self._supports_rotation

    @property
    def supported_key_types(self):
        """Get supported key types."""
        return self._supported_key_types

    def supports_key_type(self, key_type: KeyType) -> bool:
        """Check whether the current method supports the key type."""
        return key_type in self.supported_key_types

    def __repr__(self) -> str:
        """Return a human readable representation of this method."""
        return f"<DIDMethod({self._method_name})>"


# did:jwk embeds the key itself, so there is nothing to rotate
JWK = DIDMethod(
    name="jwk",
    key_types=[ED25519, X25519, SECP256K1, P256, P384, P521, RSA],
    rotation=False,
)


def supported_jwk_key_types() -> List[KeyType]:
    """Return the key types a did:jwk may be generated from."""
    return list(JWK.supported_key_types)


def is_supported_jwk_key_type(key_type: KeyType) -> bool:
    """Check a key type against the did:jwk allow-list."""
    return JWK.supports_key_type(key_type)

