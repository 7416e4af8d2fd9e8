"""Key type code."""

from typing import Optional


class KeyType:
    """Key Type class."""

    def __init__(self, key_type: str, jwk_kty: Optional[str], jwk_crv: Optional[str]):
        """Construct key type."""
        self._type: str = key_type
        self._kty: Optional[str] = jwk_kty
        self._crv: Optional[str] = jwk_crv

    @property
    def key_type(self) -> str:
        """Get Key type, type."""
        return self._type

    @property
    def jwk_kty(self) -> Optional[str]:
        """Get the JWK key family (`kty`), if the type has a JWK form."""
        return self._kty

    @property
    def jwk_crv(self) -> Optional[str]:
        """Get the JWK curve name (`crv`), None for RSA."""
        return self._crv

    def __repr__(self) -> str:
        """Return a human readable representation of this key type."""
        return f"<KeyType({self._type})>"


ED25519: KeyType = KeyType("ed25519", "OKP", "Ed25519")
X25519: KeyType = KeyType("x25519", "OKP", "X25519")
SECP256K1: KeyType = KeyType("secp256k1", "EC", "secp256k1")
P256: KeyType = KeyType("p256", "EC", "P-256")
P384: KeyType = KeyType("p384", "EC", "P-384")
P521: KeyType = KeyType("p521", "EC", "P-521")
RSA: KeyType = KeyType("rsa", "RSA", None)
# BLS12-381 keys have no registered JWK representation
BLS12381G1: KeyType = KeyType("bls12381g1", None, None)
BLS12381G2: KeyType = KeyType("bls12381g2", None, None)
BLS12381G1G2: KeyType = KeyType("bls12381g1g2", None, None)


class KeyTypes:
    """Registry of known key types, looked up by tag or by JWK parameters."""

    def __init__(self) -> None:
        """Construct key type registry."""
        self._type_registry: dict[str, KeyType] = {}
        self._jwk_registry: dict[tuple, KeyType] = {}
        for key_type in (
            ED25519,
            X25519,
            SECP256K1,
            P256,
            P384,
            P521,
            RSA,
            BLS12381G1,
            BLS12381G2,
            BLS12381G1G2,
        ):
            self.register(key_type)

    def register(self, key_type: KeyType):
        """Register a new key type."""
        self._type_registry[key_type.key_type] = key_type
        if key_type.jwk_kty:
            self._jwk_registry[(key_type.jwk_kty, key_type.jwk_crv)] = key_type

    def from_key_type(self, key_type: str) -> Optional[KeyType]:
        """Get KeyType instance from the key type identifier."""
        return self._type_registry.get(key_type)

    def from_jwk(self, kty: str, crv: Optional[str] = None) -> Optional[KeyType]:
        """Get KeyType instance matching a JWK `kty` and `crv`. None if not found."""
        return self._jwk_registry.get((kty, crv if kty != "RSA" else None))

    def __iter__(self):
        """Iterate registered key types."""
        return iter(self._type_registry.values())
