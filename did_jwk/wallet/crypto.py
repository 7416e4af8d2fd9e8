"""Key generation and public key export for did:jwk."""

import logging
from typing import Optional, Tuple

from authlib.jose import JsonWebKey
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa, x25519

from ..messaging.models.base import BaseModelError
from .error import KeyGenerationError
from .jwk import PublicKeyJWK
from .key_type import ED25519, P256, P384, P521, RSA, SECP256K1, X25519, KeyType

LOGGER = logging.getLogger(__name__)

EC_CURVES = {
    SECP256K1: ec.SECP256K1,
    P256: ec.SECP256R1,
    P384: ec.SECP384R1,
    P521: ec.SECP521R1,
}

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537


def generate_key_by_key_type(key_type: KeyType) -> Tuple[object, object]:
    """Generate a new key pair of the given type.

    Args:
        key_type: The type of key to generate

    Returns:
        A tuple of (public key, private key) as `cryptography` key objects

    Raises:
        KeyGenerationError: If the key type cannot be generated

    """
    if key_type is ED25519:
        private_key = ed25519.Ed25519PrivateKey.generate()
    elif key_type is X25519:
        private_key = x25519.X25519PrivateKey.generate()
    elif key_type in EC_CURVES:
        private_key = ec.generate_private_key(EC_CURVES[key_type]())
    elif key_type is RSA:
        private_key = rsa.generate_private_key(
            public_exponent=RSA_PUBLIC_EXPONENT, key_size=RSA_KEY_SIZE
        )
    else:
        raise KeyGenerationError(f"Unsupported key type: {key_type.key_type}")

    LOGGER.debug("Generated %s key pair", key_type.key_type)
    return private_key.public_key(), private_key


def public_key_to_jwk(public_key, use: Optional[str] = None) -> PublicKeyJWK:
    """Export a public key as a JWK.

    Args:
        public_key: A `cryptography` public key object
        use: Optional intended use (`sig` or `enc`) to record in the JWK

    Returns:
        The public JWK, without a key identifier

    Raises:
        KeyGenerationError: If the key cannot be represented as a JWK

    """
    if isinstance(public_key, (ed25519.Ed25519PublicKey, x25519.X25519PublicKey)):
        kty = "OKP"
    elif isinstance(public_key, ec.EllipticCurvePublicKey):
        kty = "EC"
    elif isinstance(public_key, rsa.RSAPublicKey):
        kty = "RSA"
    else:
        raise KeyGenerationError(
            f"Cannot convert {type(public_key).__name__} to a JWK"
        )

    try:
        jwk = JsonWebKey.import_key(public_key, {"kty": kty}).as_dict()
    except (TypeError, ValueError, KeyError) as err:
        raise KeyGenerationError(f"Unable to export {kty} public key as JWK") from err

    # authlib derives a thumbprint kid; the identifier carries only key members
    jwk.pop("kid", None)
    if use:
        jwk["use"] = use

    try:
        return PublicKeyJWK.deserialize(jwk)
    except BaseModelError as err:
        raise KeyGenerationError(f"Exported {kty} JWK is not valid") from err
