import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa, x25519

from ..crypto import generate_key_by_key_type, public_key_to_jwk
from ..error import KeyGenerationError
from ..key_type import (
    BLS12381G1G2,
    ED25519,
    P256,
    P384,
    P521,
    RSA,
    SECP256K1,
    X25519,
)


@pytest.mark.parametrize(
    "key_type, private_cls, public_cls",
    [
        (ED25519, ed25519.Ed25519PrivateKey, ed25519.Ed25519PublicKey),
        (X25519, x25519.X25519PrivateKey, x25519.X25519PublicKey),
        (SECP256K1, ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey),
        (P256, ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey),
        (P384, ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey),
        (P521, ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey),
        (RSA, rsa.RSAPrivateKey, rsa.RSAPublicKey),
    ],
)
def test_generate_key_by_key_type(key_type, private_cls, public_cls):
    public_key, private_key = generate_key_by_key_type(key_type)

    assert isinstance(private_key, private_cls)
    assert isinstance(public_key, public_cls)


def test_generate_key_x_unsupported():
    with pytest.raises(KeyGenerationError):
        generate_key_by_key_type(BLS12381G1G2)


@pytest.mark.parametrize("key_type", [ED25519, X25519, SECP256K1, P256, P384, P521])
def test_public_key_to_jwk_curves(key_type):
    public_key, _ = generate_key_by_key_type(key_type)
    jwk = public_key_to_jwk(public_key)

    assert jwk.kty == key_type.jwk_kty
    assert jwk.crv == key_type.jwk_crv
    assert jwk.x
    assert (jwk.y is not None) == (key_type.jwk_kty == "EC")
    assert jwk.kid is None
    assert jwk.use is None


def test_public_key_to_jwk_rsa():
    public_key, _ = generate_key_by_key_type(RSA)
    jwk = public_key_to_jwk(public_key, use="sig")

    assert jwk.kty == "RSA"
    assert jwk.crv is None
    assert jwk.e == "AQAB"
    assert jwk.n
    assert jwk.use == "sig"
    assert "kid" not in jwk.serialize()


def test_public_key_to_jwk_x_private_key():
    _, private_key = generate_key_by_key_type(ED25519)

    with pytest.raises(KeyGenerationError):
        public_key_to_jwk(private_key)


def test_public_key_to_jwk_x_not_a_key():
    with pytest.raises(KeyGenerationError):
        public_key_to_jwk(b"\x00" * 32)
