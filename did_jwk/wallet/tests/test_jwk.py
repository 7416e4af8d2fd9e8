from unittest import TestCase

from ...messaging.models.base import BaseModelError
from ..jwk import PublicKeyJWK

ED25519_JWK = {
    "kty": "OKP",
    "crv": "Ed25519",
    "x": "11qYAYKxCrfVS_7TyWQHOg7hcvPapiMlrwIaaPcHURo",
}
RSA_JWK = {
    "kty": "RSA",
    "n": "0vx7agoebGcQSuuPiLJXZptN9nndrQmbXEps2aiAFbWhM7",
    "e": "AQAB",
}


class TestPublicKeyJWK(TestCase):
    def test_serialize_canonical_order(self):
        jwk = PublicKeyJWK.deserialize(
            {"x": ED25519_JWK["x"], "use": "sig", "crv": "Ed25519", "kty": "OKP"}
        )

        assert list(jwk.serialize()) == ["kty", "crv", "x", "use"]
        assert jwk.serialize(as_string=True) == (
            '{"kty":"OKP","crv":"Ed25519",'
            '"x":"11qYAYKxCrfVS_7TyWQHOg7hcvPapiMlrwIaaPcHURo","use":"sig"}'
        )

    def test_serialize_all_members(self):
        jwk = PublicKeyJWK(
            kid="key-1",
            alg="RS256",
            key_ops=["verify"],
            use="sig",
            e=RSA_JWK["e"],
            n=RSA_JWK["n"],
            kty="RSA",
        )

        assert list(jwk.serialize()) == [
            "kty",
            "n",
            "e",
            "use",
            "key_ops",
            "alg",
            "kid",
        ]

    def test_skip_none(self):
        jwk = PublicKeyJWK(**ED25519_JWK)

        assert jwk.serialize() == ED25519_JWK
        assert PublicKeyJWK.deserialize(jwk.serialize()) == jwk

    def test_deserialize_excludes_unknown(self):
        jwk = PublicKeyJWK.deserialize({**ED25519_JWK, "ext": True, "x5c": []})

        assert jwk.serialize() == ED25519_JWK

    def test_deserialize_x_json_string(self):
        with self.assertRaises(BaseModelError):
            PublicKeyJWK.deserialize('{"kty":"RSA","n":"%s","e":"AQAB"}' % RSA_JWK["n"])

    def test_serialize_non_ascii(self):
        jwk = PublicKeyJWK(**ED25519_JWK, kid="clé")

        assert jwk.serialize(as_string=True).endswith('"kid":"clé"}')

    def test_deserialize_x_kty(self):
        for jwk in ({"crv": "Ed25519", "x": "abc"}, {"kty": "oct", "k": "AAAA"}):
            with self.assertRaises(BaseModelError):
                PublicKeyJWK.deserialize(jwk)

    def test_deserialize_x_missing_members(self):
        for jwk in (
            {"kty": "OKP", "crv": "Ed25519"},
            {"kty": "OKP", "x": ED25519_JWK["x"]},
            {"kty": "EC", "crv": "P-256", "x": "abc"},
            {"kty": "RSA", "n": RSA_JWK["n"]},
            {"kty": "RSA", "e": "AQAB", "n": ""},
        ):
            with self.assertRaises(BaseModelError):
                PublicKeyJWK.deserialize(jwk)

    def test_deserialize_x_private(self):
        for member in ("d", "p", "q", "dp", "dq", "qi"):
            with self.assertRaises(BaseModelError):
                PublicKeyJWK.deserialize({**RSA_JWK, member: "AQAB"})

    def test_deserialize_x_types(self):
        with self.assertRaises(BaseModelError):
            PublicKeyJWK.deserialize({**ED25519_JWK, "x": 12})
        with self.assertRaises(BaseModelError):
            PublicKeyJWK.deserialize([ED25519_JWK])

    def test_eq_hash(self):
        first = PublicKeyJWK(**ED25519_JWK)
        second = PublicKeyJWK.deserialize(dict(reversed(list(ED25519_JWK.items()))))

        assert first == second
        assert hash(first) == hash(second)
        assert first != PublicKeyJWK(**ED25519_JWK, use="sig")

    def test_repr(self):
        assert repr(PublicKeyJWK(kty="RSA", n="abc", e="AQAB")) == (
            "<PublicKeyJWK(kty='RSA', n='abc', e='AQAB')>"
        )
