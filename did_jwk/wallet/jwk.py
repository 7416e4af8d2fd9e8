"""Public JSON Web Key model."""

from typing import Optional, Sequence

from marshmallow import (
    EXCLUDE,
    ValidationError,
    fields,
    post_dump,
    pre_load,
    validates_schema,
)
from marshmallow.validate import OneOf

from ..messaging.models.base import BaseModel, BaseModelSchema

# Member order of the canonical serialization
JWK_MEMBERS = ("kty", "crv", "x", "y", "n", "e", "use", "key_ops", "alg", "kid")

# Members which only appear in private keys
PRIVATE_MEMBERS = ("d", "p", "q", "dp", "dq", "qi", "oth")

REQUIRED_BY_KTY = {
    "OKP": ("crv", "x"),
    "EC": ("crv", "x", "y"),
    "RSA": ("n", "e"),
}

USE_SIGNATURE = "sig"
USE_ENCRYPTION = "enc"


class PublicKeyJWK(BaseModel):
    """A public key in JSON Web Key form."""

    class Meta:
        """PublicKeyJWK metadata."""

        schema_class = "PublicKeyJWKSchema"

    def __init__(
        self,
        *,
        kty: str,
        crv: Optional[str] = None,
        x: Optional[str] = None,
        y: Optional[str] = None,
        n: Optional[str] = None,
        e: Optional[str] = None,
        use: Optional[str] = None,
        key_ops: Optional[Sequence[str]] = None,
        alg: Optional[str] = None,
        kid: Optional[str] = None,
    ):
        """Initialize a PublicKeyJWK instance."""
        super().__init__()
        self.kty = kty
        self.crv = crv
        self.x = x
        self.y = y
        self.n = n
        self.e = e
        self.use = use
        self.key_ops = list(key_ops) if key_ops is not None else None
        self.alg = alg
        self.kid = kid


class PublicKeyJWKSchema(BaseModelSchema):
    """PublicKeyJWK schema."""

    class Meta:
        """PublicKeyJWKSchema metadata."""

        model_class = PublicKeyJWK
        unknown = EXCLUDE

    kty = fields.Str(
        required=True,
        validate=OneOf(list(REQUIRED_BY_KTY)),
        metadata={"description": "Key family", "example": "OKP"},
    )
    crv = fields.Str(
        required=False, metadata={"description": "Curve name", "example": "Ed25519"}
    )
    x = fields.Str(required=False, metadata={"description": "Curve x coordinate"})
    y = fields.Str(required=False, metadata={"description": "Curve y coordinate"})
    n = fields.Str(required=False, metadata={"description": "RSA modulus"})
    e = fields.Str(required=False, metadata={"description": "RSA exponent"})
    use = fields.Str(
        required=False, metadata={"description": "Intended key use", "example": "sig"}
    )
    key_ops = fields.List(
        fields.Str(), required=False, metadata={"description": "Permitted operations"}
    )
    alg = fields.Str(required=False, metadata={"description": "Algorithm"})
    kid = fields.Str(required=False, metadata={"description": "Key identifier"})

    @pre_load
    def reject_private_members(self, data, **kwargs):
        """Refuse to load a JWK carrying private key material."""
        if isinstance(data, dict):
            present = [member for member in PRIVATE_MEMBERS if member in data]
            if present:
                raise ValidationError(
                    f"JWK must not contain private key members: {', '.join(present)}"
                )
        return data

    @validates_schema
    def validate_key_members(self, data, **kwargs):
        """Check the members each key family needs are present."""
        missing = [
            member
            for member in REQUIRED_BY_KTY.get(data.get("kty"), ())
            if not data.get(member)
        ]
        if missing:
            raise ValidationError(
                f"JWK of kty {data.get('kty')} requires: {', '.join(missing)}"
            )

    @post_dump
    def canonical_order(self, data, **kwargs):
        """Emit members in canonical order."""
        return {member: data[member] for member in JWK_MEMBERS if member in data}
