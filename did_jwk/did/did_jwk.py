"""DID JWK class and resolver methods.

A did:jwk carries its public key inline: the identifier is the prefix
`did:jwk:` followed by the base64url (unpadded) encoding of the key's JSON
Web Key. See https://github.com/quartzjer/did-jwk/blob/main/spec.md
"""

import binascii
import json
import logging
from typing import Mapping, Optional, Tuple, Union

from pydid import DIDDocument

from ..messaging.models.base import BaseModelError
from ..wallet.crypto import generate_key_by_key_type, public_key_to_jwk
from ..wallet.did_method import JWK, DIDMethod, is_supported_jwk_key_type
from ..wallet.error import KeyGenerationError
from ..wallet.jwk import USE_ENCRYPTION, USE_SIGNATURE, PublicKeyJWK
from ..wallet.key_type import KeyType, KeyTypes
from ..wallet.util import bytes_to_b64url, unpadded_b64url_to_bytes
from .error import (
    DIDJWKSerializationError,
    InvalidEncodingError,
    InvalidJWKError,
    InvalidPrefixError,
    MalformedDIDJWKError,
    MissingPayloadError,
    UnsupportedKeyTypeError,
)

LOGGER = logging.getLogger(__name__)

DID_JWK_PREFIX = f"did:{JWK.method_name}"
DID_V1_CONTEXT_URL = "https://www.w3.org/ns/did/v1"
JWS_2020_CONTEXT_URL = "https://w3id.org/security/suites/jws-2020/v1"
JSON_WEB_KEY_2020 = "JsonWebKey2020"
KEY_REFERENCE = "#0"

SIGNING_RELATIONSHIPS = (
    "authentication",
    "assertionMethod",
    "capabilityInvocation",
    "capabilityDelegation",
)
KEY_AGREEMENT = "keyAgreement"

# Relationships dropped from the document for each recognized `use` hint.
# Any other hint, or none, keeps all five.
SUPPRESSED_BY_USE = {
    USE_SIGNATURE: (KEY_AGREEMENT,),
    USE_ENCRYPTION: SIGNING_RELATIONSHIPS,
}


class DIDJWK:
    """DID JWK parser and resolver."""

    __slots__ = ("_did",)

    def __init__(self, did: str) -> None:
        """Initialize new DIDJWK instance.

        The value is not checked here; use `decode` or `is_valid`.
        """
        self._did = str(did)

    @classmethod
    def from_jwk(cls, jwk: Union[PublicKeyJWK, Mapping]) -> "DIDJWK":
        """Create a did:jwk from a public JWK.

        The JWK is serialized to compact JSON with members in canonical order,
        encoded as unpadded base64url and prefixed with `did:jwk:`. The same key
        always produces the same identifier.

        Raises:
            DIDJWKSerializationError: If the JWK cannot be serialized

        """
        try:
            # models are dumped without validation, so load them back first
            if isinstance(jwk, PublicKeyJWK):
                jwk = jwk.serialize()
            serialized = PublicKeyJWK.deserialize(jwk).serialize(as_string=True)
        except BaseModelError as err:
            raise DIDJWKSerializationError("Unable to serialize public JWK") from err

        encoded = bytes_to_b64url(serialized.encode("utf-8"))
        return cls(f"{DID_JWK_PREFIX}:{encoded}")

    @classmethod
    def generate(
        cls, key_type: Union[KeyType, str], use: Optional[str] = None
    ) -> Tuple[object, "DIDJWK"]:
        """Generate a key of the given type and the did:jwk for it.

        Args:
            key_type: One of the did:jwk key types, or its tag (ie. "p256")
            use: Optional `use` hint to record in the JWK

        Returns:
            A tuple of (private key, did:jwk)

        Raises:
            UnsupportedKeyTypeError: If the key type is not a did:jwk type; no key
                material is generated in that case

        """
        if isinstance(key_type, str):
            tag = key_type
            key_type = KeyTypes().from_key_type(tag)
            if not key_type:
                raise UnsupportedKeyTypeError(f"Unknown key type: {tag}")
        if not is_supported_jwk_key_type(key_type):
            raise UnsupportedKeyTypeError(
                f"Unsupported did:jwk key type: {key_type.key_type}"
            )

        try:
            public_key, private_key = generate_key_by_key_type(key_type)
            jwk = public_key_to_jwk(public_key, use=use)
        except KeyGenerationError as err:
            raise DIDJWKSerializationError(
                f"Unable to create {key_type.key_type} key for did:jwk"
            ) from err

        did_jwk = cls.from_jwk(jwk)
        LOGGER.debug("Generated %s did:jwk %s", key_type.key_type, did_jwk)
        return private_key, did_jwk

    @property
    def did(self) -> str:
        """Getter for full did:jwk string."""
        return self._did

    @property
    def suffix(self) -> str:
        """Getter for the encoded key, the value without the `did:jwk:` prefix.

        Raises:
            InvalidPrefixError: If the value is not a did:jwk

        """
        prefix = f"{DID_JWK_PREFIX}:"
        if not self._did.startswith(prefix):
            raise InvalidPrefixError(f"Not a did:jwk, invalid prefix: {self._did}")
        return self._did[len(prefix) :]

    @property
    def method(self) -> DIDMethod:
        """Getter for the DID method."""
        return JWK

    @property
    def key_id(self) -> str:
        """Getter for key id."""
        return f"{self._did}{KEY_REFERENCE}"

    @property
    def key_type(self) -> Optional[KeyType]:
        """Getter for the type of the embedded key, None if not a known type."""
        jwk = self.decode()
        return KeyTypes().from_jwk(jwk.kty, jwk.crv)

    def decode(self) -> PublicKeyJWK:
        """Extract the public JWK embedded in the did:jwk.

        Raises:
            InvalidPrefixError: If the value does not start with `did:jwk:`
            MissingPayloadError: If nothing follows the prefix
            InvalidEncodingError: If the payload is not unpadded base64url
            InvalidJWKError: If the payload is not a public JWK

        """
        encoded = self.suffix
        if not encoded:
            raise MissingPayloadError(f"No encoded key in did:jwk: {self._did}")

        try:
            decoded = unpadded_b64url_to_bytes(encoded)
        except (binascii.Error, ValueError) as err:
            raise InvalidEncodingError(
                f"Encoded key in did:jwk is not base64url: {self._did}"
            ) from err

        try:
            jwk = json.loads(decoded.decode("utf-8"))
        except ValueError as err:
            raise InvalidJWKError(
                f"Encoded key in did:jwk is not UTF-8 JSON: {self._did}"
            ) from err
        if not isinstance(jwk, dict):
            raise InvalidJWKError(
                f"Encoded key in did:jwk is not a JSON object: {self._did}"
            )

        try:
            return PublicKeyJWK.deserialize(jwk)
        except BaseModelError as err:
            raise InvalidJWKError(
                f"Encoded key in did:jwk is not a public JWK: {self._did}"
            ) from err

    def expand(self, jwk: Optional[PublicKeyJWK] = None) -> dict:
        """Expand into a DID document, decoding the key unless one is given."""
        if jwk is None:
            jwk = self.decode()
        return construct_did_jwk_doc(self._did, jwk)

    @property
    def did_doc(self) -> dict:
        """Getter for did document associated with did:jwk."""
        return self.expand()

    def document(self) -> DIDDocument:
        """Return the DID document as a pydid `DIDDocument`."""
        return DIDDocument.deserialize(self.did_doc)

    def is_valid(self) -> bool:
        """Check the did:jwk decodes and expands."""
        try:
            self.expand()
        except MalformedDIDJWKError as err:
            LOGGER.debug("Invalid did:jwk %s: %s", self._did, err)
            return False
        return True

    def __str__(self) -> str:
        """Return the did:jwk string."""
        return self._did

    def __repr__(self) -> str:
        """Return a human readable representation of this did:jwk."""
        return f"<DIDJWK({self._did})>"

    def __eq__(self, other) -> bool:
        """Compare did:jwk values by their string form."""
        if isinstance(other, DIDJWK):
            return self._did == other._did
        return NotImplemented

    def __hash__(self) -> int:
        """Hash by the string form."""
        return hash(self._did)


def construct_did_jwk_doc(did: str, jwk: PublicKeyJWK) -> dict:
    """Construct the DID document for a did:jwk.

    Args:
        did: The did:jwk, used verbatim as the document id and controller
        jwk: The public key decoded from the did:jwk

    Returns:
        dict: The did:jwk did document

    """
    key_id = f"{did}{KEY_REFERENCE}"
    did_doc = {
        "@context": [DID_V1_CONTEXT_URL, JWS_2020_CONTEXT_URL],
        "id": did,
        "verificationMethod": [
            {
                "id": key_id,
                "type": JSON_WEB_KEY_2020,
                "controller": did,
                "publicKeyJwk": jwk.serialize(),
            }
        ],
        "authentication": [key_id],
        "assertionMethod": [key_id],
        "keyAgreement": [key_id],
        "capabilityInvocation": [key_id],
        "capabilityDelegation": [key_id],
    }

    for relationship in SUPPRESSED_BY_USE.get(jwk.use, ()):
        del did_doc[relationship]

    return did_doc
