from unittest import TestCase

from ..error import BaseError


class TestBaseError(TestCase):
    def test_message(self):
        err = BaseError("  spaced out  ")
        assert err.message == "spaced out"
        assert BaseError().message == ""

    def test_error_code(self):
        assert BaseError("x", error_code="bad").error_code == "bad"
        assert BaseError("x").error_code is None

    def test_roll_up(self):
        try:
            try:
                raise ValueError("Invalid base64url payload\n  at offset 3.")
            except ValueError as err:
                raise BaseError("Unable to decode did:jwk") from err
        except BaseError as err:
            assert err.roll_up == (
                "Unable to decode did:jwk. Invalid base64url payload at offset 3."
            )

    def test_roll_up_no_args(self):
        assert BaseError().roll_up == "BaseError."
