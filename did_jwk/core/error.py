"""Root exception shared by every did_jwk error."""

from typing import Optional


class BaseError(Exception):
    """Base class for did_jwk errors.

    Errors are raised `from` their cause, so a resolution failure carries the
    decoding stage that failed as `__cause__`; `roll_up` reports the chain.
    """

    def __init__(self, *args, error_code: Optional[str] = None):
        """Initialize a BaseError instance."""
        super().__init__(*args)
        self.error_code = error_code

    @property
    def message(self) -> str:
        """Accessor for the error message."""
        return str(self.args[0]).strip() if self.args else ""

    @property
    def roll_up(self) -> str:
        """Accessor for this error and its causes as one sentence per error."""
        parts = []
        exc: Optional[BaseException] = self
        while exc is not None:
            text = " ".join(str(exc.args[0]).split()) if exc.args else ""
            parts.append(text.rstrip(".") or type(exc).__name__)
            exc = exc.__cause__
        return ". ".join(parts) + "."
