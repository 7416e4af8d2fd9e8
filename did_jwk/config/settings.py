"""Resolver settings."""

from typing import Any, Iterator, Mapping, Optional

from .base import SettingsError


class Settings(Mapping[str, Any]):
    """Read-only mapping of setting names (ie. `resolver.timeout`) to values."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        """Initialize a Settings object from an optional mapping."""
        self._values = dict(values or {})

    def get_value(self, name: str, default: Any = None) -> Any:
        """Fetch a setting, or the default when it is not defined."""
        return self._values.get(name, default)

    def get_int(self, name: str, default: Optional[int] = None) -> Optional[int]:
        """Fetch a setting as an integer.

        Raises:
            SettingsError: If the value is defined but not an integer

        """
        value = self._values.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError) as err:
            raise SettingsError(
                f"Setting {name} must be an integer, got {value!r}"
            ) from err

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        """Provide a human readable representation of this object."""
        items = ", ".join(f"{name}={value}" for name, value in self._values.items())
        return f"<Settings({items})>"
