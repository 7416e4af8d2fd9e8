from unittest import TestCase

from ..base import SettingsError
from ..settings import Settings


class TestSettings(TestCase):
    def setUp(self):
        self.settings = Settings({"resolver.timeout": "15"})

    def test_mapping(self):
        assert self.settings["resolver.timeout"] == "15"
        assert "resolver.timeout" in self.settings
        assert list(self.settings) == ["resolver.timeout"]
        assert len(self.settings) == 1
        assert len(Settings()) == 0
        with self.assertRaises(KeyError):
            self.settings["missing"]

    def test_get_value(self):
        assert self.settings.get_value("resolver.timeout") == "15"
        assert self.settings.get_value("missing", default=1) == 1

    def test_get_int(self):
        assert self.settings.get_int("resolver.timeout") == 15
        assert Settings({"resolver.timeout": 5}).get_int("resolver.timeout") == 5
        assert self.settings.get_int("missing") is None
        assert self.settings.get_int("missing", default=30) == 30

    def test_get_int_x(self):
        for value in ("soon", "1.5", [1]):
            with self.assertRaises(SettingsError):
                Settings({"resolver.timeout": value}).get_int("resolver.timeout")

    def test_copies_values(self):
        values = {"resolver.timeout": 1}
        settings = Settings(values)
        values["resolver.timeout"] = 2
        assert settings.get_int("resolver.timeout") == 1

    def test_repr(self):
        assert repr(self.settings) == "<Settings(resolver.timeout=15)>"
