from unittest import TestCase

from ...resolver.did_resolver import DIDResolver
from ..base import InjectionError
from ..injection_context import InjectionContext
from ..settings import Settings


class TestInjectionContext(TestCase):
    def setUp(self):
        self.context = InjectionContext(settings={"resolver.timeout": 10})

    def test_settings(self):
        assert isinstance(self.context.settings, Settings)
        assert self.context.settings.get_int("resolver.timeout") == 10
        assert len(InjectionContext().settings) == 0

    def test_inject(self):
        assert self.context.inject_or(DIDResolver) is None
        with self.assertRaises(InjectionError):
            self.context.inject(DIDResolver)

        resolver = DIDResolver()
        self.context.bind_instance(DIDResolver, resolver)
        assert self.context.inject(DIDResolver) is resolver
        assert self.context.inject_or(DIDResolver) is resolver

    def test_inject_or_default(self):
        default = DIDResolver()
        assert self.context.inject_or(DIDResolver, default) is default

    def test_bind_instance_x(self):
        with self.assertRaises(InjectionError):
            self.context.bind_instance(DIDResolver, "not a resolver")
