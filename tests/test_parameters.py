import unittest

import pytest

from wirebind import Container, ParameterNotFoundError, ParameterReference, ParameterResolver


class TestParameterLookup(unittest.TestCase):
    cont: Container

    def setUp(self):
        self.cont = Container(
            parameters={
                "db": {"host": "localhost", "port": 5432},
                "debug": False,
                "nothing": None,
                "deep": {"a": {"b": {"c": "leaf"}}},
            }
        )

    def test_nested_paths(self):
        assert self.cont.get_parameter("db.host") == "localhost"
        assert self.cont.get_parameter("db.port") == 5432
        assert self.cont.get_parameter("deep.a.b.c") == "leaf"

    def test_top_level_and_subtree(self):
        assert self.cont.get_parameter("debug") is False
        assert self.cont.get_parameter("deep.a") == {"b": {"c": "leaf"}}

    def test_missing_segment_raises(self):
        with pytest.raises(ParameterNotFoundError) as ctx:
            self.cont.get_parameter("db.missing")
        assert ctx.value.path == "db.missing"
        assert "db.missing" in str(ctx.value)

    def test_descending_into_a_scalar_raises(self):
        with pytest.raises(ParameterNotFoundError):
            self.cont.get_parameter("db.port.value")

    def test_has_parameter(self):
        assert self.cont.has_parameter("db.host")
        assert self.cont.has_parameter("deep.a.b")
        assert not self.cont.has_parameter("db.missing")
        assert not self.cont.has_parameter("ghost")

    def test_stored_none_is_found(self):
        assert self.cont.get_parameter("nothing") is None
        assert self.cont.has_parameter("nothing")

    def test_empty_container_has_no_parameters(self):
        assert not Container().has_parameter("anything")


def test_has_only_swallows_parameter_not_found():
    class ExplodingMapping(dict):
        def __contains__(self, key):
            raise RuntimeError("boom")

    resolver = ParameterResolver({"root": ExplodingMapping()})
    with pytest.raises(RuntimeError, match="boom"):
        resolver.has("root.child")


def test_missing_parameter_argument_fails_the_build():
    class Holder:
        def __init__(self, value):
            self.value = value

    c = Container(services={"holder": {"class": Holder, "arguments": ["x"]}})
    assert c.get("holder").value == "x"

    c = Container(services={"holder": {"class": Holder, "arguments": [ParameterReference("db.host")]}})
    with pytest.raises(ParameterNotFoundError):
        c.get("holder")
