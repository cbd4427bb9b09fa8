import pytest

from wirebind import CircularReferenceError, Container, ServiceReference


class Node:
    def __init__(self, *deps):
        self.deps = deps


def test_two_services_referencing_each_other():
    c = Container(
        services={
            "a": {"class": Node, "arguments": [ServiceReference("b")]},
            "b": {"class": Node, "arguments": [ServiceReference("a")]},
        }
    )
    with pytest.raises(CircularReferenceError) as ctx:
        c.get("a")
    assert ctx.value.name == "a"


def test_cycle_detected_from_either_end():
    c = Container(
        services={
            "a": {"class": Node, "arguments": [ServiceReference("b")]},
            "b": {"class": Node, "arguments": [ServiceReference("a")]},
        }
    )
    with pytest.raises(CircularReferenceError) as ctx:
        c.get("b")
    assert ctx.value.name == "b"


def test_self_reference():
    c = Container(services={"a": {"class": Node, "arguments": [ServiceReference("a")]}})
    with pytest.raises(CircularReferenceError):
        c.get("a")


def test_transitive_cycle():
    c = Container(
        services={
            "a": {"class": Node, "arguments": [ServiceReference("b")]},
            "b": {"class": Node, "arguments": [ServiceReference("c")]},
            "c": {"class": Node, "arguments": [ServiceReference("a")]},
        }
    )
    with pytest.raises(CircularReferenceError):
        c.get("a")


def test_cycle_through_post_construction_call():
    class Wired(Node):
        def attach(self, other):
            self.other = other

    c = Container(
        services={
            "a": {"class": Wired, "calls": [{"method": "attach", "arguments": [ServiceReference("b")]}]},
            "b": {"class": Node, "arguments": [ServiceReference("a")]},
        }
    )
    with pytest.raises(CircularReferenceError):
        c.get("a")


def test_shared_dependency_is_not_a_cycle():
    c = Container(
        services={
            "db": {"class": Node},
            "repo": {"class": Node, "arguments": [ServiceReference("db")]},
            "svc": {"class": Node, "arguments": [ServiceReference("repo"), ServiceReference("db")]},
        }
    )
    svc = c.get("svc")
    repo, db = svc.deps
    assert repo.deps == (db,)
    assert db is c.get("db")


def test_failed_build_is_not_retried():
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise ValueError("first attempt fails")
        return Node()

    c = Container(services={"flaky": {"class": flaky}})

    with pytest.raises(ValueError, match="first attempt fails"):
        c.get("flaky")

    with pytest.raises(CircularReferenceError):
        c.get("flaky")
    assert len(attempts) == 1


def test_services_on_a_cycle_stay_failed():
    c = Container(
        services={
            "a": {"class": Node, "arguments": [ServiceReference("b")]},
            "b": {"class": Node, "arguments": [ServiceReference("a")]},
        }
    )
    with pytest.raises(CircularReferenceError):
        c.get("a")
    with pytest.raises(CircularReferenceError):
        c.get("b")
