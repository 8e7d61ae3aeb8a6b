"""Tests for size budgets, configuration and error types."""
import pytest

from selfsimnet import config
from selfsimnet.config import _env_int
from selfsimnet.errors import GraphTooLargeError, InvalidParameterError, SelfSimNetError
from selfsimnet.generators import load_apollo, load_koch, load_pseudo_ext
from selfsimnet.generators import triangles


def test_budget_rejects_before_allocation(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("construction must not start")

    monkeypatch.setattr(triangles, "expand", boom)
    with pytest.raises(GraphTooLargeError) as excinfo:
        load_koch(3, max_edges=100)
    err = excinfo.value
    assert err.family == "Koch_3"
    assert err.edges == 192
    assert err.vertices == 129


def test_budget_vertex_limit():
    with pytest.raises(GraphTooLargeError):
        load_apollo(2, max_vertices=19)
    assert load_apollo(2, max_vertices=20).number_of_nodes() == 20


def test_budget_is_overflow_error():
    with pytest.raises(OverflowError):
        load_pseudo_ext(5, 40)


def test_default_budget_comes_from_config(monkeypatch):
    monkeypatch.setattr(config, "MAX_EDGES", 10)
    with pytest.raises(GraphTooLargeError):
        load_koch(1)
    assert load_koch(0).number_of_edges() == 3


def test_invalid_checked_before_budget():
    with pytest.raises(InvalidParameterError):
        load_koch(-1, max_edges=0)


def test_error_hierarchy():
    assert issubclass(InvalidParameterError, SelfSimNetError)
    assert issubclass(GraphTooLargeError, SelfSimNetError)


def test_env_int(monkeypatch):
    monkeypatch.setenv("SELFSIMNET_TEST_LIMIT", "1_000")
    assert _env_int("SELFSIMNET_TEST_LIMIT", 5) == 1000
    monkeypatch.setenv("SELFSIMNET_TEST_LIMIT", "")
    assert _env_int("SELFSIMNET_TEST_LIMIT", 5) == 5
    monkeypatch.delenv("SELFSIMNET_TEST_LIMIT")
    assert _env_int("SELFSIMNET_TEST_LIMIT", 5) == 5


def test_env_int_rejects_garbage(monkeypatch):
    monkeypatch.setenv("SELFSIMNET_TEST_LIMIT", "lots")
    with pytest.raises(ValueError):
        _env_int("SELFSIMNET_TEST_LIMIT", 5)
