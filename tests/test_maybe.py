"""Tests for the Maybe optional value."""

from dataclasses import FrozenInstanceError

import pytest

from native_array import NOTHING, Maybe, just


class TestConstruction:
    """Tests for building Just and Nothing."""

    def test_just_carries_value(self):
        value = Maybe.Just(4)
        assert value.is_just()
        assert not value.is_nothing()
        assert value.value == 4

    def test_nothing_is_shared_constant(self):
        assert Maybe.Nothing() is NOTHING
        assert NOTHING.is_nothing()

    def test_structural_equality(self):
        """Two Justs with equal values compare equal."""
        assert just(4) == Maybe.Just(4)
        assert just(4) != just(5)
        assert just(None) != NOTHING

    def test_is_immutable(self):
        value = just(1)
        with pytest.raises(FrozenInstanceError):
            value.value = 2  # type: ignore[misc]

    def test_repr(self):
        assert repr(just("a")) == "Just('a')"
        assert repr(NOTHING) == "Nothing"


class TestAccessors:
    """Tests for reading and transforming a Maybe."""

    def test_get_just(self):
        assert just(3).get() == 3

    def test_get_nothing_raises(self):
        with pytest.raises(ValueError, match="no value"):
            NOTHING.get()

    def test_with_default(self):
        assert just(3).with_default(0) == 3
        assert NOTHING.with_default(0) == 0

    def test_map(self):
        assert just(3).map(lambda x: x + 1) == just(4)
        assert NOTHING.map(lambda x: x + 1) is NOTHING

    def test_bind(self):
        half = lambda x: just(x // 2) if x % 2 == 0 else NOTHING  # noqa: E731
        assert just(4).bind(half) == just(2)
        assert just(3).bind(half) is NOTHING
        assert NOTHING.bind(half) is NOTHING
