"""Tests for container producers."""

from collections.abc import Iterable
from typing import Annotated

import pytest

from fixture_engine.constraints.base import MaxLength, MinLength, Required
from fixture_engine.engine.object_generator import create_default_generator
from fixture_engine.errors import ConfigurationError
from fixture_engine.producers.containers import ArrayProducer, SequenceProducer
from fixture_engine.shapes import KeyValuePair


@pytest.fixture
def generator():
    """Create a seeded generator with the default producers."""
    return create_default_generator(seed=1234)


class TestListProducer:
    """Tests for ListProducer."""

    def test_default_sequence_bounds(self, generator):
        for value in generator.generate_many(list[int], 100):
            assert isinstance(value, list)
            assert 8 <= len(value) < 32
            assert all(isinstance(item, int) for item in value)

    def test_min_and_max_length(self, generator):
        sizes = {len(v) for v in generator.generate_many(list[int], 1000, [MinLength(4), MaxLength(8)])}
        assert sizes == {4, 5, 6, 7}

    def test_min_equals_max_gives_fixed_size(self, generator):
        for value in generator.generate_many(list[str], 20, [MinLength(3), MaxLength(3)]):
            assert len(value) == 3

    def test_inverted_bounds_raise(self, generator):
        with pytest.raises(ConfigurationError):
            generator.generate(list[int], [MinLength(9), MaxLength(2)])

    def test_max_length_below_default_minimum(self, generator):
        for value in generator.generate_many(list[int], 1000, [MaxLength(4)]):
            assert len(value) == 3

    def test_min_length_above_default_maximum(self, generator):
        value = generator.generate(list[int], [MinLength(40)])
        assert len(value) == 40

    def test_markers_do_not_reach_elements(self, generator):
        # Elements are generated with no constraints: default string bounds apply.
        value = generator.generate(list[str], [MinLength(2), MaxLength(3)])
        assert len(value) == 2
        assert all(len(item) >= 16 for item in value)

    def test_element_markers_via_annotated(self, generator):
        value = generator.generate(list[Annotated[str, MaxLength(4)]])
        assert all(len(item) < 4 for item in value)

    def test_nested_lists(self, generator):
        value = generator.generate(list[list[int]], [MinLength(2), MaxLength(3)])
        assert len(value) == 2
        assert all(isinstance(inner, list) and 8 <= len(inner) < 32 for inner in value)

    def test_elements_can_be_null(self, generator):
        generator.set_null_chance(100)
        value = generator.generate(list[str], [Required()])
        assert value is not None
        assert all(item is None for item in value)


class TestDictionaryProducer:
    """Tests for DictionaryProducer."""

    def test_size_within_bounds(self, generator):
        for value in generator.generate_many(dict[int, str], 1000, [MinLength(4), MaxLength(8)]):
            assert isinstance(value, dict)
            assert 4 <= len(value) < 8

    def test_key_and_value_shapes(self, generator):
        value = generator.generate(dict[str, float])
        assert all(isinstance(k, str) for k in value)
        assert all(isinstance(v, float) for v in value.values())

    def test_duplicate_keys_shrink_the_map(self, generator):
        sizes = {len(v) for v in generator.generate_many(dict[bool, int], 50)}
        assert sizes <= {1, 2}


class TestKeyValuePairProducer:
    """Tests for KeyValuePairProducer."""

    def test_single_pair(self, generator):
        pair = generator.generate(KeyValuePair[str, int])
        assert isinstance(pair, KeyValuePair)
        assert isinstance(pair.key, str)
        assert isinstance(pair.value, int)

    def test_pair_is_immutable(self, generator):
        pair = generator.generate(KeyValuePair[int, int])
        with pytest.raises(AttributeError):
            pair.key = 1


class TestArrayAndSequenceProducers:
    """Tests for ArrayProducer and SequenceProducer."""

    def test_array(self, generator):
        value = generator.generate(tuple[int, ...], [MinLength(5), MaxLength(6)])
        assert isinstance(value, tuple)
        assert len(value) == 5

    def test_fixed_tuples_are_not_arrays(self):
        producer = ArrayProducer()
        assert producer.matches(tuple[int, ...])
        assert not producer.matches(tuple[int, str])
        assert not producer.matches(tuple)

    def test_iterable_materialized_as_tuple(self, generator):
        value = generator.generate(Iterable[int], [MinLength(3), MaxLength(4)])
        assert isinstance(value, tuple)
        assert len(value) == 3
        assert all(isinstance(item, int) for item in value)

    def test_sequence_matches_only_iterable(self):
        producer = SequenceProducer()
        assert producer.matches(Iterable[str])
        assert not producer.matches(list[str])
        assert not producer.matches(tuple[str, ...])
