"""Tests for collection operations built on the traversal core."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

import underbar as _
from tests.strategies import int_lists, integers


class TestFirstLast:
    """Tests for first() and last()."""

    def test_first_without_n(self):
        assert _.first([1, 2, 3]) == 1

    def test_first_with_n(self):
        assert _.first([1, 2, 3], 2) == [1, 2]
        assert _.first([1, 2, 3], 0) == []
        assert _.first([1, 2, 3], 5) == [1, 2, 3]

    def test_first_of_empty(self):
        assert _.first([]) is None

    def test_last_without_n(self):
        assert _.last([1, 2, 3]) == 3

    def test_last_with_n(self):
        assert _.last([1, 2, 3], 2) == [2, 3]
        assert _.last([1, 2, 3], 0) == []
        assert _.last([1, 2, 3], 5) == [1, 2, 3]

    def test_last_of_empty(self):
        assert _.last([]) is None


class TestSearching:
    """Tests for index_of() and contains()."""

    def test_index_of_finds_first_match(self):
        assert _.index_of([10, 20, 10], 10) == 0
        assert _.index_of([10, 20, 30], 30) == 2

    def test_index_of_missing(self):
        assert _.index_of([1, 2], 3) == -1

    def test_contains_sequence(self):
        assert _.contains([1, 2, 3], 2) is True
        assert _.contains([1, 2, 3], 4) is False

    def test_contains_mapping_checks_values(self):
        assert _.contains({'a': 1}, 1) is True
        assert _.contains({'a': 1}, 'a') is False

    def test_contains_empty(self):
        assert _.contains([], None) is False

    @given(int_lists, integers)
    def test_index_of_matches_list_index(self, numbers, target):
        expected = numbers.index(target) if target in numbers else -1
        assert _.index_of(numbers, target) == expected


class TestFiltering:
    """Tests for filter(), reject() and uniq()."""

    def test_filter(self):
        assert _.filter([1, 2, 3, 4], lambda n: n % 2 == 0) == [2, 4]

    def test_filter_mapping_returns_values(self):
        assert _.filter({'a': 1, 'b': 2}, lambda n: n > 1) == [2]

    def test_reject(self):
        assert _.reject([1, 2, 3, 4], lambda n: n % 2 == 0) == [1, 3]

    def test_uniq_keeps_first_seen_order(self):
        assert _.uniq([3, 1, 3, 2, 1]) == [3, 1, 2]

    @given(int_lists)
    def test_filter_and_reject_partition(self, numbers):
        """filter() and reject() with the same test split the input."""
        evens = _.filter(numbers, lambda n: n % 2 == 0)
        odds = _.reject(numbers, lambda n: n % 2 == 0)
        assert sorted(evens + odds) == sorted(numbers)


class TestTransforming:
    """Tests for map(), pluck(), invoke(), sort_by()."""

    def test_map(self):
        assert _.map([1, 2, 3], lambda n: n * 2) == [2, 4, 6]

    def test_map_mapping(self):
        assert _.map({'a': 1, 'b': 2}, lambda n: n + 1) == [2, 3]

    def test_pluck(self):
        people = [{'name': 'moe', 'age': 30}, {'name': 'curly', 'age': 50}]
        assert _.pluck(people, 'age') == [30, 50]

    def test_invoke_method_name(self):
        assert _.invoke(['a', 'b'], 'upper') == ['A', 'B']

    def test_invoke_method_name_with_args(self):
        assert _.invoke(['a-b', 'c-d'], 'split', '-') == [['a', 'b'], ['c', 'd']]

    def test_invoke_callable(self):
        assert _.invoke([[3, 1], [2, 0]], sorted) == [[1, 3], [0, 2]]

    def test_sort_by_callable(self):
        assert _.sort_by(['ccc', 'a', 'bb'], len) == ['a', 'bb', 'ccc']

    def test_sort_by_key_name(self):
        people = [{'name': 'curly'}, {'name': 'moe'}, {'name': 'larry'}]
        assert _.pluck(_.sort_by(people, 'name'), 'name') == ['curly', 'larry', 'moe']

    def test_sort_by_does_not_modify_input(self):
        original = [3, 1, 2]
        assert _.sort_by(original, lambda n: n) == [1, 2, 3]
        assert original == [3, 1, 2]

    def test_sort_by_is_stable(self):
        words = ['bb', 'aa', 'c', 'dd']
        assert _.sort_by(words, len) == ['c', 'bb', 'aa', 'dd']

    def test_sort_by_rejects_other_iterators(self):
        with pytest.raises(TypeError, match='callable or str'):
            _.sort_by([1, 2], 3)


class TestShuffle:
    """Tests for shuffle()."""

    def test_shuffle_keeps_elements(self):
        numbers = list(range(20))
        assert sorted(_.shuffle(numbers)) == numbers

    def test_shuffle_does_not_modify_input(self):
        numbers = [1, 2, 3]
        _.shuffle(numbers)
        assert numbers == [1, 2, 3]

    @given(int_lists)
    def test_shuffle_is_permutation(self, numbers):
        assert sorted(_.shuffle(numbers)) == sorted(numbers)


class TestArrays:
    """Tests for zip(), flatten(), intersection(), difference()."""

    def test_zip_pads_with_none(self):
        assert _.zip(['a', 'b', 'c', 'd'], [1, 2, 3]) == [['a', 1], ['b', 2], ['c', 3], ['d', None]]

    def test_zip_no_arrays(self):
        assert _.zip() == []

    def test_flatten(self):
        assert _.flatten([1, [2], [3, [[[4]]]]]) == [1, 2, 3, 4]

    def test_flatten_tuples_but_not_strings(self):
        assert _.flatten([('a', 'bc'), ['d']]) == ['a', 'bc', 'd']

    def test_intersection(self):
        assert _.intersection(['moe', 'curly', 'larry'], ['moe', 'groucho']) == ['moe']
        assert _.intersection([1, 2, 3], [2, 3, 4], [3, 2]) == [2, 3]

    def test_intersection_no_arrays(self):
        assert _.intersection() == []

    def test_difference(self):
        assert _.difference([1, 2, 3, 4], [2, 30, 40]) == [1, 3, 4]
        assert _.difference([1, 2, 3, 4], [2], [4]) == [1, 3]

    def test_difference_no_others(self):
        assert _.difference([1, 2]) == [1, 2]

    @given(st.lists(int_lists, min_size=1, max_size=4))
    def test_intersection_items_are_in_every_array(self, arrays):
        for item in _.intersection(*arrays):
            assert all(item in array for array in arrays)


class TestObjects:
    """Tests for extend() and defaults()."""

    def test_extend_overwrites_and_returns_target(self):
        target = {'key1': 'something'}
        result = _.extend(target, {'key2': 'new', 'key1': 'changed'}, {'bla': 'more'})
        assert result is target
        assert target == {'key1': 'changed', 'key2': 'new', 'bla': 'more'}

    def test_extend_later_sources_win(self):
        assert _.extend({}, {'a': 1}, {'a': 2}) == {'a': 2}

    def test_defaults_never_overwrites(self):
        target = {'a': 1}
        result = _.defaults(target, {'a': 10, 'b': 2}, {'b': 20, 'c': 3})
        assert result is target
        assert target == {'a': 1, 'b': 2, 'c': 3}

    def test_extend_rejects_non_mapping_source(self):
        with pytest.raises(_.CollectionTypeError):
            _.extend({}, 5)
