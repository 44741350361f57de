"""
Общие контрактные тесты сравнения, равенства и хэширования

Каждый конкретный primitive подключает эти наборы наследованием и
переопределяет фикстуры:

    sample                     — экземпляр x
    same_value_copy            — отдельный экземпляр того же типа с равным значением
    greater                    — экземпляр того же типа со значением больше x
    different_type_same_value  — экземпляр другого типа с тем же wrapped value (или None)
    raw_of_sample              — сырое значение sample (по умолчанию sample.value)

Классы не начинаются с "Test", поэтому pytest собирает их только через подклассы.
"""

import copy

import pytest

from proto_primitives.core import relational


class _Fixtures:
    @pytest.fixture
    def sample(self):
        raise NotImplementedError

    @pytest.fixture
    def same_value_copy(self):
        raise NotImplementedError

    @pytest.fixture
    def greater(self):
        raise NotImplementedError

    @pytest.fixture
    def different_type_same_value(self):
        return None

    @pytest.fixture
    def raw_of_sample(self, sample):
        return sample.value


# =============================================================================
# COMPARISON
# =============================================================================


class ComparisonContract(_Fixtures):
    """Таблица порядка с None как минимумом."""

    def test_compare_to_none_is_positive(self, sample) -> None:
        assert sample.compare_to(None) > 0

    def test_compare_to_self_is_zero(self, sample) -> None:
        assert sample.compare_to(sample) == 0

    def test_compare_to_copy_is_zero(self, sample, same_value_copy) -> None:
        assert same_value_copy is not sample
        assert sample.compare_to(same_value_copy) == 0

    def test_compare_to_greater_is_negative(self, sample, greater) -> None:
        assert sample.compare_to(greater) < 0
        assert greater.compare_to(sample) > 0

    def test_none_equals_none(self) -> None:
        assert relational.equals_operator(None, None)
        assert not relational.not_equals_operator(None, None)

    def test_sample_not_equal_to_none(self, sample) -> None:
        assert (sample == None) is False  # noqa: E711
        assert (None == sample) is False  # noqa: E711
        assert (sample != None) is True  # noqa: E711

    def test_none_less_than_sample(self, sample) -> None:
        assert (None < sample) is True
        assert relational.less_than(None, sample) is True

    def test_sample_not_less_than_none(self, sample) -> None:
        assert (sample < None) is False

    def test_none_less_or_equal_sample(self, sample) -> None:
        assert (None <= sample) is True

    def test_sample_not_less_or_equal_none(self, sample) -> None:
        assert (sample <= None) is False

    def test_sample_greater_than_none(self, sample) -> None:
        assert (sample > None) is True

    def test_none_not_greater_than_sample(self, sample) -> None:
        assert (None > sample) is False

    def test_sample_greater_or_equal_none(self, sample) -> None:
        assert (sample >= None) is True

    def test_none_not_greater_or_equal_sample(self, sample) -> None:
        assert (None >= sample) is False

    def test_none_vs_none_ordering(self) -> None:
        assert relational.less_than(None, None) is False
        assert relational.less_or_equal(None, None) is True
        assert relational.greater_than(None, None) is False
        assert relational.greater_or_equal(None, None) is True

    def test_operators_between_values(self, sample, same_value_copy, greater) -> None:
        assert sample < greater
        assert sample <= greater
        assert greater > sample
        assert greater >= sample
        assert sample <= same_value_copy
        assert sample >= same_value_copy
        assert not sample < same_value_copy
        assert not sample > same_value_copy

    def test_sorting_puts_values_in_order(self, sample, greater) -> None:
        assert sorted([greater, sample]) == [sample, greater]


# =============================================================================
# EQUALITY
# =============================================================================


class EqualityContract(_Fixtures):
    """Рефлексивность, симметрия, строгая проверка типа."""

    def test_equals_self(self, sample) -> None:
        assert sample.equals(sample)
        assert sample == sample

    def test_equals_copy(self, sample, same_value_copy) -> None:
        assert sample.equals(same_value_copy)
        assert same_value_copy.equals(sample)
        assert sample == same_value_copy
        assert not sample != same_value_copy

    def test_not_equals_greater(self, sample, greater) -> None:
        assert not sample.equals(greater)
        assert sample != greater

    def test_not_equals_none(self, sample) -> None:
        assert sample.equals(None) is False

    def test_not_equals_plain_object(self, sample) -> None:
        assert sample.equals(object()) is False
        assert sample != object()

    def test_not_equals_raw_value(self, sample, raw_of_sample) -> None:
        assert sample.equals(raw_of_sample) is False
        assert sample != raw_of_sample

    def test_not_equals_other_type_with_same_value(
        self, sample, different_type_same_value, raw_of_sample
    ) -> None:
        if different_type_same_value is None:
            pytest.skip("no other primitive wraps the same value")
        assert different_type_same_value.value == raw_of_sample
        assert sample.equals(different_type_same_value) is False
        assert sample != different_type_same_value


# =============================================================================
# HASH
# =============================================================================


class HashContract(_Fixtures):
    """Равные экземпляры — равные хэши."""

    def test_hash_of_copy_is_equal(self, sample, same_value_copy) -> None:
        assert hash(sample) == hash(same_value_copy)

    def test_hash_differs_for_different_value(self, sample, greater) -> None:
        assert hash(sample) != hash(greater)

    def test_usable_as_set_member(self, sample, same_value_copy, greater) -> None:
        assert len({sample, same_value_copy, greater}) == 2

    def test_hash_shared_with_other_type_of_same_value(
        self, sample, different_type_same_value
    ) -> None:
        if different_type_same_value is None:
            pytest.skip("no other primitive wraps the same value")
        assert hash(sample) == hash(different_type_same_value)


# =============================================================================
# COPY
# =============================================================================


class CopyContract(_Fixtures):
    """copy/deepcopy не пересоздают и не перепроверяют значение."""

    def test_shallow_copy_equals_original(self, sample) -> None:
        copied = copy.copy(sample)
        assert copied == sample
        assert hash(copied) == hash(sample)

    def test_deep_copy_equals_original(self, sample) -> None:
        copied = copy.deepcopy(sample)
        assert copied == sample
        assert hash(copied) == hash(sample)

    def test_deep_copy_of_container(self, sample, greater) -> None:
        holder = {"values": [sample, greater]}
        copied = copy.deepcopy(holder)
        assert copied == holder
        assert copied["values"] is not holder["values"]


class ValueObjectContract(ComparisonContract, EqualityContract, HashContract, CopyContract):
    """Полный набор контрактов."""
