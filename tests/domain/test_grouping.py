"""Tests for the grouping core: partition, format_digits, ungroup."""

import pytest

from digitgroup.config.models import GroupingConfig
from digitgroup.domain.errors import InvalidConfig, InvalidInput
from digitgroup.domain.grouping import format_digits, group_numeral, partition, ungroup
from digitgroup.domain.numerals import parse_numeral

COMMAS = GroupingConfig()


class TestPartition:
    def test_from_right_remainder_on_left(self) -> None:
        assert partition("12345678", 3, from_right=True) == ["12", "345", "678"]

    def test_from_left_remainder_on_right(self) -> None:
        assert partition("1234567", 3) == ["123", "456", "7"]

    def test_exact_multiple_has_no_empty_group(self) -> None:
        assert partition("123456", 3, from_right=True) == ["123", "456"]
        assert partition("123456", 3) == ["123", "456"]

    def test_shorter_than_group(self) -> None:
        assert partition("7", 3, from_right=True) == ["7"]

    def test_empty(self) -> None:
        assert partition("", 3) == []

    def test_first_size(self) -> None:
        """Indian grouping: three digits next to the mark, then pairs."""
        assert partition("1234567", 2, first_size=3, from_right=True) == ["12", "34", "567"]

    def test_compact_merges_remainder(self) -> None:
        assert partition("1234567", 3, from_right=True, compact=True) == ["1234", "567"]
        assert partition("1234567", 3, compact=True) == ["123", "4567"]

    def test_compact_keeps_single_group(self) -> None:
        assert partition("12", 3, compact=True) == ["12"]

    def test_compact_keeps_full_groups(self) -> None:
        assert partition("123456", 3, compact=True) == ["123", "456"]

    @pytest.mark.parametrize("size,first_size", [(0, None), (-1, None), (3, 0)])
    def test_rejects_non_positive_sizes(self, size: int, first_size: int | None) -> None:
        with pytest.raises(InvalidConfig):
            partition("123", size, first_size=first_size)


class TestFormatDigits:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("12345678", "12,345,678"),
            ("1234.5", "1,234.5"),
            ("-98765", "-98,765"),
            ("100", "100"),
            ("7", "7"),
            ("0", "0"),
            ("+1234567", "+1,234,567"),
            ("1234567.1234567", "1,234,567.123,456,7"),
        ],
    )
    def test_comma_grouping(self, raw: str, expected: str) -> None:
        assert format_digits(raw, COMMAS) == expected

    def test_space_grouping_short_fraction(self) -> None:
        config = GroupingConfig(delimiter=" ")
        assert format_digits("0.125", config) == "0.125"

    def test_replaces_separator_with_decimal_mark(self) -> None:
        config = GroupingConfig(decimal_mark=",", delimiter=".")
        assert format_digits("1234567|89", config) == "1.234.567,89"

    def test_no_fraction_emits_no_mark(self) -> None:
        assert format_digits("1234", COMMAS) == "1,234"
        assert format_digits("1234.", COMMAS) == "1,234"

    def test_ungrouped_fraction(self) -> None:
        config = GroupingConfig(group_fraction=False)
        assert format_digits("-123456789.123456", config) == "-123,456,789.123456"

    def test_custom_sizes(self) -> None:
        config = GroupingConfig(
            decimal_mark="#", delimiter=":", int_group_size=4, frac_group_size=2
        )
        assert format_digits("123456789.01234", config) == "1:2345:6789#01:23:4"

    def test_first_group_size(self) -> None:
        config = GroupingConfig(
            decimal_mark=",", delimiter=":", int_first_group_size=2, group_fraction=False
        )
        assert format_digits("-123456789.123456", config) == "-1:234:567:89,123456"

    def test_compact_remainder_both_sides(self) -> None:
        config = GroupingConfig(compact_remainder=True, delimiter=" ")
        assert format_digits("1234567.1234567", config) == "1234 567.123 4567"

    def test_sign_never_counted_or_split(self) -> None:
        assert format_digits("-123", COMMAS) == "-123"
        assert format_digits("-123456", COMMAS) == "-123,456"

    def test_grouped_input_is_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            format_digits("12,345,678", COMMAS)

    def test_own_output_is_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="already grouped"):
            format_digits(format_digits("1234", COMMAS), COMMAS)

    def test_separator_equal_to_delimiter_is_rejected(self) -> None:
        europe = GroupingConfig(decimal_mark=",", delimiter=".")
        with pytest.raises(InvalidInput, match="already grouped"):
            format_digits("1234.5", europe)
        assert format_digits("1234,5", europe) == "1.234,5"

    def test_group_numeral_takes_parsed_text(self) -> None:
        europe = GroupingConfig(decimal_mark=",", delimiter=".")
        assert group_numeral(parse_numeral("1234567.5"), europe) == "1.234.567,5"

    def test_invalid_input(self) -> None:
        with pytest.raises(InvalidInput):
            format_digits("", COMMAS)

    def test_does_not_mutate_or_depend_on_prior_calls(self) -> None:
        first = format_digits("123456", COMMAS)
        format_digits("9.87654", GroupingConfig(delimiter="_"))
        assert format_digits("123456", COMMAS) == first

    def test_group_size_bound(self) -> None:
        config = GroupingConfig(delimiter=" ", int_group_size=4, frac_group_size=2)
        integer, fraction = format_digits("123456789012.3456789", config).split(".")
        int_groups = integer.split(" ")
        frac_groups = fraction.split(" ")
        assert all(len(g) == 4 for g in int_groups[1:])
        assert 0 < len(int_groups[0]) <= 4
        assert all(len(g) == 2 for g in frac_groups[:-1])
        assert 0 < len(frac_groups[-1]) <= 2


class TestUngroup:
    @pytest.mark.parametrize(
        "raw",
        ["0", "-1", "12345678", "+1234.5", "-123456789.1234567", "0.000001"],
    )
    @pytest.mark.parametrize(
        "config",
        [
            GroupingConfig(),
            GroupingConfig(decimal_mark=",", delimiter=" ", compact_remainder=True),
            GroupingConfig(int_group_size=2, int_first_group_size=3, frac_group_size=1),
            GroupingConfig(delimiter="'", group_fraction=False),
        ],
    )
    def test_round_trip(self, raw: str, config: GroupingConfig) -> None:
        assert ungroup(format_digits(raw, config), config) == raw

    def test_restores_custom_separator(self) -> None:
        config = GroupingConfig(decimal_mark=",", delimiter=".")
        assert ungroup("1.234,5", config, separator="/") == "1234/5"

    def test_regroup_pathway(self) -> None:
        europe = GroupingConfig(decimal_mark=",", delimiter=".")
        si = GroupingConfig(delimiter=" ")
        assert format_digits(ungroup("1.234.567,891", europe), si) == "1 234 567.891"

    def test_foreign_grouping_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            ungroup("1 234.5", COMMAS)

    def test_bad_separator(self) -> None:
        with pytest.raises(InvalidConfig):
            ungroup("1,234", COMMAS, separator="9")

    def test_non_string(self) -> None:
        with pytest.raises(InvalidInput):
            ungroup(1234, COMMAS)  # type: ignore[arg-type]
