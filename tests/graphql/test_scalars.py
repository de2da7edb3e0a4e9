"""Unit tests for the Date scalar codec."""

from datetime import date, datetime, timedelta, timezone

import pytest
from graphql import (
    BooleanValueNode,
    FloatValueNode,
    GraphQLError,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
)
from graphql.utilities import coerce_input_value

from metaverse_realty.graphql.errors import InvalidScalarError, should_mask_error
from metaverse_realty.graphql.schema import create_schema
from metaverse_realty.graphql.scalars import (
    parse_date_literal,
    parse_date_value,
    serialize_date,
)

NOV_14_2023 = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


class TestSerializeDate:
    def test_aware_datetime(self):
        assert serialize_date(NOV_14_2023) == 1_700_000_000_000

    def test_naive_datetime_is_utc(self):
        assert serialize_date(datetime(2023, 11, 14, 22, 13, 20)) == 1_700_000_000_000

    def test_other_timezone(self):
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2023, 11, 15, 0, 13, 20, tzinfo=plus_two)

        assert serialize_date(value) == 1_700_000_000_000

    def test_milliseconds_are_kept(self):
        value = NOV_14_2023 + timedelta(milliseconds=123, microseconds=456)

        assert serialize_date(value) == 1_700_000_000_123

    def test_before_epoch(self):
        value = datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)

        assert serialize_date(value) == -1000

    def test_returns_int(self):
        assert type(serialize_date(NOV_14_2023)) is int

    @pytest.mark.parametrize(
        "value",
        ["2023-11-14", 1_700_000_000_000, 1.5, None, date(2023, 11, 14), {"ms": 1}],
    )
    def test_non_datetime_raises_type_error(self, value):
        with pytest.raises(TypeError):
            serialize_date(value)


class TestParseDateValue:
    def test_integer(self):
        assert parse_date_value(1_700_000_000_000) == NOV_14_2023

    def test_result_is_utc_aware(self):
        assert parse_date_value(0).tzinfo is timezone.utc

    @pytest.mark.parametrize("value", [1_700_000_000_000.0, "1700000000000", " 1700000000000 "])
    def test_integer_like(self, value):
        assert parse_date_value(value) == NOV_14_2023

    def test_negative_string(self):
        assert parse_date_value("-1000") == datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value", ["yesterday", "", "17e11", 1.5, True, False, None, [1], {"ms": 1}]
    )
    def test_non_numeric_raises_invalid_scalar(self, value):
        with pytest.raises(InvalidScalarError):
            parse_date_value(value)

    def test_out_of_range_raises_invalid_scalar(self):
        with pytest.raises(InvalidScalarError, match="out of range"):
            parse_date_value(10**20)

    @pytest.mark.parametrize(
        "value",
        [
            NOV_14_2023,
            datetime(1970, 1, 1, tzinfo=timezone.utc),
            datetime(2031, 2, 3, 4, 5, 6, 789000, tzinfo=timezone.utc),
            datetime(1955, 6, 7, 8, 9, 10, tzinfo=timezone.utc),
        ],
    )
    def test_round_trip(self, value):
        assert parse_date_value(serialize_date(value)) == value

    def test_round_trip_truncates_to_milliseconds(self):
        value = NOV_14_2023 + timedelta(microseconds=1_999)

        assert parse_date_value(serialize_date(value)) == NOV_14_2023 + timedelta(milliseconds=1)


class TestParseDateLiteral:
    def test_integer_literal(self):
        assert parse_date_literal(IntValueNode(value="1700000000000")) == NOV_14_2023

    @pytest.mark.parametrize(
        "node",
        [
            StringValueNode(value="1700000000000"),
            FloatValueNode(value="1700000000000.0"),
            BooleanValueNode(value=True),
            ObjectValueNode(fields=()),
            ListValueNode(values=()),
            NullValueNode(),
        ],
    )
    def test_other_literals_are_null(self, node):
        assert parse_date_literal(node) is None

    def test_variables_are_ignored(self):
        node = IntValueNode(value="0")

        assert parse_date_literal(node, {"when": 5}) == datetime(1970, 1, 1, tzinfo=timezone.utc)


class TestDateScalarInSchema:
    @pytest.fixture
    def date_type(self):
        return create_schema()._schema.get_type("Date")

    def test_wired_into_schema(self, date_type):
        assert date_type.serialize(NOV_14_2023) == 1_700_000_000_000
        assert date_type.parse_literal(IntValueNode(value="1700000000000")) == NOV_14_2023
        assert date_type.parse_literal(StringValueNode(value="soon")) is None

    def test_bad_variable_is_a_coercion_error(self, date_type):
        errors: list[GraphQLError] = []

        coerce_input_value(
            "not-a-date", date_type, on_error=lambda path, value, error: errors.append(error)
        )

        [error] = errors
        assert "Expected type 'Date'" in error.message
        assert isinstance(error.original_error, InvalidScalarError)
        assert should_mask_error(error) is False
