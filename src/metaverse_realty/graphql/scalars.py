"""
Custom GraphQL scalars

``Date`` travels over the wire as an integer number of milliseconds since the
Unix epoch and is a timezone-aware ``datetime`` inside the server.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, NewType

import strawberry
from graphql import IntValueNode, ValueNode

from .errors import InvalidScalarError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _from_epoch_millis(millis: int) -> datetime:
    return EPOCH + timedelta(milliseconds=millis)


def serialize_date(value: Any) -> int:
    """Convert an outgoing datetime to epoch milliseconds.

    Naive datetimes are taken to be in UTC.
    """
    if not isinstance(value, datetime):
        raise TypeError(f"Date cannot represent a non-datetime value: {value!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // ONE_MILLISECOND


def parse_date_value(value: Any) -> datetime:
    """Convert an incoming variable value (epoch milliseconds) to a datetime.

    Accepts integers and integer-like values such as ``1700000000000.0`` or
    ``"1700000000000"``.

    Raises:
        InvalidScalarError: If the value is not integer-like
    """
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        raise InvalidScalarError(f"Date cannot represent a boolean value: {value!r}")

    if isinstance(value, int):
        millis = value
    elif isinstance(value, float) and value.is_integer():
        millis = int(value)
    elif isinstance(value, str) and INTEGER_PATTERN.fullmatch(value.strip()):
        millis = int(value.strip())
    else:
        raise InvalidScalarError(
            f"Date must be an integer number of epoch milliseconds, got: {value!r}"
        )

    try:
        return _from_epoch_millis(millis)
    except OverflowError as e:
        raise InvalidScalarError(f"Date is out of range: {value!r}") from e


def parse_date_literal(
    value_node: ValueNode, variables: dict[str, Any] | None = None
) -> datetime | None:
    """Convert a hard-coded literal from the query text to a datetime.

    Only integer literals are dates; any other literal kind resolves to null.
    """
    _ = variables
    if isinstance(value_node, IntValueNode):
        try:
            return _from_epoch_millis(int(value_node.value, 10))
        except OverflowError:
            return None
    return None


Date = strawberry.scalar(
    NewType("Date", datetime),
    name="Date",
    description="A custom scalar value for representing Dates",
    serialize=serialize_date,
    parse_value=parse_date_value,
    parse_literal=parse_date_literal,
)
