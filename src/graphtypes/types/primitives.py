"""Neo4j storage primitives and their GraphQL type names.

The set of tags is closed: anything Neo4j reports that is not listed here is
mapped to ``String``.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Optional, Union


class Neo4jType(str, Enum):
    # Scalars
    LONG = "Long"
    INTEGER = "Integer"
    FLOAT = "Float"
    DOUBLE = "Double"
    STRING = "String"
    BOOLEAN = "Boolean"
    DATE = "Date"
    DATE_TIME = "DateTime"
    LOCAL_TIME = "LocalTime"
    LOCAL_DATE_TIME = "LocalDateTime"
    TIME = "Time"

    # Arrays
    LONG_ARRAY = "LongArray"
    INTEGER_ARRAY = "IntegerArray"
    FLOAT_ARRAY = "FloatArray"
    DOUBLE_ARRAY = "DoubleArray"
    STRING_ARRAY = "StringArray"
    BOOLEAN_ARRAY = "BooleanArray"
    DATE_ARRAY = "DateArray"
    DATE_TIME_ARRAY = "DateTimeArray"
    LOCAL_TIME_ARRAY = "LocalTimeArray"
    LOCAL_DATE_TIME_ARRAY = "LocalDateTimeArray"
    TIME_ARRAY = "TimeArray"


TypeTag = Union[str, Neo4jType]

FALLBACK_GRAPHQL_TYPE = "String"

GRAPHQL_TYPE_NAMES: Mapping[Neo4jType, str] = {
    Neo4jType.LONG: "Int",
    Neo4jType.INTEGER: "Int",
    Neo4jType.FLOAT: "Float",
    Neo4jType.DOUBLE: "Float",
    Neo4jType.STRING: "String",
    Neo4jType.BOOLEAN: "Boolean",
    Neo4jType.DATE: "Date",
    Neo4jType.DATE_TIME: "DateTime",
    Neo4jType.LOCAL_TIME: "LocalTime",
    Neo4jType.LOCAL_DATE_TIME: "LocalDateTime",
    Neo4jType.TIME: "Time",
    Neo4jType.LONG_ARRAY: "[Int]",
    Neo4jType.INTEGER_ARRAY: "[Int]",
    Neo4jType.FLOAT_ARRAY: "[Float]",
    Neo4jType.DOUBLE_ARRAY: "[Float]",
    Neo4jType.STRING_ARRAY: "[String]",
    Neo4jType.BOOLEAN_ARRAY: "[Boolean]",
    Neo4jType.DATE_ARRAY: "[Date]",
    Neo4jType.DATE_TIME_ARRAY: "[DateTime]",
    Neo4jType.LOCAL_TIME_ARRAY: "[LocalTime]",
    Neo4jType.LOCAL_DATE_TIME_ARRAY: "[LocalDateTime]",
    Neo4jType.TIME_ARRAY: "[Time]",
}

_BY_VALUE: Dict[str, Neo4jType] = {member.value: member for member in Neo4jType}


def parse_tag(tag: Optional[TypeTag]) -> Optional[Neo4jType]:
    """Return the enum member for ``tag``, or None if it is not a known primitive."""
    if isinstance(tag, Neo4jType):
        return tag
    if not isinstance(tag, str):
        return None
    return _BY_VALUE.get(tag)


def is_array_tag(tag: Optional[TypeTag]) -> bool:
    parsed = parse_tag(tag)
    return parsed is not None and parsed.value.endswith("Array")


def map_primitive_type(tag: Optional[TypeTag]) -> str:
    """Map a single Neo4j primitive tag to its GraphQL type name.

    Unrecognized tags (including None) map to ``String``.
    """
    parsed = parse_tag(tag)
    if parsed is None:
        return FALLBACK_GRAPHQL_TYPE
    return GRAPHQL_TYPE_NAMES[parsed]
