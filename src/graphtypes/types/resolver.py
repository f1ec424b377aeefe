"""
Choose a single GraphQL type for a Neo4j property.

In the usual case a property was only ever stored with one primitive type and
simply gets that type. Inconsistently typed properties (a property that is a
Long on some nodes and an Integer on others, and so on) are reduced pairwise
over a small lattice:

- equal tags unify to themselves;
- ``String`` absorbs everything;
- ``{Long, Integer}`` widens to ``Long``;
- ``{Integer, Float}`` widens to ``Float``;
- every other pair is unsupported and becomes ``String``.

Resolution never fails; missing or unknown type information degrades to
``String``.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Iterable, List, Mapping, Optional, Union

from graphtypes.core.logger import get_logger
from graphtypes.models.property_info import PropertyTypeInfo
from graphtypes.types.primitives import (
    FALLBACK_GRAPHQL_TYPE,
    Neo4jType,
    TypeTag,
    map_primitive_type,
)

logger = get_logger(__name__)

MANDATORY_MODIFIER = "!"

_WIDENINGS = {
    frozenset((Neo4jType.LONG.value, Neo4jType.INTEGER.value)): Neo4jType.LONG.value,
    frozenset((Neo4jType.INTEGER.value, Neo4jType.FLOAT.value)): Neo4jType.FLOAT.value,
}


def _tag_value(tag: Optional[TypeTag]) -> Optional[str]:
    if isinstance(tag, Neo4jType):
        return tag.value
    return tag


def _is_present(tag: Optional[TypeTag]) -> bool:
    return tag is not None and tag != ""


def unify_types(a: Optional[TypeTag], b: Optional[TypeTag]) -> Optional[str]:
    """Unify two observed tags into the broader of the two.

    None acts as the identity, so this can seed a fold.
    """
    a, b = _tag_value(a), _tag_value(b)

    if a is None:
        return b
    if b is None:
        return a
    if a == b:
        return a
    if Neo4jType.STRING.value in (a, b):
        return Neo4jType.STRING.value

    return _WIDENINGS.get(frozenset((a, b)), Neo4jType.STRING.value)


def _with_modifier(type_name: str, mandatory: bool) -> str:
    return type_name + MANDATORY_MODIFIER if mandatory else type_name


def resolve_type(observed_tags: Optional[Iterable[Optional[TypeTag]]], mandatory: bool = False) -> str:
    """Resolve the observed storage types of one property to a GraphQL type name.

    Args:
        observed_tags: Every distinct Neo4j type seen for the property. May be
            None, empty, or contain None entries.
        mandatory: Whether the property is present on every node/relationship;
            appends ``!`` when True.

    Returns:
        A GraphQL type name such as ``"Int"``, ``"[Float]!"`` or ``"String"``.
    """
    tags: List[Optional[TypeTag]] = list(observed_tags) if observed_tags is not None else []

    if not tags:
        return _with_modifier(FALLBACK_GRAPHQL_TYPE, mandatory)
    if len(tags) == 1:
        return _with_modifier(map_primitive_type(tags[0]), mandatory)

    present = [tag for tag in tags if _is_present(tag)]
    winner = reduce(unify_types, present, None)

    if winner == Neo4jType.STRING.value and Neo4jType.STRING.value not in {_tag_value(t) for t in present}:
        logger.warning(f"Inconsistent property types {present!r} cannot be widened; using String")
    else:
        logger.debug(f"Unified property types {present!r} -> {winner!r}")

    return _with_modifier(map_primitive_type(winner), mandatory)


def _field(property: Any, camel: str, snake: str) -> Any:
    if camel in property:
        return property[camel]
    return property.get(snake)


def choose_graphql_type(property: Union[PropertyTypeInfo, Mapping[str, Any], None]) -> str:
    """Choose a single GraphQL type name for a property schema record.

    ``property`` is a :class:`PropertyTypeInfo` or any mapping carrying
    ``propertyTypes`` and ``mandatory`` (snake_case keys are also accepted).
    An absent ``mandatory`` is treated as False.
    """
    if property is None:
        return resolve_type(None, False)

    if isinstance(property, PropertyTypeInfo):
        return resolve_type(property.property_types, property.mandatory)

    observed = _field(property, "propertyTypes", "property_types")
    mandatory = bool(_field(property, "mandatory", "mandatory"))
    return resolve_type(observed, mandatory)
