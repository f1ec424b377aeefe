"""graphtypes.

Map Neo4j property schema information onto GraphQL types.

Public API for schema generators that infer a GraphQL schema from an existing
Neo4j database.
"""

from graphtypes.core.exceptions import GraphTypesException, InvalidArgumentError, PropertyRecordError
from graphtypes.models.property_info import PropertySchemaInput, PropertyTypeInfo
from graphtypes.types.labels import label_to_graphql_type, labels_to_graphql_type, sanitize_label
from graphtypes.types.primitives import Neo4jType, map_primitive_type
from graphtypes.types.resolver import choose_graphql_type, resolve_type, unify_types

__version__ = "0.1.0"

__all__ = [
    "GraphTypesException",
    "InvalidArgumentError",
    "Neo4jType",
    "PropertyRecordError",
    "PropertySchemaInput",
    "PropertyTypeInfo",
    "choose_graphql_type",
    "label_to_graphql_type",
    "labels_to_graphql_type",
    "map_primitive_type",
    "resolve_type",
    "sanitize_label",
    "unify_types",
]
