from __future__ import annotations

import re
from typing import Optional, Sequence

from graphtypes.core.exceptions import InvalidArgumentError


_LABEL_SEPARATORS = re.compile(r"[ :]")


def label_to_graphql_type(label: Optional[str]) -> str:
    """Turn a Neo4j label into a GraphQL type name.

    Spaces and colons become underscores; nothing else is touched.
    """
    if label is None:
        raise InvalidArgumentError("Cannot convert nil label to GraphQL type")
    return _LABEL_SEPARATORS.sub("_", label)


def labels_to_graphql_type(labels: Optional[Sequence[str]]) -> str:
    """Name a node type that carries several labels, e.g. ``Person_Actor``."""
    if not labels:
        raise InvalidArgumentError("Cannot convert empty label set to GraphQL type")
    if any(label is None for label in labels):
        raise InvalidArgumentError(f"Label set contains a nil label: {list(labels)!r}")
    return label_to_graphql_type("_".join(labels))


sanitize_label = label_to_graphql_type
