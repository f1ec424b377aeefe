"""
Command-line interface and entry points for graphtypes.

Reads Neo4j property schema records (the output of
``CALL db.schema.nodeTypeProperties()`` / ``db.schema.relTypeProperties()``
exported as JSON or YAML) and prints the GraphQL type chosen for each one.
"""

import argparse
import json
import sys
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from graphtypes.core.exceptions import PropertyRecordError
from graphtypes.core.logger import configure_root_logger, get_logger, push_run_id, reset_run_id
from graphtypes.models.property_info import PropertySchemaInput, PropertyTypeInfo
from graphtypes.types.labels import label_to_graphql_type, labels_to_graphql_type
from graphtypes.types.resolver import choose_graphql_type

logger = get_logger(__name__)


def _strip_cypher_type(value: str) -> str:
    # ":`Person`:`Actor`" -> "Person:Actor"
    return value.replace("`", "").lstrip(":")


def owner_type_name(record: PropertyTypeInfo) -> Optional[str]:
    """GraphQL name of the node or relationship type that owns the property."""
    if record.node_labels:
        return labels_to_graphql_type(record.node_labels)
    if record.rel_type:
        return label_to_graphql_type(_strip_cypher_type(record.rel_type))
    if record.node_type:
        return label_to_graphql_type(_strip_cypher_type(record.node_type))
    return None


def load_payload(path: str) -> Any:
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Property schema file not found: {path}")

    with open(config_file, "r") as f:
        if config_file.suffix == ".json":
            return json.load(f)
        if config_file.suffix in (".yaml", ".yml"):
            try:
                import yaml
            except ImportError:
                raise ImportError(
                    "PyYAML required for YAML input. "
                    "Install with: pip install graphtypes[yaml]"
                )
            return yaml.safe_load(f)

    raise ValueError(
        f"Unsupported input format: {config_file.suffix}. "
        "Use .json or .yaml"
    )


def resolve_records(payload: Any) -> Dict[str, Any]:
    """
    Resolve the GraphQL type of every property record in ``payload``.

    Args:
        payload: A list of property records, or an object with a
            ``properties`` list.

    Returns:
        ``{"status": "success", "count": n, "properties": [...]}`` where each
        entry has ``typeName``, ``propertyName`` and ``graphqlType``.

    Raises:
        PropertyRecordError: If the payload is not shaped like property records.
    """
    try:
        schema_input = PropertySchemaInput.from_payload(payload)
    except ValidationError as exc:
        raise PropertyRecordError(
            reason="Invalid property records",
            details={"errors": exc.error_count()},
        ) from exc

    resolved: List[Dict[str, Optional[str]]] = []
    for record in schema_input.properties:
        resolved.append(
            {
                "typeName": owner_type_name(record),
                "propertyName": record.property_name,
                "graphqlType": choose_graphql_type(record),
            }
        )

    logger.info(f"Resolved {len(resolved)} property types")
    return {"status": "success", "count": len(resolved), "properties": resolved}


def resolve_file(path: str, *, run_id: Optional[str] = None) -> Dict[str, Any]:
    """Load property records from a JSON/YAML file and resolve them."""
    token = push_run_id(run_id or str(uuid.uuid4()))
    try:
        payload = load_payload(path)
        logger.info(f"Loaded property records from {path}")
        return resolve_records(payload)
    except Exception as e:
        logger.error(f"Type resolution failed: {str(e)}")
        raise
    finally:
        reset_run_id(token)


def cli(argv: Optional[Sequence[str]] = None) -> None:
    """
    Command-line interface for graphtypes.

    Usage:
        graphtypes resolve /path/to/properties.json
        graphtypes label "Person Node:Label"
    """
    parser = argparse.ArgumentParser(
        prog="graphtypes",
        description="Resolve GraphQL types from Neo4j property schema information"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve GraphQL types for a file of property records"
    )
    resolve_parser.add_argument(
        "path",
        help="Path to property records (JSON or YAML)"
    )
    resolve_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    label_parser = subparsers.add_parser(
        "label",
        help="Convert Neo4j labels to GraphQL type names"
    )
    label_parser.add_argument(
        "labels",
        nargs="+",
        help="One or more labels"
    )

    args = parser.parse_args(argv)

    if args.command == "resolve":
        configure_root_logger("DEBUG" if args.verbose else "WARNING")
        try:
            result = resolve_file(args.path)
        except Exception as e:
            logger.error(f"Resolve failed: {e}")
            sys.exit(1)
        print(json.dumps(result, indent=2))
        sys.exit(0)

    elif args.command == "label":
        for label in args.labels:
            print(label_to_graphql_type(label))
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    cli()
