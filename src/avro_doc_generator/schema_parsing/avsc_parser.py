"""Avro schema (.avsc) parsing service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from avro_doc_generator.schema_model import Field, TypeKind, TypeNode

_PRIMITIVE_NAMES = {kind.value: kind for kind in TypeKind if kind.is_primitive}
_RECORD_TYPE_NAMES = ("record", "error")


class SchemaParseError(Exception):
    """Raised for malformed Avro schema content."""


def load_schema_file(schema_path: Path | str) -> TypeNode:
    """Read and parse the Avro schema stored at *schema_path*."""
    path = Path(schema_path)
    with path.open("r", encoding="utf-8") as handle:
        text = handle.read()
    return parse_schema_text(text)


def parse_schema_text(text: str) -> TypeNode:
    """Parse Avro schema JSON text into a type tree."""
    try:
        raw = json.loads(text)
        return _parse_node(raw, namespace=None, names={})
    except json.JSONDecodeError as exc:
        raise SchemaParseError(f"Invalid Avro schema: {exc}") from exc
    except RecursionError as exc:
        raise SchemaParseError("Avro schema nesting is too deep.") from exc


def _parse_node(raw: Any, *, namespace: str | None, names: dict[str, TypeNode]) -> TypeNode:
    if isinstance(raw, str):
        return _resolve_type_name(raw, namespace=namespace, names=names)
    if isinstance(raw, list):
        return _parse_union(raw, namespace=namespace, names=names)
    if isinstance(raw, Mapping):
        return _parse_complex(raw, namespace=namespace, names=names)
    raise SchemaParseError(f"Unsupported Avro schema segment: {raw!r}")


def _resolve_type_name(
    type_name: str, *, namespace: str | None, names: Mapping[str, TypeNode]
) -> TypeNode:
    primitive = _PRIMITIVE_NAMES.get(type_name)
    if primitive is not None:
        return TypeNode(kind=primitive)
    candidates = [type_name]
    if "." not in type_name and namespace:
        candidates.insert(0, f"{namespace}.{type_name}")
    for candidate in candidates:
        if candidate in names:
            return names[candidate]
    raise SchemaParseError(f"Unknown Avro type: {type_name}")


def _parse_union(
    members: Sequence[Any], *, namespace: str | None, names: dict[str, TypeNode]
) -> TypeNode:
    types: list[TypeNode] = []
    for member in members:
        if isinstance(member, list):
            raise SchemaParseError("Avro unions may not immediately contain other unions.")
        types.append(_parse_node(member, namespace=namespace, names=names))
    return TypeNode(kind=TypeKind.UNION, types=tuple(types))


def _parse_complex(
    definition: Mapping[str, Any], *, namespace: str | None, names: dict[str, TypeNode]
) -> TypeNode:
    type_value = definition.get("type")
    if type_value is None:
        raise SchemaParseError("Avro schema objects require a type.")
    if not isinstance(type_value, str):
        return _parse_node(type_value, namespace=namespace, names=names)

    logical_type = _optional_string(definition.get("logicalType"), "logicalType")
    if type_value in _RECORD_TYPE_NAMES:
        return _parse_record(definition, namespace=namespace, names=names)
    if type_value == TypeKind.ENUM.value:
        return _parse_enum(definition, namespace=namespace, names=names)
    if type_value == TypeKind.FIXED.value:
        return _parse_fixed(definition, namespace=namespace, names=names, logical_type=logical_type)
    if type_value == TypeKind.ARRAY.value:
        if "items" not in definition:
            raise SchemaParseError("Avro array requires items.")
        items = _parse_node(definition["items"], namespace=namespace, names=names)
        return TypeNode(kind=TypeKind.ARRAY, items=items)
    if type_value == TypeKind.MAP.value:
        if "values" not in definition:
            raise SchemaParseError("Avro map requires values.")
        values = _parse_node(definition["values"], namespace=namespace, names=names)
        return TypeNode(kind=TypeKind.MAP, values=values)
    if type_value in _PRIMITIVE_NAMES:
        return TypeNode(kind=_PRIMITIVE_NAMES[type_value], logical_type=logical_type)
    return _resolve_type_name(type_value, namespace=namespace, names=names)


def _parse_record(
    definition: Mapping[str, Any], *, namespace: str | None, names: dict[str, TypeNode]
) -> TypeNode:
    name, record_namespace = _split_name(definition, namespace)
    raw_fields = definition.get("fields")
    if not isinstance(raw_fields, list):
        raise SchemaParseError(f"Avro record {name} requires fields.")

    record = TypeNode(
        kind=TypeKind.RECORD,
        name=name,
        namespace=record_namespace,
        doc=_optional_string(definition.get("doc"), "doc"),
    )
    # Registered before the fields are parsed so self-references resolve.
    _register(record, names)
    seen_field_names: set[str] = set()
    for raw_field in raw_fields:
        parsed_field = _parse_field(raw_field, namespace=record_namespace, names=names)
        if parsed_field.name in seen_field_names:
            raise SchemaParseError(f"Duplicate field {parsed_field.name} in {record.full_name}.")
        seen_field_names.add(parsed_field.name)
        record.fields.append(parsed_field)
    return record


def _parse_field(raw: Any, *, namespace: str | None, names: dict[str, TypeNode]) -> Field:
    if not isinstance(raw, Mapping) or not isinstance(raw.get("name"), str):
        raise SchemaParseError("Avro field definitions must include a name.")
    if "type" not in raw:
        raise SchemaParseError(f"Avro field {raw['name']} requires a type.")
    return Field(
        name=raw["name"],
        schema=_parse_node(raw["type"], namespace=namespace, names=names),
        doc=_optional_string(raw.get("doc"), "doc"),
        default=raw.get("default"),
    )


def _parse_enum(
    definition: Mapping[str, Any], *, namespace: str | None, names: dict[str, TypeNode]
) -> TypeNode:
    name, enum_namespace = _split_name(definition, namespace)
    symbols = definition.get("symbols")
    if not isinstance(symbols, list) or not all(isinstance(symbol, str) for symbol in symbols):
        raise SchemaParseError(f"Avro enum {name} requires a list of string symbols.")
    node = TypeNode(
        kind=TypeKind.ENUM,
        name=name,
        namespace=enum_namespace,
        doc=_optional_string(definition.get("doc"), "doc"),
        symbols=tuple(symbols),
    )
    _register(node, names)
    return node


def _parse_fixed(
    definition: Mapping[str, Any],
    *,
    namespace: str | None,
    names: dict[str, TypeNode],
    logical_type: str | None,
) -> TypeNode:
    name, fixed_namespace = _split_name(definition, namespace)
    size = definition.get("size")
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise SchemaParseError(f"Avro fixed {name} requires a non-negative integer size.")
    node = TypeNode(
        kind=TypeKind.FIXED,
        name=name,
        namespace=fixed_namespace,
        doc=_optional_string(definition.get("doc"), "doc"),
        size=size,
        logical_type=logical_type,
    )
    _register(node, names)
    return node


def _split_name(definition: Mapping[str, Any], namespace: str | None) -> tuple[str, str | None]:
    name = definition.get("name")
    if not isinstance(name, str) or not name.strip():
        raise SchemaParseError(f"Avro {definition.get('type')} requires a name.")
    if "." in name:
        qualifier, _, short_name = name.rpartition(".")
        return short_name, qualifier or None
    if "namespace" in definition:
        explicit = _optional_string(definition.get("namespace"), "namespace")
        return name, explicit or None
    return name, namespace


def _register(node: TypeNode, names: dict[str, TypeNode]) -> None:
    if node.full_name in names:
        raise SchemaParseError(f"Avro type {node.full_name} is defined more than once.")
    names[node.full_name] = node


def _optional_string(value: Any, attribute: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SchemaParseError(f"Avro attribute {attribute} must be a string.")
    return value
