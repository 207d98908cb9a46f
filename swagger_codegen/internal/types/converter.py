"""
Конвертер схем Swagger в выражения типов целевого языка
"""

import json
import re
from typing import FrozenSet, List, Optional, Tuple

from ...exceptions import SchemaReferenceError, TypeConversionError
from ..utils.naming import to_safe_type_name
from .models import (
    ArraySchema,
    EnumSchema,
    MalformedSchema,
    ObjectSchema,
    PrimitiveSchema,
    ReferenceSchema,
    SchemaKind,
    SchemaNode,
    SwaggerDocument,
)
from .view import PropertyRecord, TypeExpression

PRIMITIVES = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "file": "any",
}

# Встроенные имена никогда не импортируются
BUILTIN_TYPES = frozenset({"object", "void", "string", "number", "boolean", "any"})

DEFINITIONS_PREFIX = "#/definitions/"

_CONTAINER = re.compile(r"Array<|>")


def strip_container(type_expression: str) -> str:
    """
    Убирает обертку ``Array<...>``, оставляя голое имя для импорта.

    Examples:
        >>> strip_container("Array<Array<Pet>>")
        'Pet'
        >>> strip_container("Pet")
        'Pet'
    """
    stripped = _CONTAINER.sub("", type_expression)
    while stripped != type_expression:
        type_expression = stripped
        stripped = _CONTAINER.sub("", type_expression)
    return stripped


def is_importable(name: Optional[str]) -> bool:
    return bool(name) and name.isidentifier() and name not in BUILTIN_TYPES


def convert(schema: SchemaNode, document: SwaggerDocument) -> TypeExpression:
    """Выражение типа для узла схемы; бросает TypeConversionError"""
    return _convert(schema, document, frozenset())


def _convert(
    schema: SchemaNode, document: SwaggerDocument, flattening: FrozenSet[str]
) -> TypeExpression:
    if isinstance(schema, ReferenceSchema):
        return _convert_reference(schema, document)

    if isinstance(schema, EnumSchema):
        return TypeExpression(
            kind=SchemaKind.ENUM,
            expression=" | ".join(json.dumps(v, default=str) for v in schema.values),
            description=schema.description,
            enum_values=schema.values,
            is_enum=True,
            is_atomic=True,
        )

    if isinstance(schema, PrimitiveSchema):
        return TypeExpression(
            kind=SchemaKind.PRIMITIVE,
            expression=PRIMITIVES[schema.type],
            description=schema.description,
            is_atomic=True,
        )

    if isinstance(schema, ArraySchema):
        element = _convert(schema.items, document, flattening)
        return TypeExpression(
            kind=SchemaKind.ARRAY,
            expression=f"Array<{element.expression}>",
            import_target=element.import_target,
            description=schema.description,
            element_type=element,
            is_array=True,
        )

    if isinstance(schema, ObjectSchema):
        return TypeExpression(
            kind=SchemaKind.OBJECT,
            expression="object",
            description=schema.description,
            properties=tuple(_object_properties(schema, document, flattening)),
            is_object=True,
        )

    if isinstance(schema, MalformedSchema):
        raise TypeConversionError(schema.reason, schema.raw)

    raise TypeConversionError(f"unknown schema node {schema!r}", schema)


def _convert_reference(
    schema: ReferenceSchema, document: SwaggerDocument
) -> TypeExpression:
    name, _ = _lookup_definition(schema, document)
    type_name = to_safe_type_name(name)

    return TypeExpression(
        kind=SchemaKind.REFERENCE,
        expression=type_name,
        import_target=type_name,
        description=schema.description,
        is_ref=True,
    )


def _object_properties(
    schema: ObjectSchema, document: SwaggerDocument, flattening: FrozenSet[str]
) -> List[PropertyRecord]:
    properties: List[PropertyRecord] = []

    # allOf разворачивается в плоский список свойств
    for member in schema.all_of:
        if isinstance(member, ReferenceSchema):
            name, target = _lookup_definition(member, document)
            if name in flattening:
                raise TypeConversionError(
                    f"allOf cycle through definition {name!r}", member.ref
                )
            flattened = _convert(target, document, flattening | {name})
        else:
            flattened = _convert(member, document, flattening)
        properties.extend(flattened.properties)

    for name, prop_schema in schema.properties.items():
        properties.append(
            PropertyRecord(
                name=name,
                optional=name not in schema.required,
                type_expression=_convert(prop_schema, document, flattening),
            )
        )

    return properties


def _lookup_definition(
    schema: ReferenceSchema, document: SwaggerDocument
) -> Tuple[str, SchemaNode]:
    if not schema.ref.startswith(DEFINITIONS_PREFIX):
        raise SchemaReferenceError(schema.ref)

    name = schema.target_name
    if name not in document.definitions:
        raise SchemaReferenceError(schema.ref)

    return name, document.definitions[name]
