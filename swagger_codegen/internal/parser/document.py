"""
Граница между сырым Swagger-документом и типизированными структурами
"""

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from ...exceptions import MalformedDocumentError, UnsupportedVersionError
from ..types.models import (
    ArraySchema,
    EnumSchema,
    MalformedSchema,
    ObjectSchema,
    Operation,
    Parameter,
    ParameterLike,
    ParameterRef,
    PathItem,
    PrimitiveSchema,
    ReferenceSchema,
    Response,
    SchemaNode,
    SecurityScheme,
    SwaggerDocument,
)

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = "2.0"

PRIMITIVE_TYPES = ("string", "integer", "number", "boolean", "file")


def check_version(raw: Mapping[str, Any]) -> None:
    """Единственная поддерживаемая версия - строка "2.0" """
    version = raw.get("swagger") if isinstance(raw, Mapping) else None
    if version != SUPPORTED_VERSION:
        raise UnsupportedVersionError(version)


def parse_document(raw: Mapping[str, Any]) -> SwaggerDocument:
    """Разбор Swagger 2.0 документа"""
    if not isinstance(raw, Mapping):
        raise MalformedDocumentError("document root must be a mapping")

    check_version(raw)

    paths = _mapping(raw.get("paths"), "paths")
    definitions = _mapping(raw.get("definitions"), "definitions")
    shared_parameters = _mapping(raw.get("parameters"), "parameters")

    return SwaggerDocument(
        swagger=raw["swagger"],
        info=dict(raw.get("info") or {}),
        host=raw.get("host"),
        base_path=raw.get("basePath"),
        schemes=tuple(raw.get("schemes") or ()),
        security_definitions=_parse_security_definitions(
            raw.get("securityDefinitions")
        ),
        security=_optional_tuple(raw.get("security")),
        produces=_optional_tuple(raw.get("produces")),
        consumes=_optional_tuple(raw.get("consumes")),
        paths={path: parse_path_item(item) for path, item in paths.items()},
        definitions={
            name: parse_schema(schema) for name, schema in definitions.items()
        },
        parameters={
            name: parse_parameter(param)
            for name, param in shared_parameters.items()
            if isinstance(param, Mapping)
        },
    )


def parse_path_item(raw: Any) -> PathItem:
    if not isinstance(raw, Mapping):
        return PathItem()

    operations = {}
    parameters: Tuple[ParameterLike, ...] = ()

    for key, value in raw.items():
        if str(key).lower() == "parameters":
            parameters = _parse_parameter_list(value)
        elif str(key).startswith("x-"):
            logger.debug("Пропущено расширение %r в path item", key)
        elif isinstance(value, Mapping):
            operations[str(key)] = parse_operation(str(key), value)
        else:
            logger.debug("Пропущен ключ %r в path item", key)

    return PathItem(operations=operations, parameters=parameters)


def parse_operation(verb: str, raw: Mapping[str, Any]) -> Operation:
    responses = _mapping(raw.get("responses"), f"{verb}.responses")

    return Operation(
        verb=verb,
        responses={
            str(status): parse_response(response)
            for status, response in responses.items()
        },
        parameters=_parse_parameter_list(raw.get("parameters")),
        operation_id=raw.get("operationId"),
        summary=raw.get("summary"),
        description=raw.get("description"),
        external_docs=raw.get("externalDocs"),
        tags=tuple(raw.get("tags") or ()),
        security=_optional_tuple(raw.get("security")),
        produces=_optional_tuple(raw.get("produces")),
        consumes=_optional_tuple(raw.get("consumes")),
    )


def parse_response(raw: Any) -> Response:
    if not isinstance(raw, Mapping):
        return Response(schema=MalformedSchema("response is not a mapping", raw))

    description = raw.get("description")
    if "schema" in raw:
        return Response(schema=parse_schema(raw["schema"]), description=description)

    # Ответ без схемы - нетипизированный объект
    return Response(schema=ObjectSchema(description=description), description=description)


def parse_parameter(raw: Mapping[str, Any]) -> ParameterLike:
    extensions = {k: v for k, v in raw.items() if k.startswith("x-")}

    if isinstance(raw.get("$ref"), str):
        return ParameterRef(ref=raw["$ref"], extensions=extensions)

    # У body-параметра тип в schema, у остальных - в самом параметре
    schema_source = raw["schema"] if "schema" in raw else raw
    enum = raw.get("enum")

    return Parameter(
        name=raw.get("name", ""),
        location=raw.get("in"),
        schema=parse_schema(schema_source),
        required=bool(raw.get("required", False)),
        enum=tuple(enum) if isinstance(enum, list) else None,
        description=raw.get("description"),
        extensions=extensions,
    )


def parse_schema(raw: Any) -> SchemaNode:
    """Классификация узла схемы в один из вариантов SchemaNode"""
    if not isinstance(raw, Mapping):
        return MalformedSchema("schema is not a mapping", raw)

    description = raw.get("description")

    if "$ref" in raw:
        if not isinstance(raw["$ref"], str):
            return MalformedSchema("$ref must be a string", raw, description)
        return ReferenceSchema(ref=raw["$ref"], description=description)

    if "enum" in raw:
        if not isinstance(raw["enum"], list):
            return MalformedSchema("enum must be a list", raw, description)
        return EnumSchema(
            values=tuple(raw["enum"]), type=raw.get("type"), description=description
        )

    schema_type = raw.get("type")

    if schema_type in PRIMITIVE_TYPES:
        return PrimitiveSchema(
            type=schema_type, format=raw.get("format"), description=description
        )

    if schema_type == "array":
        if "items" not in raw:
            return MalformedSchema("array schema without items", raw, description)
        return ArraySchema(items=parse_schema(raw["items"]), description=description)

    if schema_type in (None, "object"):
        properties = raw.get("properties") or {}
        if not isinstance(properties, Mapping):
            return MalformedSchema("properties must be a mapping", raw, description)
        return ObjectSchema(
            properties={name: parse_schema(p) for name, p in properties.items()},
            required=tuple(raw.get("required") or ()),
            all_of=tuple(parse_schema(s) for s in raw.get("allOf") or ()),
            title=raw.get("title"),
            description=description,
        )

    return MalformedSchema(f"unsupported schema type {schema_type!r}", raw, description)


def _parse_parameter_list(raw: Any) -> Tuple[ParameterLike, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(parse_parameter(p) for p in raw if isinstance(p, Mapping))


def _parse_security_definitions(
    raw: Any,
) -> Optional[Dict[str, SecurityScheme]]:
    if raw is None:
        return None

    return {
        name: SecurityScheme(
            name=name,
            type=scheme.get("type") if isinstance(scheme, Mapping) else None,
            description=scheme.get("description") if isinstance(scheme, Mapping) else None,
        )
        for name, scheme in _mapping(raw, "securityDefinitions").items()
    }


def _mapping(value: Any, location: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise MalformedDocumentError("expected a mapping", location)
    return value


def _optional_tuple(value: Any) -> Optional[tuple]:
    if value is None:
        return None
    return tuple(value)
