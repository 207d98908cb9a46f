"""
Классификация параметров операции
"""

import logging
from typing import Optional

from ...exceptions import ReferenceResolutionError
from ..types.converter import convert
from ..types.models import (
    Parameter,
    ParameterLike,
    ParameterLocation,
    ParameterRef,
    SwaggerDocument,
)
from ..types.view import ParameterRecord
from ..utils.naming import camel_case

logger = logging.getLogger(__name__)

PARAMETERS_PREFIX = "#/parameters/"

_LOCATION_FLAGS = {
    ParameterLocation.BODY: "is_body_parameter",
    ParameterLocation.PATH: "is_path_parameter",
    ParameterLocation.QUERY: "is_query_parameter",
    ParameterLocation.HEADER: "is_header_parameter",
    ParameterLocation.FORM: "is_form_parameter",
}


def resolve_parameter(ref: ParameterRef, document: SwaggerDocument) -> Parameter:
    """
    Разрешение ``$ref`` параметра по общей таблице ``parameters``.

    Принимаются ``#/parameters/<name>`` и голое ``<name>``. Результат
    повторно не разрешается.
    """
    if ref.ref.startswith(PARAMETERS_PREFIX):
        name = ref.ref[len(PARAMETERS_PREFIX) :]
    elif "/" not in ref.ref:
        name = ref.ref
    else:
        raise ReferenceResolutionError(ref.ref, "only #/parameters/ references are supported")

    resolved = document.parameters.get(name)
    if resolved is None:
        raise ReferenceResolutionError(ref.ref)
    if not isinstance(resolved, Parameter):
        raise ReferenceResolutionError(ref.ref, "reference resolves to another reference")

    return resolved


def classify(
    parameter: ParameterLike, document: SwaggerDocument
) -> Optional[ParameterRecord]:
    """Запись параметра для view-модели; None - параметр исключен из биндингов"""
    if parameter.is_excluded:
        logger.debug("Параметр исключен из биндингов: %s", parameter)
        return None

    if isinstance(parameter, ParameterRef):
        parameter = resolve_parameter(parameter, document)
        if parameter.is_excluded:
            logger.debug("Параметр исключен из биндингов: %s", parameter.name)
            return None

    location = ParameterLocation.parse(parameter.location)
    flags = {}
    if location is not None:
        flags[_LOCATION_FLAGS[location]] = True
    else:
        logger.debug(
            "Неизвестное расположение %r параметра %s", parameter.location, parameter.name
        )

    pattern = None
    if location is ParameterLocation.QUERY and parameter.name_pattern:
        pattern = parameter.name_pattern

    is_singleton = parameter.enum is not None and len(parameter.enum) == 1

    return ParameterRecord(
        name=parameter.name,
        camel_case_name=camel_case(parameter.name),
        location=parameter.location,
        description=parameter.description,
        is_pattern_type=pattern is not None,
        pattern=pattern,
        is_singleton=is_singleton,
        singleton=parameter.enum[0] if is_singleton else None,
        required=parameter.required,
        cardinality="" if parameter.required else "?",
        type_expression=convert(parameter.schema, document),
        **flags,
    )
