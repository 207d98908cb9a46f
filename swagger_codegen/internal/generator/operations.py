"""
Сборка записи метода для одной HTTP-операции
"""

import logging
from typing import List, Optional, Sequence

from ...config import GeneratorOptions
from ...exceptions import TypeConversionError
from ..types.converter import convert
from ..types.models import Operation, ParameterLike, PathItem, SwaggerDocument
from ..types.view import HeaderRecord, MethodRecord, ParameterRecord
from ..utils.naming import derive_path_method_name, to_identifier
from . import parameters as parameter_classifier
from . import security as security_resolver

logger = logging.getLogger(__name__)

AUTHORIZED_METHODS = (
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "PATCH",
    "COPY",
    "HEAD",
    "OPTIONS",
    "LINK",
    "UNLINK",
    "PURGE",
    "LOCK",
    "UNLOCK",
    "PROPFIND",
)

SUCCESS_STATUS = "200"


def is_authorized_method(verb: str) -> bool:
    return verb.upper() in AUTHORIZED_METHODS


def method_name(verb: str, path: str, operation: Operation) -> str:
    if operation.operation_id:
        return to_identifier(operation.operation_id)
    return derive_path_method_name(verb, path)


def successful_response_type(
    operation: Operation, document: SwaggerDocument, default: str
) -> str:
    """Тип ответа 200; при любой ошибке конвертации - тип по умолчанию"""
    response = operation.responses.get(SUCCESS_STATUS)
    if response is None:
        return default

    try:
        return convert(response.schema, document).expression or default
    except TypeConversionError as e:
        logger.debug("Тип ответа %s заменен на %s: %s", operation.verb, default, e)
        return default


def headers(operation: Operation, document: SwaggerDocument) -> List[HeaderRecord]:
    result = []

    produces = operation.produces if operation.produces is not None else document.produces
    if produces:
        result.append(HeaderRecord(name="Accept", value=f"'{', '.join(produces)}'"))

    consumes = operation.consumes if operation.consumes is not None else document.consumes
    if consumes:
        result.append(HeaderRecord(name="Content-Type", value=f"'{consumes[0]}'"))

    return result


def matches_path_filter(path: str, generate_for_path: Optional[str]) -> bool:
    """Фильтр по первому сегменту пути, без учета регистра"""
    if not generate_for_path:
        return True
    if not path:
        return False

    first_segment = path[1:].split("/")[0]
    return first_segment.lower() == generate_for_path.lower()


def classify_parameters(
    operation: Operation,
    global_parameters: Sequence[ParameterLike],
    document: SwaggerDocument,
) -> List[ParameterRecord]:
    records = []
    # Сначала параметры операции, затем общие параметры пути
    for parameter in tuple(operation.parameters) + tuple(global_parameters):
        record = parameter_classifier.classify(parameter, document)
        if record is not None:
            records.append(record)
    return records


def build(
    path_item: PathItem,
    verb: str,
    path: str,
    document: SwaggerDocument,
    options: GeneratorOptions,
) -> Optional[MethodRecord]:
    """Запись метода или None, если операция не попадает в вывод"""
    if verb.lower() == "parameters" or not is_authorized_method(verb):
        logger.debug("Пропущен ключ %r пути %s", verb, path)
        return None

    operation = path_item.operations[verb]
    http_method = verb.upper()

    # Фильтр пути проверяется только после сборки всей записи
    flags = security_resolver.resolve(document, operation)

    record = MethodRecord(
        path=path,
        path_format_string=path.replace("{", "${parameters."),
        class_name=options.class_name,
        method_name=method_name(verb, path, operation),
        method=http_method,
        is_get=http_method == "GET",
        is_post=http_method == "POST",
        summary=operation.description or operation.summary,
        external_docs=operation.external_docs,
        tags=operation.tags,
        is_secure=flags.is_secure,
        is_secure_token=flags.is_secure_token,
        is_secure_api_key=flags.is_secure_api_key,
        is_secure_basic=flags.is_secure_basic,
        parameters=tuple(classify_parameters(operation, path_item.parameters, document)),
        headers=tuple(headers(operation, document)),
        successful_response_type=successful_response_type(
            operation, document, options.default_response_type
        ),
    )

    if not matches_path_filter(path, options.generate_for_path):
        logger.debug("%s %s не подходит под фильтр %r", http_method, path, options.generate_for_path)
        return None

    return record
