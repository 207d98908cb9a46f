"""
Сборка view-модели из Swagger 2.0 документа
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ...config import GeneratorOptions
from ..parser.document import check_version, parse_document
from ..types.converter import is_importable, strip_container
from ..types.models import SwaggerDocument
from ..types.view import DefinitionRecord, MethodRecord, ViewModel
from . import definitions as definition_builder
from . import operations as operation_builder

logger = logging.getLogger(__name__)

TYPES_MODULE = "./types"


def format_types_to_import(types: Iterable[str]) -> str:
    return f"import {{ {', '.join(types)} }} from '{TYPES_MODULE}';"


def domain(document: SwaggerDocument) -> str:
    """``scheme://host/basePath`` только если известны все три части"""
    if not (document.schemes and document.host and document.base_path):
        return ""
    return f"{document.schemes[0]}://{document.host}{document.base_path.rstrip('/')}"


class ViewModelBuilder:
    """Накапливает записи за один проход; build() отдает неизменяемую модель"""

    def __init__(self, document: SwaggerDocument, options: GeneratorOptions):
        self.document = document
        self.options = options
        self._methods: List[MethodRecord] = []
        self._definitions: List[DefinitionRecord] = []
        self._types_to_import: Dict[str, None] = {}
        self._is_secure_token = False
        self._is_secure_api_key = False
        self._is_secure_basic = False

    def add_import(self, type_name: Optional[str]) -> None:
        if is_importable(type_name):
            self._types_to_import.setdefault(type_name)

    def add_method(self, method: MethodRecord) -> None:
        self._methods.append(method)

        if method.is_secure:
            self._is_secure_token |= method.is_secure_token
            self._is_secure_api_key |= method.is_secure_api_key
            self._is_secure_basic |= method.is_secure_basic

        for parameter in method.parameters:
            for type_name in parameter.type_expression.referenced_types():
                self.add_import(type_name)

        self.add_import(strip_container(method.successful_response_type))

    def add_definition(self, definition: DefinitionRecord) -> None:
        self._definitions.append(definition)

        for type_name in definition.type_expression.referenced_types():
            self.add_import(type_name)

    def build(self) -> ViewModel:
        types_to_import = tuple(self._types_to_import)

        return ViewModel(
            is_es6=self.options.is_es6,
            description=self.document.description,
            is_secure=self.document.security_definitions is not None,
            module_name=self.options.module_name,
            class_name=self.options.class_name,
            imports=self.options.imports,
            domain=domain(self.document),
            base_path=self.document.base_path,
            methods=tuple(self._methods),
            definitions=tuple(self._definitions),
            is_secure_token=self._is_secure_token,
            is_secure_api_key=self._is_secure_api_key,
            is_secure_basic=self._is_secure_basic,
            types_to_import=types_to_import,
            types_to_import_statement=format_types_to_import(types_to_import),
        )


def assemble(
    document: Union[Mapping[str, Any], SwaggerDocument],
    options: Optional[GeneratorOptions] = None,
) -> ViewModel:
    """
    View-модель для документа.

    Версия проверяется до любой другой работы. Пути, операции и
    definitions обходятся в порядке документа; любая ошибка прерывает
    сборку целиком.
    """
    options = options or GeneratorOptions()

    if isinstance(document, SwaggerDocument):
        check_version({"swagger": document.swagger})
    else:
        check_version(document)
        document = parse_document(document)

    logger.info(
        "Сборка view-модели: %d путей, %d definitions",
        len(document.paths),
        len(document.definitions),
    )

    builder = ViewModelBuilder(document, options)

    for path, path_item in document.paths.items():
        for verb in path_item.operations:
            method = operation_builder.build(path_item, verb, path, document, options)
            if method is not None:
                builder.add_method(method)

    for name, schema in document.definitions.items():
        builder.add_definition(definition_builder.build(name, schema, document))

    view = builder.build()
    logger.info(
        "View-модель готова: %d методов, %d типов", len(view.methods), len(view.definitions)
    )
    return view
