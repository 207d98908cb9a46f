"""
View-модель, которую получает слой шаблонов.

Все записи неизменяемые. Шаблонам отдаются ключи в camelCase
(``methodName``, ``isSecureToken``), как их ждут mustache-шаблоны.
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import SchemaKind


class ViewRecord(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class PropertyRecord(ViewRecord):
    name: str
    optional: bool = True
    type_expression: "TypeExpression"


class TypeExpression(ViewRecord):
    kind: SchemaKind
    expression: str
    import_target: Optional[str] = None
    description: Optional[str] = None

    element_type: Optional["TypeExpression"] = None
    properties: Tuple[PropertyRecord, ...] = ()
    enum_values: Tuple[Any, ...] = ()

    is_ref: bool = False
    is_object: bool = False
    is_array: bool = False
    is_enum: bool = False
    is_atomic: bool = False

    def referenced_types(self) -> Iterator[str]:
        """Все импортируемые имена внутри выражения, включая вложенные"""
        # У массива import_target взят от элемента
        if self.element_type is not None:
            yield from self.element_type.referenced_types()
        elif self.import_target:
            yield self.import_target

        for prop in self.properties:
            yield from prop.type_expression.referenced_types()


PropertyRecord.model_rebuild()
TypeExpression.model_rebuild()


class ParameterRecord(ViewRecord):
    name: str
    camel_case_name: str
    location: Optional[str] = None
    description: Optional[str] = None

    is_body_parameter: bool = False
    is_path_parameter: bool = False
    is_query_parameter: bool = False
    is_header_parameter: bool = False
    is_form_parameter: bool = False

    is_pattern_type: bool = False
    pattern: Optional[str] = None

    is_singleton: bool = False
    singleton: Any = None

    required: bool = False
    cardinality: str = "?"
    type_expression: TypeExpression


class HeaderRecord(ViewRecord):
    name: str
    value: str


class MethodRecord(ViewRecord):
    path: str
    path_format_string: str
    class_name: Optional[str] = None
    method_name: str
    method: str
    is_get: bool = False
    is_post: bool = False
    summary: Optional[str] = None
    external_docs: Optional[Dict[str, Any]] = None
    tags: Tuple[str, ...] = ()

    is_secure: bool = False
    is_secure_token: bool = False
    is_secure_api_key: bool = False
    is_secure_basic: bool = False

    parameters: Tuple[ParameterRecord, ...] = ()
    headers: Tuple[HeaderRecord, ...] = ()
    successful_response_type: str


class DefinitionRecord(ViewRecord):
    name: str
    description: Optional[str] = None
    type_expression: TypeExpression


class ViewModel(ViewRecord):
    is_es6: bool = Field(default=False, alias="isES6")
    description: Optional[str] = None
    is_secure: bool = False
    module_name: Optional[str] = None
    class_name: Optional[str] = None
    imports: Tuple[str, ...] = ()
    domain: str = ""
    base_path: Optional[str] = None

    methods: Tuple[MethodRecord, ...] = ()
    definitions: Tuple[DefinitionRecord, ...] = ()

    is_secure_token: bool = False
    is_secure_api_key: bool = False
    is_secure_basic: bool = False

    types_to_import: Tuple[str, ...] = ()
    types_to_import_statement: str = ""

    def to_context(self, extra: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Контекст для шаблонизатора; ``extra`` перекрывает поля модели"""
        context = self.model_dump(by_alias=True)
        if extra:
            context.update(extra)
        return context

    def method_names(self) -> List[str]:
        return [m.method_name for m in self.methods]
