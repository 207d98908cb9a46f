"""
Типизированное представление Swagger 2.0 документа.

Сырой JSON/YAML приводится к этим структурам один раз, на границе
(см. ``internal.parser.document``). Дальше по конвейеру ходят только
они, без разрозненных ``dict.get`` по всему коду.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Tuple, Union


class SchemaKind(str, Enum):
    PRIMITIVE = "primitive"
    ARRAY = "array"
    OBJECT = "object"
    ENUM = "enum"
    REFERENCE = "reference"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class PrimitiveSchema:
    type: str
    format: Optional[str] = None
    description: Optional[str] = None

    kind: ClassVar[SchemaKind] = SchemaKind.PRIMITIVE


@dataclass(frozen=True)
class ArraySchema:
    items: "SchemaNode"
    description: Optional[str] = None

    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY


@dataclass(frozen=True)
class ObjectSchema:
    properties: Dict[str, "SchemaNode"] = field(default_factory=dict)
    required: Tuple[str, ...] = ()
    all_of: Tuple["SchemaNode", ...] = ()
    title: Optional[str] = None
    description: Optional[str] = None

    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT


@dataclass(frozen=True)
class EnumSchema:
    values: Tuple[Any, ...]
    type: Optional[str] = None
    description: Optional[str] = None

    kind: ClassVar[SchemaKind] = SchemaKind.ENUM


@dataclass(frozen=True)
class ReferenceSchema:
    ref: str
    description: Optional[str] = None

    kind: ClassVar[SchemaKind] = SchemaKind.REFERENCE

    @property
    def target_name(self) -> str:
        """Последний сегмент ссылки: ``#/definitions/Pet`` -> ``Pet``"""
        return _unescape_pointer(self.ref.rsplit("/", 1)[-1])


@dataclass(frozen=True)
class MalformedSchema:
    """Узел, который не удалось классифицировать; ошибку бросает конвертер"""

    reason: str
    raw: Any = None
    description: Optional[str] = None

    kind: ClassVar[SchemaKind] = SchemaKind.MALFORMED


SchemaNode = Union[
    PrimitiveSchema,
    ArraySchema,
    ObjectSchema,
    EnumSchema,
    ReferenceSchema,
    MalformedSchema,
]


class ParameterLocation(str, Enum):
    BODY = "body"
    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    FORM = "formData"

    @classmethod
    def parse(cls, value: Any) -> Optional["ParameterLocation"]:
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Parameter:
    name: str
    location: Optional[str]
    schema: SchemaNode
    required: bool = False
    enum: Optional[Tuple[Any, ...]] = None
    description: Optional[str] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_excluded(self) -> bool:
        return _is_excluded(self.extensions)

    @property
    def name_pattern(self) -> Optional[str]:
        return self.extensions.get("x-name-pattern")


@dataclass(frozen=True)
class ParameterRef:
    ref: str
    extensions: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_excluded(self) -> bool:
        return _is_excluded(self.extensions)


ParameterLike = Union[Parameter, ParameterRef]


@dataclass(frozen=True)
class Response:
    schema: SchemaNode
    description: Optional[str] = None


@dataclass(frozen=True)
class Operation:
    verb: str
    responses: Dict[str, Response] = field(default_factory=dict)
    parameters: Tuple[ParameterLike, ...] = ()
    operation_id: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    external_docs: Optional[Dict[str, Any]] = None
    tags: Tuple[str, ...] = ()
    # None - не задано; пустой кортеж - явно переопределено
    security: Optional[Tuple[Dict[str, Any], ...]] = None
    produces: Optional[Tuple[str, ...]] = None
    consumes: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class PathItem:
    operations: Dict[str, Operation] = field(default_factory=dict)
    parameters: Tuple[ParameterLike, ...] = ()


@dataclass(frozen=True)
class SecurityScheme:
    name: str
    type: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class SwaggerDocument:
    swagger: str
    info: Dict[str, Any] = field(default_factory=dict)
    host: Optional[str] = None
    base_path: Optional[str] = None
    schemes: Tuple[str, ...] = ()
    security_definitions: Optional[Dict[str, SecurityScheme]] = None
    security: Optional[Tuple[Dict[str, Any], ...]] = None
    produces: Optional[Tuple[str, ...]] = None
    consumes: Optional[Tuple[str, ...]] = None
    paths: Dict[str, PathItem] = field(default_factory=dict)
    definitions: Dict[str, SchemaNode] = field(default_factory=dict)
    parameters: Dict[str, ParameterLike] = field(default_factory=dict)

    @property
    def description(self) -> Optional[str]:
        return self.info.get("description")


def _is_excluded(extensions: Dict[str, Any]) -> bool:
    # Заголовки, которые подставляют прокси и app-серверы, в биндинги не попадают
    return extensions.get("x-exclude-from-bindings") is True or bool(
        extensions.get("x-proxy-header")
    )


def _unescape_pointer(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")
