"""Генератор view-модели клиента из Swagger 2.0 спецификаций"""

from .config import GeneratorOptions, OutputType
from .exceptions import (
    CodegenError,
    DocumentLoadError,
    MalformedDocumentError,
    ReferenceResolutionError,
    SchemaReferenceError,
    TemplateResolutionError,
    TypeConversionError,
    UnsupportedVersionError,
)
from .generator import CodeGenerator, generate_code, generate_view_model
from .loader import load_document

__all__ = [
    "CodeGenerator",
    "generate_code",
    "generate_view_model",
    "load_document",
    "GeneratorOptions",
    "OutputType",
    "CodegenError",
    "DocumentLoadError",
    "MalformedDocumentError",
    "ReferenceResolutionError",
    "SchemaReferenceError",
    "TemplateResolutionError",
    "TypeConversionError",
    "UnsupportedVersionError",
]
