"""
Ошибки генератора view-модели
"""

from typing import Any, Optional


class CodegenError(Exception):
    """Базовая ошибка генератора"""


class UnsupportedVersionError(CodegenError):
    def __init__(self, version: Any):
        self.version = version
        super().__init__(
            f"Only Swagger 2 specs are supported (got swagger={version!r})"
        )


class MalformedDocumentError(CodegenError):
    def __init__(self, message: str, location: str = ""):
        self.location = location
        super().__init__(f"{location}: {message}" if location else message)


class ReferenceResolutionError(CodegenError):
    def __init__(self, ref: str, message: str = "reference could not be resolved"):
        self.ref = ref
        super().__init__(f"{ref}: {message}")


class TypeConversionError(CodegenError):
    def __init__(self, message: str, schema: Optional[Any] = None):
        self.schema = schema
        super().__init__(message)


class SchemaReferenceError(ReferenceResolutionError, TypeConversionError):
    """$ref схемы, которого нет в definitions"""

    def __init__(self, ref: str):
        ReferenceResolutionError.__init__(self, ref, "unknown definition")


class TemplateResolutionError(CodegenError):
    def __init__(self, message: str, missing: tuple = ()):
        self.missing = missing
        super().__init__(message)


class DocumentLoadError(CodegenError):
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Не удалось загрузить спецификацию из {source}: {reason}")
