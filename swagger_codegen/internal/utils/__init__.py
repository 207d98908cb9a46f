"""Утилиты для генератора"""

from .naming import (
    camel_case,
    derive_path_method_name,
    to_identifier,
    to_safe_type_name,
)

__all__ = [
    "camel_case",
    "derive_path_method_name",
    "to_identifier",
    "to_safe_type_name",
]
