from ..types.converter import convert
from ..types.models import SchemaNode, SwaggerDocument
from ..types.view import DefinitionRecord
from ..utils.naming import to_safe_type_name


def build(name: str, schema: SchemaNode, document: SwaggerDocument) -> DefinitionRecord:
    """Экспортируемый тип для именованной схемы из definitions"""
    return DefinitionRecord(
        name=to_safe_type_name(name),
        description=schema.description,
        type_expression=convert(schema, document),
    )
