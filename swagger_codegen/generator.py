"""
Главный модуль генератора - чистый интерфейс
"""

from typing import Any, Dict, Mapping, Optional, Union

from .config import GeneratorOptions
from .internal.generator.templates import (
    TemplateEngine,
    TemplateLoader,
    render,
    resolve_templates,
)
from .internal.generator.view_builder import assemble
from .internal.types.models import SwaggerDocument
from .internal.types.view import ViewModel


class CodeGenerator:
    """Чистый интерфейс: документ -> view-модель -> текст через внешний шаблонизатор"""

    def __init__(
        self,
        swagger: Union[Mapping[str, Any], SwaggerDocument],
        options: Optional[GeneratorOptions] = None,
    ):
        self.swagger = swagger
        self.options = options or GeneratorOptions()

    def view_model(self) -> ViewModel:
        return assemble(self.swagger, self.options)

    def context(self) -> Dict[str, Any]:
        return self.view_model().to_context(self.options.extra_context)

    def render(
        self,
        engine: TemplateEngine,
        loader: Optional[TemplateLoader] = None,
        custom: bool = False,
    ) -> str:
        # Модель собирается до шаблонов: неподдерживаемая версия падает первой
        context = self.context()
        templates = resolve_templates(self.options, loader, custom)
        return render(context, templates, engine)


def generate_view_model(
    swagger: Union[Mapping[str, Any], SwaggerDocument],
    options: Optional[GeneratorOptions] = None,
) -> ViewModel:
    """Создание view-модели из Swagger спецификации"""
    return CodeGenerator(swagger, options).view_model()


def generate_code(
    swagger: Union[Mapping[str, Any], SwaggerDocument],
    engine: TemplateEngine,
    options: Optional[GeneratorOptions] = None,
    loader: Optional[TemplateLoader] = None,
    custom: bool = False,
) -> str:
    """Генерация кода клиента внешним шаблонизатором"""
    return CodeGenerator(swagger, options).render(engine, loader, custom)
