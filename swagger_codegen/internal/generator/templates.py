"""
Выбор шаблонов и рендеринг по режиму вывода.

Текст шаблонов и сам шаблонизатор - внешние: шаблоны приходят из
настроек или из ``loader``, шаблонизатор передается как функция
``engine(template, context, partials) -> str``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ...config import GeneratorOptions, OutputType
from ...exceptions import TemplateResolutionError

logger = logging.getLogger(__name__)

TemplateEngine = Callable[[str, Mapping[str, Any], Mapping[str, str]], str]
TemplateLoader = Callable[[str], str]

CUSTOM_REQUIRED = ("class", "method")

REQUIRED_TEMPLATES: Dict[OutputType, Tuple[str, ...]] = {
    OutputType.DEFAULT: ("class", "method", "type"),
    OutputType.TYPES: ("typesWrapper",),
    OutputType.CLASS: ("classWrapper",),
}


@dataclass(frozen=True)
class ResolvedTemplates:
    output_type: OutputType
    templates: Dict[str, str] = field(default_factory=dict)

    def __getitem__(self, name: str) -> str:
        return self.templates[name]


def resolve_templates(
    options: GeneratorOptions,
    loader: Optional[TemplateLoader] = None,
    custom: bool = False,
) -> ResolvedTemplates:
    """
    Набор шаблонов для режима вывода.

    Шаблоны из настроек имеют приоритет, недостающие берутся из ``loader``.
    Для custom-генерации обязательны ``class`` и ``method``, loader не
    используется.
    """
    templates = dict(options.templates)

    if custom:
        missing = tuple(
            name for name in CUSTOM_REQUIRED if not isinstance(templates.get(name), str)
        )
        if missing:
            raise TemplateResolutionError(
                "Unprovided custom template. Please use the following template: "
                'template: { class: "...", method: "...", request: "..." }',
                missing,
            )
        return ResolvedTemplates(output_type=options.output_type, templates=templates)

    required = REQUIRED_TEMPLATES[options.output_type]
    missing = []
    for name in required:
        if name in templates:
            continue
        if loader is None:
            missing.append(name)
            continue
        logger.debug("Загрузка шаблона %s", name)
        templates[name] = loader(name)

    if missing:
        raise TemplateResolutionError(
            f"Missing templates for {options.output_type.value} output: {', '.join(missing)}",
            tuple(missing),
        )

    return ResolvedTemplates(output_type=options.output_type, templates=templates)


def _render_full(context, templates: ResolvedTemplates, engine: TemplateEngine) -> str:
    return engine(templates["class"], context, templates.templates)


def _render_types(context, templates: ResolvedTemplates, engine: TemplateEngine) -> str:
    return engine(templates["typesWrapper"], context, templates.templates)


def _render_class_wrapper(
    context, templates: ResolvedTemplates, engine: TemplateEngine
) -> str:
    return engine(templates["classWrapper"], context, templates.templates)


RENDERERS = {
    OutputType.DEFAULT: _render_full,
    OutputType.TYPES: _render_types,
    OutputType.CLASS: _render_class_wrapper,
}


def render(
    context: Mapping[str, Any], templates: ResolvedTemplates, engine: TemplateEngine
) -> str:
    return RENDERERS[templates.output_type](context, templates, engine)
