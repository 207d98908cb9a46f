"""
Конфигурация генерации view-модели
"""

import logging
import os
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import toml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "codegen.toml"


class OutputType(str, Enum):
    """Режим вывода: полный класс, только типы или обертка класса"""

    DEFAULT = "DEFAULT"
    TYPES = "TYPES"
    CLASS = "CLASS"


@dataclass(frozen=True)
class GeneratorOptions:
    """Настройки генератора; передаются по значению и не изменяются"""

    class_name: Optional[str] = None
    module_name: Optional[str] = None
    generate_for_path: Optional[str] = None
    is_es6: bool = False
    imports: Tuple[str, ...] = ()
    output_type: OutputType = OutputType.DEFAULT
    default_response_type: str = "void"
    templates: Dict[str, str] = field(default_factory=dict)
    extra_context: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorOptions":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        unknown = set(data) - set(known)
        if unknown:
            logger.warning("Неизвестные ключи конфигурации: %s", ", ".join(sorted(unknown)))

        if "imports" in known:
            known["imports"] = tuple(known["imports"])
        if "output_type" in known:
            known["output_type"] = _output_type(known["output_type"])

        return cls(**known)

    @classmethod
    def from_file(
        cls, config_path: str = DEFAULT_CONFIG_NAME, search_dir: str = None
    ) -> Optional["GeneratorOptions"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, DEFAULT_CONFIG_NAME)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError) as e:
            logger.warning("Не удалось прочитать %s: %s", config_path, e)
            return None

        return cls.from_dict(config_data)

    def save_to_file(self, config_path: str = DEFAULT_CONFIG_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            key: (value.value if isinstance(value, Enum) else value)
            for key, value in asdict(self).items()
            # toml не умеет None
            if value is not None
        }
        config_data["imports"] = list(self.imports)

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "GeneratorOptions":
        """Объединение с аргументами командной строки"""
        overrides = {
            name: getattr(args, name)
            for name in self.__dataclass_fields__
            if getattr(args, name, None) not in (None, "", (), [], {})
        }
        return self.merge(**overrides)

    def merge(self, **overrides) -> "GeneratorOptions":
        if "imports" in overrides:
            overrides["imports"] = tuple(overrides["imports"])
        if "output_type" in overrides:
            overrides["output_type"] = _output_type(overrides["output_type"])
        return replace(self, **overrides)


def _output_type(value: Any) -> OutputType:
    if isinstance(value, OutputType):
        return value
    return OutputType(str(value).upper())
