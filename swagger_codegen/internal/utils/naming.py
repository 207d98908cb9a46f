"""Утилиты для имен методов и типов"""

import re
import unicodedata
from typing import List

_SEPARATORS = re.compile(r"[.\-{}]")

# Разбиение на слова как у lodash: аббревиатуры, горбы camelCase и числа -
# отдельные слова
_WORDS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

# Латинские буквы, которые NFKD не раскладывает
_LIGATURES = str.maketrans(
    {
        "ß": "ss",
        "Æ": "Ae",
        "æ": "ae",
        "Œ": "Oe",
        "œ": "oe",
        "Ø": "O",
        "ø": "o",
        "Đ": "D",
        "đ": "d",
        "Ł": "L",
        "ł": "l",
        "Þ": "Th",
        "þ": "th",
    }
)


def deburr(value: str) -> str:
    """
    Убирает диакритику с латинских букв.

    Examples:
        >>> deburr("naïve größe")
        'naive grosse'
    """
    decomposed = unicodedata.normalize("NFKD", value.translate(_LIGATURES))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def words(value: str) -> List[str]:
    return _WORDS.findall(deburr(value))


def camel_case(value: str) -> str:
    """
    Приводит строку к camelCase.

    Examples:
        >>> camel_case("pet_store_model")
        'petStoreModel'
        >>> camel_case("X-Request-ID")
        'xRequestId'
    """
    parts = words(value)
    if not parts:
        return ""

    return parts[0].lower() + "".join(p[:1].upper() + p[1:].lower() for p in parts[1:])


def to_identifier(raw: str) -> str:
    """
    Заменяет ``.``, ``-``, ``{`` и ``}`` на подчеркивание.

    Используется для operationId.
    """
    return _SEPARATORS.sub("_", raw)


def to_safe_type_name(raw: str) -> str:
    """
    Имя экспортируемого типа: без точек и дефисов, с заглавной буквы.

    Examples:
        >>> to_safe_type_name("pet-store.model")
        'PetStoreModel'
    """
    name = camel_case(to_identifier(raw))
    return name[:1].upper() + name[1:]


def derive_path_method_name(verb: str, path: str) -> str:
    """
    Имя метода по HTTP-методу и пути, когда у операции нет operationId.

    Сегмент ``{userId}`` превращается в ``byUserId``.

    Examples:
        >>> derive_path_method_name("GET", "/users/{userId}")
        'getUsersByUserId'
        >>> derive_path_method_name("get", "/")
        'get'
    """
    if path in ("/", ""):
        return verb.lower()

    # Пути могут заканчиваться на '/'
    clean_path = re.sub(r"/$", "", path)

    segments = []
    for segment in clean_path.split("/")[1:]:
        if len(segment) > 2 and segment[0] == "{" and segment[-1] == "}":
            segment = "by" + segment[1].upper() + segment[2:-1]
        segments.append(segment)

    result = camel_case("-".join(segments))
    if not result:
        return verb.lower()

    return verb.lower() + result[0].upper() + result[1:]
