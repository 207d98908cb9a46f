"""
Загрузка Swagger-спецификации по URL или из файла
"""

import json
import logging
import os
from typing import Any, Dict, Optional

import httpx
import yaml

from .exceptions import DocumentLoadError

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = (".yaml", ".yml")


def load_document(source: str, client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    """
    Сырой документ из URL или локального файла.

    JSON и YAML различаются по расширению файла; ответ по URL разбирается
    как JSON, а если не вышло - как YAML.
    """
    if source.startswith(("http://", "https://")):
        return _load_url(source, client)

    if os.path.exists(source):
        return _load_file(source)

    raise DocumentLoadError(source, "file not found")


def _load_url(url: str, client: Optional[httpx.Client]) -> Dict[str, Any]:
    logger.info("Загрузка спецификации из %s", url)

    try:
        if client is not None:
            response = client.get(url)
        else:
            response = httpx.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise DocumentLoadError(url, str(e)) from e

    try:
        return _ensure_mapping(url, response.json())
    except json.JSONDecodeError:
        return _parse_yaml(url, response.text)


def _load_file(path: str) -> Dict[str, Any]:
    logger.info("Чтение спецификации из %s", path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(path, str(e)) from e

    if path.lower().endswith(YAML_EXTENSIONS):
        return _parse_yaml(path, text)

    try:
        return _ensure_mapping(path, json.loads(text))
    except json.JSONDecodeError as e:
        raise DocumentLoadError(path, f"invalid JSON: {e}") from e


def _parse_yaml(source: str, text: str) -> Dict[str, Any]:
    try:
        return _ensure_mapping(source, yaml.safe_load(text))
    except yaml.YAMLError as e:
        raise DocumentLoadError(source, f"invalid YAML: {e}") from e


def _ensure_mapping(source: str, data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DocumentLoadError(source, "document root is not a mapping")
    return data
