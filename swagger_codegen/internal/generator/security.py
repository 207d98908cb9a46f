"""
Определение механизмов авторизации операции
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..types.models import Operation, SwaggerDocument

TOKEN = "oauth2"
API_KEY = "apiKey"
BASIC = "basic"


@dataclass(frozen=True)
class SecurityFlags:
    is_secure: bool = False
    is_secure_token: bool = False
    is_secure_api_key: bool = False
    is_secure_basic: bool = False


def merge_requirements(
    global_security: Optional[Sequence[Dict]], local_security: Optional[Sequence[Dict]]
) -> List[List[str]]:
    """
    Слияние требований документа и операции по позициям.

    i-я запись результата - объединение имен схем из i-х записей обоих списков.
    """
    global_security = global_security or ()
    local_security = local_security or ()

    merged = []
    for index in range(max(len(global_security), len(local_security))):
        names: Dict[str, None] = {}
        for source in (global_security, local_security):
            if index < len(source) and isinstance(source[index], dict):
                names.update(dict.fromkeys(source[index]))
        merged.append(list(names))

    return merged


def resolve(document: SwaggerDocument, operation: Operation) -> SecurityFlags:
    is_secure = document.security is not None or operation.security is not None

    if document.security_definitions is None:
        return SecurityFlags(is_secure=is_secure)

    required = {
        name
        for entry in merge_requirements(document.security, operation.security)
        for name in entry
    }
    mechanisms = {
        scheme.type
        for name, scheme in document.security_definitions.items()
        if name in required
    }

    return SecurityFlags(
        is_secure=is_secure,
        is_secure_token=TOKEN in mechanisms,
        is_secure_api_key=API_KEY in mechanisms,
        is_secure_basic=BASIC in mechanisms,
    )
