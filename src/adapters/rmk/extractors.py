"""Extracción por regex de los artefactos de sesión.

La página de error de RMK embebe un objeto JS con, entre otros:

    "ssoCompanyId" : 'ACME',
    "X-CSRF-Token" : "2f1c...",

No hay garantía de esquema: si el markup cambia, este es el único módulo
que hay que tocar.
"""

from __future__ import annotations

import re
from typing import Iterable

COMPANY_ID_PATTERN = re.compile(r"\"ssoCompanyId\"\s*:\s*'(.*?)'")
CSRF_TOKEN_PATTERN = re.compile(r"\"X-CSRF-Token\"\s*:\s*\"(.*?)\"")
SESSION_COOKIE_NAME = "JSESSIONID"


class RegexArtifactExtractor:
    """Implementación por defecto de `core.interfaces.extractor.ArtifactExtractor`."""

    def __init__(
        self,
        *,
        company_id_pattern: re.Pattern[str] = COMPANY_ID_PATTERN,
        csrf_token_pattern: re.Pattern[str] = CSRF_TOKEN_PATTERN,
        cookie_name: str = SESSION_COOKIE_NAME,
    ) -> None:
        self._company_id_pattern = company_id_pattern
        self._csrf_token_pattern = csrf_token_pattern
        self._cookie_name = cookie_name

    def company_id(self, html: str) -> str | None:
        match = self._company_id_pattern.search(html)
        return match.group(1) if match else None

    def csrf_token(self, html: str) -> str | None:
        match = self._csrf_token_pattern.search(html)
        return match.group(1) if match else None

    def session_cookie(self, set_cookie_values: Iterable[str]) -> str | None:
        """Primer `Set-Cookie` que mencione la cookie de sesión, solo `Nombre=Valor`."""

        for value in set_cookie_values:
            if self._cookie_name in value:
                return value.split(";", 1)[0].strip()
        return None
