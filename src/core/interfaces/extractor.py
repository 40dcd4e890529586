"""Contrato de extracción de artefactos de sesión.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La estrategia de matching (regex hoy) se puede sustituir sin tocar al
  bootstrapper que la usa.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class ArtifactExtractor(Protocol):
    """Extrae tenant, token y cookie de la respuesta de la página de error.

    Reglas de diseño:
    - Funciones puras sobre texto: sin I/O.
    - Devuelven None si el artefacto no aparece; el llamador decide el error.
    """

    def company_id(self, html: str) -> str | None:
        ...

    def csrf_token(self, html: str) -> str | None:
        ...

    def session_cookie(self, set_cookie_values: Iterable[str]) -> str | None:
        ...
