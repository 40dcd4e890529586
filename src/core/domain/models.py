"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los alias camelCase (`jobId`, `companyId`...) son el contrato JSON de la
  respuesta; en Python usamos snake_case.

Nota:
- Todos los modelos viven lo que dura una invocación; nada se persiste.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class InvocationInput(BaseModel):
    """Parámetros ya validados de una invocación."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    domain: str = Field(
        ...,
        min_length=1,
        description="Hostname de la instancia RMK (sin esquema).",
    )
    job_id: str = Field(
        ...,
        alias="jobId",
        pattern=r"^[0-9]+$",
        description="Identificador numérico de la oferta en la instancia RMK.",
    )


class SessionArtifacts(BaseModel):
    """Artefactos de sesión extraídos de la página de error."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    company_id: str = Field(
        ...,
        alias="companyId",
        description="Tenant (`ssoCompanyId`) de la instancia.",
    )
    csrf_token: str = Field(
        ...,
        alias="csrfToken",
        description="Valor de `X-CSRF-Token` embebido en la página.",
    )
    cookie: str = Field(
        ...,
        description="Cookie de sesión en forma `Nombre=Valor` (sin atributos).",
    )


class ResolutionResult(BaseModel):
    """Resultado de la llamada autenticada."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    req_id: str | None = Field(
        default=None,
        alias="reqId",
        description="Requisition id (`career_job_req_id`); None si la instancia no devuelve ninguno.",
    )


class ResponseEnvelope(BaseModel):
    """Respuesta estilo HTTP: status, cabeceras y cuerpo JSON."""

    status_code: int = Field(..., ge=100, le=599)
    headers: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def body_json(self) -> str:
        return json.dumps(self.body, ensure_ascii=False)

    def to_lambda(self) -> dict[str, Any]:
        """Forma de respuesta de una integración proxy (API Gateway)."""

        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body_json(),
        }
