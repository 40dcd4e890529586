"""Ensamblado de la respuesta (status + cabeceras + cuerpo JSON)."""

from __future__ import annotations

from typing import Any

from core.config import AppSettings
from core.domain.errors import ReqIdError
from core.domain.models import (
    InvocationInput,
    ResolutionResult,
    ResponseEnvelope,
    SessionArtifacts,
)

JSON_CONTENT_TYPE = "application/json"


def _base_headers() -> dict[str, str]:
    return {"Content-Type": JSON_CONTENT_TYPE}


def build_success_response(
    *,
    request: InvocationInput,
    artifacts: SessionArtifacts,
    result: ResolutionResult,
    settings: AppSettings | None = None,
) -> ResponseEnvelope:
    """200 con `Cache-Control` y el cuerpo completo.

    `reqId` se omite si la instancia no devolvió ninguno.
    """

    settings = settings or AppSettings()
    headers = _base_headers()
    headers["Cache-Control"] = f"public, max-age={settings.cache_ttl}"

    body: dict[str, Any] = {
        "domain": request.domain,
        "jobId": request.job_id,
        **artifacts.model_dump(by_alias=True),
        **result.model_dump(by_alias=True, exclude_none=True),
    }
    return ResponseEnvelope(status_code=200, headers=headers, body=body)


def build_error_response(error: ReqIdError) -> ResponseEnvelope:
    return ResponseEnvelope(
        status_code=error.status_code or 500,
        headers=_base_headers(),
        body={"errors": [error.message]},
    )
