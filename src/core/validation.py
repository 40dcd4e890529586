"""Validación de los parámetros de entrada.

Se ejecuta antes de cualquier llamada de red.
"""

from __future__ import annotations

import re
from typing import Mapping

from core.domain.errors import validation_error
from core.domain.models import InvocationInput

_JOB_ID_RE = re.compile(r"[0-9]+")
# Hostname RFC 1123: etiquetas alfanuméricas (con guiones internos) separadas por puntos.
_HOSTNAME_RE = re.compile(
    r"(?=.{1,253}\Z)[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*"
)

MISSING_PARAMS_MESSAGE = "no RMK instance domain and/or no jobId given"
INVALID_JOB_ID_MESSAGE = "jobId may only contain numbers"
INVALID_DOMAIN_MESSAGE = "domain must be a bare hostname"


def validate_query(params: Mapping[str, str | None] | None) -> InvocationInput:
    """Valida `domain` y `jobId` y devuelve el input tipado.

    Lanza `ReqIdError` (VALIDATION, 422) si falta alguno o si `jobId` no es
    puramente numérico, o si `domain` no es un hostname sin esquema, puerto,
    credenciales ni ruta.
    """

    params = params or {}
    domain = params.get("domain")
    job_id = params.get("jobId")

    if not domain or not job_id:
        raise validation_error(MISSING_PARAMS_MESSAGE)
    # Solo dígitos ASCII; fullmatch evita el salto de línea final que `$` aceptaría.
    if not _JOB_ID_RE.fullmatch(job_id):
        raise validation_error(INVALID_JOB_ID_MESSAGE)
    if not _HOSTNAME_RE.fullmatch(domain):
        raise validation_error(INVALID_DOMAIN_MESSAGE)

    return InvocationInput(domain=domain, job_id=job_id)
