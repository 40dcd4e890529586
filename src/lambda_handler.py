"""Handler AWS Lambda (integración proxy de API Gateway).

Entrada: `event["queryStringParameters"]` con `domain` y `jobId`.
Salida: `{"statusCode", "headers", "body"}` con `body` serializado a JSON.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from core.config import AppSettings
from core.services.reqid_pipeline import resolve_job

logger = logging.getLogger(__name__)


def _load_settings() -> AppSettings | None:
    try:
        return AppSettings()
    except ValidationError:
        # resolve_job vuelve a construirlos y responde 500 con el detalle.
        logger.error("invalid configuration", exc_info=True)
        return None


def _configure_logging(settings: AppSettings | None) -> None:
    level = settings.log_level if settings else "INFO"
    # El runtime de Lambda ya instala un handler en el root logger.
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)


def handler(event: dict[str, Any] | None, context: Any = None) -> dict[str, Any]:
    settings = _load_settings()
    _configure_logging(settings)

    query = (event or {}).get("queryStringParameters")
    envelope = asyncio.run(resolve_job(query, settings=settings))
    return envelope.to_lambda()
