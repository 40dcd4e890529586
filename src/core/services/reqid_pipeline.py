"""Job id -> requisition id resolution flow.

This module is the single catch boundary of the application: every
entry-point (Lambda handler, CLI) calls `resolve_job` and gets a
`ResponseEnvelope` back, never an exception. Both upstream calls run
strictly in sequence since the second one needs the artifacts scraped by
the first.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from adapters.rmk import fetch_session_artifacts, resolve_requisition_id
from core.config import AppSettings
from core.domain.errors import ErrorKind, ReqIdError
from core.domain.models import ResponseEnvelope
from core.interfaces.extractor import ArtifactExtractor
from core.services.responses import build_error_response, build_success_response
from core.validation import validate_query

logger = logging.getLogger(__name__)


async def resolve_job(
    query: Mapping[str, str | None] | None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    extractor: ArtifactExtractor | None = None,
) -> ResponseEnvelope:
    """Validate, bootstrap a session, resolve the req id and build the response."""

    try:
        settings = settings or AppSettings()
        request = validate_query(query)
        try:
            artifacts = await fetch_session_artifacts(
                domain=request.domain,
                settings=settings,
                transport=transport,
                extractor=extractor,
            )
            result = await resolve_requisition_id(
                domain=request.domain,
                artifacts=artifacts,
                job_id=request.job_id,
                settings=settings,
                transport=transport,
            )
        except httpx.HTTPError as exc:
            raise ReqIdError(
                ErrorKind.UPSTREAM_REQUEST,
                f"request to {request.domain} failed: {exc.__class__.__name__}",
            ) from exc
    except ReqIdError as err:
        logger.warning("resolution failed (%s, HTTP %s): %s", err.kind.value, err.status_code, err.message)
        return build_error_response(err)
    except Exception as exc:
        logger.exception("unexpected failure while resolving job")
        return build_error_response(ReqIdError(ErrorKind.UNEXPECTED, str(exc) or exc.__class__.__name__))

    logger.info("resolved job %s on %s -> %s", request.job_id, request.domain, result.req_id)
    return build_success_response(request=request, artifacts=artifacts, result=result, settings=settings)
