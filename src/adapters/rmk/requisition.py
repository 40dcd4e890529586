"""Resolución jobId -> requisition id (llamada autenticada).

Clasificación por status:
- 410 -> REQUISITION_NOT_FOUND
- != 200 -> UPSTREAM_REQUEST
- 200 -> `career_job_req_id` (puede venir nulo; se propaga tal cual)
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import requisition_not_found_error, upstream_request_error
from core.domain.models import ResolutionResult, SessionArtifacts

logger = logging.getLogger(__name__)


def create_payload_url(domain: str) -> str:
    return f"https://{domain}/services/cas/createpayload/"


def build_payload(job_id: str) -> dict[str, Any]:
    return {"context": {"action": "apply", "jobID": job_id}}


async def resolve_requisition_id(
    *,
    domain: str,
    artifacts: SessionArtifacts,
    job_id: str,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResolutionResult:
    settings = settings or AppSettings()
    headers = {
        "Cookie": artifacts.cookie,
        "X-CSRF-Token": artifacts.csrf_token,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    url = create_payload_url(domain)
    async with build_async_client(settings, extra_headers=headers, transport=transport) as client:
        resp = await client.post(url, json=build_payload(job_id))

    if resp.status_code == 410:
        logger.info("no requisition for job %s on %s", job_id, domain)
        raise requisition_not_found_error()
    if resp.status_code != 200:
        logger.warning("createpayload on %s answered HTTP %s", domain, resp.status_code)
        raise upstream_request_error()

    try:
        data = resp.json()
    except ValueError:
        logger.warning("createpayload on %s returned a non-JSON body", domain)
        raise upstream_request_error() from None
    if not isinstance(data, dict):
        raise upstream_request_error()

    req_id = data.get("career_job_req_id")
    if req_id is not None:
        req_id = str(req_id)
    return ResolutionResult(req_id=req_id)
