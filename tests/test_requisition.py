"""Tests for the authenticated createpayload call."""

from __future__ import annotations

import json

import pytest

from adapters.rmk.requisition import build_payload, create_payload_url, resolve_requisition_id
from core.domain.errors import ErrorKind, ReqIdError
from core.domain.models import SessionArtifacts

from conftest import DOMAIN, FakeRmk

ARTIFACTS = SessionArtifacts(company_id="ACMECORP", csrf_token="8c2e6f1a-token", cookie="JSESSIONID=F00DCAFE.node7")


def test_payload_shape():
    assert create_payload_url("career.example.com") == "https://career.example.com/services/cas/createpayload/"
    assert build_payload("123") == {"context": {"action": "apply", "jobID": "123"}}


@pytest.mark.asyncio
async def test_sends_authenticated_request(fake_rmk, settings):
    result = await resolve_requisition_id(
        domain=DOMAIN,
        artifacts=ARTIFACTS,
        job_id="123",
        settings=settings,
        transport=fake_rmk.transport,
    )

    assert result.req_id == "REQ-42"

    request = fake_rmk.requests[0]
    assert request.method == "POST"
    assert str(request.url) == f"https://{DOMAIN}/services/cas/createpayload/"
    assert request.headers["Cookie"] == "JSESSIONID=F00DCAFE.node7"
    assert request.headers["X-CSRF-Token"] == "8c2e6f1a-token"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"context": {"action": "apply", "jobID": "123"}}


@pytest.mark.asyncio
async def test_gone_is_requisition_not_found(settings):
    fake = FakeRmk(payload_status=410, payload_body={})

    with pytest.raises(ReqIdError) as excinfo:
        await resolve_requisition_id(
            domain=DOMAIN, artifacts=ARTIFACTS, job_id="123", settings=settings, transport=fake.transport
        )

    assert excinfo.value.kind is ErrorKind.REQUISITION_NOT_FOUND
    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "no req id returned"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 403, 500, 503])
async def test_other_statuses_are_request_errors(settings, status):
    fake = FakeRmk(payload_status=status, payload_body={"error": "nope"})

    with pytest.raises(ReqIdError) as excinfo:
        await resolve_requisition_id(
            domain=DOMAIN, artifacts=ARTIFACTS, job_id="123", settings=settings, transport=fake.transport
        )

    assert excinfo.value.kind is ErrorKind.UPSTREAM_REQUEST
    assert excinfo.value.status_code == 500
    assert excinfo.value.message == "failed to retrieve req id"


@pytest.mark.asyncio
async def test_null_req_id_passes_through(settings):
    fake = FakeRmk(payload_body={"career_job_req_id": None, "other": 1})

    result = await resolve_requisition_id(
        domain=DOMAIN, artifacts=ARTIFACTS, job_id="123", settings=settings, transport=fake.transport
    )

    assert result.req_id is None


@pytest.mark.asyncio
async def test_numeric_req_id_is_stringified(settings):
    fake = FakeRmk(payload_body={"career_job_req_id": 9876})

    result = await resolve_requisition_id(
        domain=DOMAIN, artifacts=ARTIFACTS, job_id="123", settings=settings, transport=fake.transport
    )

    assert result.req_id == "9876"


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", [b"<html>maintenance</html>", b"[1, 2, 3]"])
async def test_non_object_body_is_request_error(settings, raw):
    fake = FakeRmk(payload_raw=raw)

    with pytest.raises(ReqIdError) as excinfo:
        await resolve_requisition_id(
            domain=DOMAIN, artifacts=ARTIFACTS, job_id="123", settings=settings, transport=fake.transport
        )

    assert excinfo.value.kind is ErrorKind.UPSTREAM_REQUEST
