from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from core.config import AppSettings

DOMAIN = "career.example.com"

ERROR_PAGE_HTML = """<html><head>
<script type="text/javascript">
var j2w = {
    "ssoCompanyId" : 'ACMECORP',
    "locale" : 'en_US',
    "X-CSRF-Token" : "8c2e6f1a-token",
    "isSSO" : false
};
</script>
</head><body>Something went wrong</body></html>
"""

SESSION_COOKIES = [
    ("Set-Cookie", "route=1a2b3c; Path=/"),
    ("Set-Cookie", "JSESSIONID=F00DCAFE.node7; Path=/; Secure; HttpOnly"),
]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """No .env del proyecto ni variables del entorno del desarrollador."""

    monkeypatch.chdir(tmp_path)
    for var in ("CACHE_TTL", "RMK_REQID_CACHE_TTL", "RMK_REQID_HTTP_TIMEOUT_SECONDS", "RMK_REQID_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


class FakeRmk:
    """Instancia RMK simulada sobre `httpx.MockTransport`; guarda las requests."""

    def __init__(
        self,
        *,
        error_page: str = ERROR_PAGE_HTML,
        cookies: list[tuple[str, str]] | None = None,
        payload_status: int = 200,
        payload_body: object = None,
        payload_raw: bytes | None = None,
        on_request: Callable[[httpx.Request], None] | None = None,
    ) -> None:
        self.error_page = error_page
        self.cookies = SESSION_COOKIES if cookies is None else cookies
        self.payload_status = payload_status
        self.payload_body = {"career_job_req_id": "REQ-42"} if payload_body is None else payload_body
        self.payload_raw = payload_raw
        self.on_request = on_request
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)

        if request.method == "GET" and request.url.path == "/errorpage/":
            return httpx.Response(200, text=self.error_page, headers=self.cookies)

        if request.method == "POST" and request.url.path == "/services/cas/createpayload/":
            if self.payload_raw is not None:
                return httpx.Response(self.payload_status, content=self.payload_raw)
            return httpx.Response(
                self.payload_status,
                content=json.dumps(self.payload_body).encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )

        return httpx.Response(404, text="not found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_rmk() -> FakeRmk:
    return FakeRmk()
