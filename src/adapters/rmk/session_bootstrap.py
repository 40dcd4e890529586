"""Bootstrap de sesión contra una instancia RMK.

Flujo:
- GET sin autenticar a la página de error (`/errorpage/?errortype=Exception`).
- Del HTML se extraen tenant y token CSRF; de las cabeceras, la cookie
  `JSESSIONID`.

El status de la página de error no se comprueba: la página puede responder
con un código de error y aun así traer los artefactos.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_async_client
from adapters.rmk.extractors import RegexArtifactExtractor
from core.config import AppSettings
from core.domain.errors import upstream_not_found_error, upstream_protocol_error
from core.domain.models import SessionArtifacts
from core.interfaces.extractor import ArtifactExtractor

logger = logging.getLogger(__name__)


def error_page_url(domain: str) -> str:
    return f"https://{domain}/errorpage/?errortype=Exception"


async def fetch_session_artifacts(
    *,
    domain: str,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    extractor: ArtifactExtractor | None = None,
) -> SessionArtifacts:
    """Descarga la página de error de `domain` y devuelve los artefactos de sesión.

    Errores:
    - sin `ssoCompanyId` -> UPSTREAM_NOT_FOUND (el dominio no aloja RMK)
    - sin `X-CSRF-Token` o sin cookie `JSESSIONID` -> UPSTREAM_PROTOCOL
    """

    settings = settings or AppSettings()
    extractor = extractor or RegexArtifactExtractor()
    url = error_page_url(domain)

    logger.debug("fetching error page %s", url)
    async with build_async_client(settings, transport=transport) as client:
        resp = await client.get(url)
    logger.debug("error page %s answered HTTP %s", url, resp.status_code)

    html = resp.text

    company_id = extractor.company_id(html)
    if company_id is None:
        raise upstream_not_found_error()

    csrf_token = extractor.csrf_token(html)
    if csrf_token is None:
        raise upstream_protocol_error("failed to find X-CSRF-Token")

    cookie = extractor.session_cookie(resp.headers.get_list("set-cookie"))
    if not cookie:
        raise upstream_protocol_error("failed to find JSESSIONID cookie")

    logger.info("session bootstrapped for %s (companyId=%s)", domain, company_id)
    return SessionArtifacts(company_id=company_id, csrf_token=csrf_token, cookie=cookie)
