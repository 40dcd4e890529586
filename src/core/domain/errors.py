"""Taxonomía de errores del flujo de resolución.

Un único tipo de excepción (`ReqIdError`) lleva una etiqueta `ErrorKind`;
el status HTTP por defecto se deriva de la etiqueta. Los adaptadores lanzan
estos errores y solo el pipeline los captura y los convierte en respuesta.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Clases de fallo conocidas."""

    VALIDATION = "validation"
    UPSTREAM_NOT_FOUND = "upstream_not_found"
    UPSTREAM_PROTOCOL = "upstream_protocol"
    REQUISITION_NOT_FOUND = "requisition_not_found"
    UPSTREAM_REQUEST = "upstream_request"
    UNEXPECTED = "unexpected"

    @property
    def default_status(self) -> int:
        return _DEFAULT_STATUS[self]


_DEFAULT_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.UPSTREAM_NOT_FOUND: 422,
    ErrorKind.UPSTREAM_PROTOCOL: 500,
    ErrorKind.REQUISITION_NOT_FOUND: 404,
    ErrorKind.UPSTREAM_REQUEST: 500,
    ErrorKind.UNEXPECTED: 500,
}


class ReqIdError(Exception):
    """Fallo clasificado: etiqueta + mensaje + status."""

    def __init__(self, kind: ErrorKind, message: str, status_code: int | None = None) -> None:
        self.kind = kind
        self.message = message
        self.status_code = status_code if status_code is not None else kind.default_status
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ReqIdError(kind={self.kind.value!r}, status_code={self.status_code}, message={self.message!r})"


def validation_error(message: str) -> ReqIdError:
    return ReqIdError(ErrorKind.VALIDATION, message)


def upstream_not_found_error(message: str = "no RMK instance found at given domain") -> ReqIdError:
    return ReqIdError(ErrorKind.UPSTREAM_NOT_FOUND, message)


def upstream_protocol_error(message: str) -> ReqIdError:
    return ReqIdError(ErrorKind.UPSTREAM_PROTOCOL, message)


def requisition_not_found_error(message: str = "no req id returned") -> ReqIdError:
    return ReqIdError(ErrorKind.REQUISITION_NOT_FOUND, message)


def upstream_request_error(message: str = "failed to retrieve req id") -> ReqIdError:
    return ReqIdError(ErrorKind.UPSTREAM_REQUEST, message)
