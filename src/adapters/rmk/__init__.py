"""Adaptadores para instancias RMK (I/O HTTP + extracción).

Por qué un paquete:
- Agrupa los dos pasos del flujo (bootstrap de sesión y resolución) y la
  estrategia de extracción que usan.
"""

from adapters.rmk.extractors import RegexArtifactExtractor
from adapters.rmk.requisition import resolve_requisition_id
from adapters.rmk.session_bootstrap import fetch_session_artifacts

__all__ = [
	"RegexArtifactExtractor",
	"fetch_session_artifacts",
	"resolve_requisition_id",
]
