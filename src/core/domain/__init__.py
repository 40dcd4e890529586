"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y la taxonomía de
  errores.
- El dominio no conoce HTTP, CLI, ni Lambda: solo conceptos del problema.
"""
