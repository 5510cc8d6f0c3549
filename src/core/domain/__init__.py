"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce stdin, Rich ni Typer: solo conceptos del problema
  (rangos, literales, formatos de fecha y los textos de diagnóstico).
"""
