"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: los bucles de lectura dependen de un
  contrato de consola, no de stdin ni de Rich.
"""
