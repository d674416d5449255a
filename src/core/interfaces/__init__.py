"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: los servicios dependen de abstracciones y
  los tests pueden pasar fakes sin red ni portapapeles.
"""
