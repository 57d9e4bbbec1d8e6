"""Adaptadores de I/O (HTTP, portapapeles).

Por qué:
- Implementan los contratos de `core.interfaces`.
- Traducen excepciones de librerías (httpx, pydantic, pyperclip) a la
  taxonomía de `core.domain.errors`.
"""
