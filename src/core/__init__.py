"""Core de color-namer.

Por qué:
- Agrupa dominio, contratos, configuración y servicios puros.
- No conoce la terminal ni el cliente HTTP concreto.
"""

__version__ = "0.1.0"
