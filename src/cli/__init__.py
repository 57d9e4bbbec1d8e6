"""CLI (Typer + Rich).

Por qué separado del Core:
- Aquí solo se leen opciones, se pinta la salida y se fija el exit code.
"""
