"""Servicios del Core: parseo de colores y orquestación del pipeline."""
