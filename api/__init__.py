# --------------------------------------------------------------
# File: __init__.py
# Description: Fachada pública de operaciones para la interfaz.
# --------------------------------------------------------------
"""Inicializa el paquete `api` con los servicios expuestos a la interfaz."""

__all__ = ["services"]
