# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete core.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "cipher_codec",
    "config",
    "crypto_kdf",
    "crypto_sym",
    "errors",
    "models",
    "password_policy",
    "session",
    "settings",
]
