# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores del cifrado de texto y del evaluador de contraseñas.
# --------------------------------------------------------------
"""Excepciones tipadas que el núcleo devuelve al llamador."""


class CipherError(Exception):
    """Base común de todos los fallos del núcleo criptográfico."""


class InvalidArgument(CipherError, ValueError):
    """Entrada obligatoria vacía o ausente."""


class MalformedEnvelope(CipherError):
    """El sobre no es Base64 válido o no contiene salt + IV completos."""


class EncryptionFailed(CipherError):
    """Fallo inesperado de la primitiva de cifrado."""


class DecryptionFailed(CipherError):
    """Fallo de descifrado: passphrase incorrecta, relleno o datos corruptos."""
