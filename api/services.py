# --------------------------------------------------------------
# File: services.py
# Description: Fachada pública del cifrado de texto y la evaluación de contraseñas.
# --------------------------------------------------------------
"""Operaciones expuestas a la interfaz: cifrar, descifrar y validar contraseñas."""

from typing import Optional

from core.cipher_codec import decrypt_text, encrypt_text
from core.models import PasswordValidationResult
from core.password_policy import validate_password as _validate_password


def encrypt(text: str, password: str) -> str:
    """Cifra ``text`` con ``password`` y devuelve el sobre Base64.

    Raises:
        InvalidArgument: Si alguna entrada está vacía.
        EncryptionFailed: Si falla la primitiva de cifrado.
    """

    return encrypt_text(text, password)


def decrypt(envelope: str, password: str) -> str:
    """Recupera el texto original de un sobre Base64.

    Raises:
        InvalidArgument: Si alguna entrada está vacía.
        MalformedEnvelope: Si el sobre está corrupto o es ajeno.
        DecryptionFailed: Si la contraseña es incorrecta.
    """

    return decrypt_text(envelope, password)


def validate_password(password: Optional[str]) -> PasswordValidationResult:
    """Evalúa la robustez de ``password``.

    Raises:
        InvalidArgument: Solo si ``password`` es ``None``.
    """

    return _validate_password(password)
