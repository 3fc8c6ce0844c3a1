# --------------------------------------------------------------
# File: cipher_codec.py
# Description: Cifrado y descifrado de texto protegido con contraseña.
# --------------------------------------------------------------
"""Transforma texto y contraseña en un sobre Base64 transportable y viceversa.

El esquema no incluye etiqueta de autenticación: una contraseña incorrecta solo
se detecta al validar el relleno PKCS#7 (y la decodificación UTF-8).
"""

import os

from core.crypto_kdf import SALT_SIZE, derive_key
from core.crypto_sym import aes_cbc_decrypt_with_key, aes_cbc_encrypt_with_key
from core.errors import DecryptionFailed, EncryptionFailed, InvalidArgument
from core.models import Envelope


def encrypt_text(text: str, password: str) -> str:
    """Cifra un texto UTF-8 con una clave derivada de la contraseña.

    Args:
        text (str): Texto en claro, no vacío.
        password (str): Contraseña, no vacía.

    Returns:
        str: Sobre ``salt ‖ iv ‖ ciphertext`` codificado en Base64.

    Raises:
        InvalidArgument: Si el texto o la contraseña están vacíos.
        EncryptionFailed: Si la primitiva de cifrado falla.

    """
    if not text:
        raise InvalidArgument("El texto no puede estar vacío.")
    if not password:
        raise InvalidArgument("La contraseña no puede estar vacía.")

    # Salt e IV nuevos en cada llamada.
    salt = os.urandom(SALT_SIZE)
    try:
        key = derive_key(password, salt)
        ciphertext, iv = aes_cbc_encrypt_with_key(key, text.encode("utf-8"))
        envelope = Envelope(salt=salt, iv=iv, ciphertext=ciphertext)
    except Exception as exc:
        raise EncryptionFailed("No se ha podido cifrar el texto.") from exc

    return envelope.to_base64()


def decrypt_text(envelope: str, password: str) -> str:
    """Descifra un sobre Base64 y devuelve el texto original.

    Args:
        envelope (str): Sobre producido por :func:`encrypt_text`.
        password (str): Contraseña usada al cifrar.

    Returns:
        str: Texto original.

    Raises:
        InvalidArgument: Si el sobre o la contraseña están vacíos.
        MalformedEnvelope: Si el sobre no es Base64 o es demasiado corto.
        DecryptionFailed: Si la contraseña es incorrecta o los datos están
        corruptos.

    """
    if not envelope:
        raise InvalidArgument("El texto cifrado no puede estar vacío.")
    if not password:
        raise InvalidArgument("La contraseña no puede estar vacía.")

    parsed = Envelope.from_base64(envelope)
    key = derive_key(password, parsed.salt)

    try:
        plaintext = aes_cbc_decrypt_with_key(key, parsed.iv, parsed.ciphertext)
        return plaintext.decode("utf-8")
    except ValueError as exc:
        # UnicodeDecodeError también es ValueError.
        raise DecryptionFailed("No se ha podido descifrar el texto.") from exc
