# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves simétricas mediante PBKDF2-HMAC-SHA256.
# --------------------------------------------------------------
"""Funciones de derivación de claves a partir de la contraseña del usuario."""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from core.errors import InvalidArgument

# Parámetros fijos: deben coincidir entre cifrado y descifrado.
PBKDF2_ITERATIONS = 100_000
KEY_SIZE = 32  # 256 bits para AES-256
SALT_SIZE = 32  # 256 bits


def derive_key(
    password: str,
    salt: bytes,
    *,
    iterations: int = PBKDF2_ITERATIONS,
    length: int = KEY_SIZE,
) -> bytes:
    """Deriva una clave de cifrado usando PBKDF2-HMAC-SHA256.

    Args:
        password (str): Contraseña introducida por el usuario.
        salt (bytes): Salt aleatoria asociada al sobre cifrado.
        iterations (int): Número de iteraciones, nunca inferior a 100 000.
        length (int): Longitud en bytes de la clave resultante.

    Returns:
        bytes: Clave simétrica derivada.

    Raises:
        InvalidArgument: Si la contraseña está vacía o las iteraciones son
        inferiores al mínimo.

    """
    if not password:
        raise InvalidArgument("La contraseña no puede estar vacía.")
    if iterations < PBKDF2_ITERATIONS:
        raise InvalidArgument(
            f"PBKDF2 requiere al menos {PBKDF2_ITERATIONS} iteraciones."
        )

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=length,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(password.encode("utf-8"))
