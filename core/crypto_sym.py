# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-CBC con relleno PKCS#7 para cifrado simétrico.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico por bloques para proteger texto."""

import os
from typing import Tuple

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

IV_SIZE = 16  # 128 bits, tamaño de bloque de AES
BLOCK_SIZE_BITS = 128


def aes_cbc_encrypt_with_key(key: bytes, plaintext: bytes) -> Tuple[bytes, bytes]:
    """Cifra datos con AES-CBC y relleno PKCS#7 usando un IV aleatorio.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar.

    Returns:
        Tuple[bytes, bytes]: Ciphertext e IV generado.

    """

    iv = os.urandom(IV_SIZE)
    padder = padding.PKCS7(BLOCK_SIZE_BITS).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    return ciphertext, iv


def aes_cbc_decrypt_with_key(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Descifra datos AES-CBC y elimina el relleno PKCS#7.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        iv (bytes): Vector de inicialización de 128 bits.
        ciphertext (bytes): Datos cifrados.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        ValueError: Si el ciphertext no es múltiplo del bloque o el relleno
        no es válido (contraseña incorrecta o datos alterados).

    """

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(BLOCK_SIZE_BITS).unpadder()
    return unpadder.update(padded) + unpadder.finalize()
