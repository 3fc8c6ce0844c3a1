# --------------------------------------------------------------
# File: test_crypto_kdf.py
# Description: Pruebas de la derivación de claves PBKDF2-HMAC-SHA256.
# --------------------------------------------------------------

import os

import pytest

from core.crypto_kdf import KEY_SIZE, PBKDF2_ITERATIONS, derive_key
from core.errors import InvalidArgument


def test_derive_key_is_deterministic():
    """La misma contraseña y salt producen la misma clave de 256 bits."""
    salt = os.urandom(32)
    k1 = derive_key("secreto", salt)
    k2 = derive_key("secreto", salt)
    assert k1 == k2
    assert len(k1) == KEY_SIZE


def test_derive_key_depends_on_salt_and_password():
    salt = os.urandom(32)
    base = derive_key("secreto", salt)
    assert derive_key("secreto", os.urandom(32)) != base
    assert derive_key("secreta", salt) != base


def test_derive_key_rejects_low_iterations():
    """Comprueba que no se pueda rebajar el coste mínimo de PBKDF2."""
    with pytest.raises(InvalidArgument):
        derive_key("secreto", os.urandom(32), iterations=PBKDF2_ITERATIONS - 1)


def test_derive_key_rejects_empty_password():
    with pytest.raises(InvalidArgument):
        derive_key("", os.urandom(32))
