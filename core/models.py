# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del sobre cifrado y del resultado de validación.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from __future__ import annotations

import base64
import binascii
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from core.crypto_kdf import SALT_SIZE
from core.crypto_sym import IV_SIZE
from core.errors import MalformedEnvelope

MIN_ENVELOPE_SIZE = SALT_SIZE + IV_SIZE


class Envelope(BaseModel):
    """Sobre cifrado autocontenido: ``salt ‖ iv ‖ ciphertext``.

    Attributes:
        salt (bytes): Salt de 32 bytes usada por PBKDF2.
        iv (bytes): Vector de inicialización de 16 bytes.
        ciphertext (bytes): Datos cifrados con AES-CBC.

    """

    model_config = ConfigDict(frozen=True)

    salt: bytes = Field(min_length=SALT_SIZE, max_length=SALT_SIZE)
    iv: bytes = Field(min_length=IV_SIZE, max_length=IV_SIZE)
    ciphertext: bytes

    def to_bytes(self) -> bytes:
        return self.salt + self.iv + self.ciphertext

    def to_base64(self) -> str:
        """Codifica el sobre en Base64 estándar con relleno."""

        return base64.b64encode(self.to_bytes()).decode("ascii")

    @classmethod
    def from_base64(cls, value: str) -> Envelope:
        """Decodifica y separa un sobre en sus tres componentes.

        Args:
            value (str): Representación Base64 del sobre.

        Returns:
            Envelope: Sobre con salt, IV y ciphertext.

        Raises:
            MalformedEnvelope: Si el Base64 no es válido o el contenido es más
            corto que salt + IV.

        """

        # Se ignoran espacios y saltos de línea, como al pegar el sobre.
        compact = "".join(value.split())
        try:
            raw = base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise MalformedEnvelope("Formato Base64 no válido.") from exc

        if len(raw) < MIN_ENVELOPE_SIZE:
            raise MalformedEnvelope("Formato de datos cifrados no válido.")

        return cls(
            salt=raw[:SALT_SIZE],
            iv=raw[SALT_SIZE:MIN_ENVELOPE_SIZE],
            ciphertext=raw[MIN_ENVELOPE_SIZE:],
        )


class StrengthTier(str, Enum):
    """Niveles discretos de robustez de una contraseña."""

    VERY_WEAK = "VeryWeak"
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"
    VERY_STRONG = "VeryStrong"


class PasswordValidationResult(BaseModel):
    """Resultado de evaluar una contraseña candidata.

    Attributes:
        is_valid (bool): Cumple la longitud mínima.
        strength_score (int): Puntuación entre 0 y 100.
        strength_tier (StrengthTier): Nivel derivado de la puntuación.
        messages (Tuple[str, ...]): Recomendaciones ordenadas.

    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool = False
    strength_score: int = Field(default=0, ge=0, le=100)
    strength_tier: StrengthTier = StrengthTier.VERY_WEAK
    messages: Tuple[str, ...] = ()
