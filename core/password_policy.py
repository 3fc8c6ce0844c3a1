# --------------------------------------------------------------
# File: password_policy.py
# Description: Evaluación de robustez de contraseñas con puntuación y recomendaciones.
# --------------------------------------------------------------
"""Utilidades para evaluar la robustez de contraseñas antes de cifrar."""

from __future__ import annotations

import re
from typing import List, Optional

from core.errors import InvalidArgument
from core.models import PasswordValidationResult, StrengthTier

MIN_LENGTH = 8

COMMON_PATTERNS = ("password", "123", "abc", "qwerty", "admin")

MSG_EMPTY = "Password cannot be empty"
MSG_TOO_SHORT = "Password must be at least 8 characters long"
MSG_ONLY_NUMBERS = "Password contains only numbers"
MSG_NO_LOWER = "Include lowercase letters."
MSG_NO_UPPER = "Include uppercase letters."
MSG_NO_DIGIT = "Include numbers."
MSG_NO_SPECIAL = "Include special characters."
MSG_COMMON = "Avoid common patterns (e.g., 'password', '123')."
MSG_REPEAT = "Avoid repeating characters (e.g., 'aaa')."

# Umbral superior (exclusivo) de cada nivel; el resto es VERY_STRONG.
TIER_THRESHOLDS = (
    (20, StrengthTier.VERY_WEAK),
    (40, StrengthTier.WEAK),
    (65, StrengthTier.MEDIUM),
    (85, StrengthTier.STRONG),
)


def has_lowercase(password: str) -> bool:
    return any(char.islower() for char in password)


def has_uppercase(password: str) -> bool:
    return any(char.isupper() for char in password)


def has_digit(password: str) -> bool:
    return any(char.isdigit() for char in password)


def has_special(password: str) -> bool:
    """Detecta caracteres que no son ni letra ni dígito."""

    return any(not char.isalnum() for char in password)


def has_long_repetition(password: str, run: int = 3) -> bool:
    """Detecta un mismo carácter repetido ``run`` o más veces seguidas."""

    pattern = rf"(.)\1{{{run - 1},}}"
    return re.search(pattern, password, flags=re.DOTALL) is not None


def has_common_pattern(password: str) -> bool:
    lowered = password.lower()
    return any(pattern in lowered for pattern in COMMON_PATTERNS)


def strength_score(password: str) -> int:
    """Calcula la puntuación aditiva de la contraseña acotada a [0, 100].

    Args:
        password (str): Contraseña candidata.

    Returns:
        int: Puntuación entre 0 y 100.

    """

    length = len(password)
    score = int(min(length * 2.5, 25))

    if has_lowercase(password):
        score += 10
    if has_uppercase(password):
        score += 10
    if has_digit(password):
        score += 10
    if has_special(password):
        score += 15

    if length >= 12:
        score += 10
    if length >= 16:
        score += 15

    if has_long_repetition(password):
        score -= 5
    if has_common_pattern(password):
        score -= 5

    return max(0, min(100, score))


def tier_for_score(score: int) -> StrengthTier:
    for upper, tier in TIER_THRESHOLDS:
        if score < upper:
            return tier
    return StrengthTier.VERY_STRONG


def feedback_messages(password: str) -> List[str]:
    """Genera las recomendaciones ordenadas para mejorar la contraseña."""

    messages: List[str] = []
    if len(password) < MIN_LENGTH:
        messages.append(MSG_TOO_SHORT)

    lower = has_lowercase(password)
    upper = has_uppercase(password)
    special = has_special(password)
    if has_digit(password) and not lower and not upper and not special:
        messages.append(MSG_ONLY_NUMBERS)
        return messages

    if not lower:
        messages.append(MSG_NO_LOWER)
    if not upper:
        messages.append(MSG_NO_UPPER)
    if not has_digit(password):
        messages.append(MSG_NO_DIGIT)
    if not special:
        messages.append(MSG_NO_SPECIAL)

    if has_common_pattern(password):
        messages.append(MSG_COMMON)
    if has_long_repetition(password):
        messages.append(MSG_REPEAT)
    return messages


def validate_password(password: Optional[str]) -> PasswordValidationResult:
    """Evalúa la contraseña y devuelve validez, puntuación, nivel y mensajes.

    Args:
        password (Optional[str]): Contraseña propuesta por el usuario. La
            cadena vacía es una entrada válida (aunque no aceptable).

    Returns:
        PasswordValidationResult: Resultado inmutable de la evaluación.

    Raises:
        InvalidArgument: Si ``password`` es ``None``.

    """

    if password is None:
        raise InvalidArgument("La contraseña no puede ser None.")

    if not password:
        return PasswordValidationResult(messages=(MSG_EMPTY,))

    score = strength_score(password)
    return PasswordValidationResult(
        is_valid=len(password) >= MIN_LENGTH,
        strength_score=score,
        strength_tier=tier_for_score(score),
        messages=tuple(feedback_messages(password)),
    )
