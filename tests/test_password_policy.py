# --------------------------------------------------------------
# File: test_password_policy.py
# Description: Pruebas para la evaluación de robustez de contraseñas.
# --------------------------------------------------------------

import pytest

from core.errors import InvalidArgument
from core.models import StrengthTier
from core.password_policy import (
    MSG_COMMON,
    MSG_NO_DIGIT,
    MSG_NO_LOWER,
    MSG_NO_SPECIAL,
    MSG_NO_UPPER,
    MSG_ONLY_NUMBERS,
    MSG_REPEAT,
    MSG_TOO_SHORT,
    has_long_repetition,
    strength_score,
    tier_for_score,
    validate_password,
)


def test_empty_password():
    """La cadena vacía devuelve el resultado fijo sin puntuar.

    Returns:
        None: Las aserciones revisan todos los campos del resultado.
    """
    result = validate_password("")
    assert result.is_valid is False
    assert result.strength_score == 0
    assert result.strength_tier is StrengthTier.VERY_WEAK
    assert result.messages == ("Password cannot be empty",)


def test_none_password_raises():
    with pytest.raises(InvalidArgument):
        validate_password(None)


def test_short_numeric_password():
    result = validate_password("123")
    assert not result.is_valid
    assert result.strength_tier is StrengthTier.VERY_WEAK
    assert result.strength_score == 12
    assert result.messages == (MSG_TOO_SHORT, MSG_ONLY_NUMBERS)


def test_only_numbers_password():
    """Solo dígitos: válida pero débil y con un único mensaje."""
    result = validate_password("12345678")
    assert result.is_valid
    assert result.strength_score == 25
    assert result.strength_tier is StrengthTier.WEAK
    assert result.messages == (MSG_ONLY_NUMBERS,)


def test_strong_password():
    result = validate_password("Password123!")
    assert result.is_valid
    assert result.strength_score == 75
    assert result.strength_tier is StrengthTier.STRONG
    assert result.messages == (MSG_COMMON,)


def test_very_strong_password():
    result = validate_password("MyVeryStrongPassword123!@#")
    assert result.is_valid
    assert result.strength_score >= 90
    assert result.strength_tier is StrengthTier.VERY_STRONG


@pytest.mark.parametrize(
    "pw, tier",
    [
        ("password", StrengthTier.WEAK),
        ("Password", StrengthTier.WEAK),
        ("PASSWORD", StrengthTier.WEAK),
        ("password123", StrengthTier.MEDIUM),
        ("Password123", StrengthTier.MEDIUM),
        ("Password123!", StrengthTier.STRONG),
        ("MyPassword123!", StrengthTier.STRONG),
        ("MyVeryStrongPassword123!@#", StrengthTier.VERY_STRONG),
    ],
)
def test_tiers(pw, tier):
    """Comprueba el nivel asignado a distintas contraseñas de longitud válida.

    Args:
        pw (str): Contraseña candidata.
        tier (StrengthTier): Nivel esperado.
    """
    result = validate_password(pw)
    assert result.is_valid
    assert result.strength_tier is tier


def test_short_password_is_invalid_regardless_of_score():
    result = validate_password("Ab1!xY")
    assert not result.is_valid
    assert result.messages[0] == MSG_TOO_SHORT
    assert result.strength_score > 0


def test_missing_categories_in_order():
    result = validate_password("zzzz yyyy")
    assert result.messages == (MSG_NO_UPPER, MSG_NO_DIGIT, MSG_REPEAT)
    result = validate_password("ABCDEFGHIJ")
    assert result.messages == (MSG_NO_LOWER, MSG_NO_DIGIT, MSG_NO_SPECIAL, MSG_COMMON)


def test_repetition_penalty():
    assert has_long_repetition("xaaay")
    assert not has_long_repetition("xaay")
    assert strength_score("Qwaaa1!xyz") == strength_score("Qwab11!xyz") - 5


def test_length_points_are_truncated():
    # 9 * 2.5 = 22.5 -> 22
    assert strength_score("zxcvbnmlk") == 22 + 10


def test_score_upper_bound():
    # 25 + 45 + 10 + 15: todas las bonificaciones sin penalizaciones.
    assert strength_score("Aa1!" * 10) == 95
    # 7 + 10 - 5 por la repetición.
    assert strength_score("aaa") == 12


def test_tier_boundaries():
    assert tier_for_score(19) is StrengthTier.VERY_WEAK
    assert tier_for_score(20) is StrengthTier.WEAK
    assert tier_for_score(40) is StrengthTier.MEDIUM
    assert tier_for_score(65) is StrengthTier.STRONG
    assert tier_for_score(85) is StrengthTier.VERY_STRONG


def test_validate_is_pure():
    assert validate_password("Password123!") == validate_password("Password123!")
