# --------------------------------------------------------------
# File: test_services.py
# Description: Pruebas de la fachada pública de cifrado y validación.
# --------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor

import pytest

from api import services
from core.errors import CipherError, DecryptionFailed, InvalidArgument, MalformedEnvelope
from core.models import StrengthTier


def test_facade_roundtrip():
    envelope = services.encrypt("hello", "pw")
    assert services.decrypt(envelope, "pw") == "hello"


def test_facade_errors_share_base():
    """Todos los fallos del núcleo comparten la excepción base."""
    with pytest.raises(CipherError):
        services.encrypt("", "pw")
    with pytest.raises(MalformedEnvelope):
        services.decrypt("not-base64!", "pw")
    with pytest.raises(DecryptionFailed):
        services.decrypt(services.encrypt("hello", "pw1"), "pw2")
    with pytest.raises(InvalidArgument):
        services.validate_password(None)


def test_facade_validate_password():
    result = services.validate_password("MyVeryStrongPassword123!@#")
    assert result.is_valid
    assert result.strength_tier is StrengthTier.VERY_STRONG


def test_concurrent_calls_are_independent():
    """Las operaciones no comparten estado y pueden ejecutarse en paralelo."""
    texts = [f"mensaje {i}" for i in range(6)]
    with ThreadPoolExecutor(max_workers=3) as pool:
        envelopes = list(pool.map(lambda t: services.encrypt(t, "pw"), texts))
        recovered = list(pool.map(lambda e: services.decrypt(e, "pw"), envelopes))
    assert recovered == texts
    assert len(set(envelopes)) == len(envelopes)
