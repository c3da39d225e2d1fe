from datetime import datetime, timedelta, timezone

import jwt
import pytest

from order_cart.domain.errors import Unauthenticated
from order_cart.services.token_verifier import TokenVerifier
from tests.conftest import JWT_TEST_SECRET


@pytest.fixture
def verifier():
    return TokenVerifier(secret=JWT_TEST_SECRET, algorithm="HS256", owner_claim="usuarioId")


def test_returns_owner_from_claim(verifier, make_token):
    assert verifier.verify(f"Bearer {make_token('U1')}") == "U1"


def test_scheme_is_case_insensitive(verifier, make_token):
    assert verifier.verify(f"bearer {make_token('U1')}") == "U1"


def test_numeric_owner_is_stringified(verifier, make_token):
    assert verifier.verify(f"Bearer {make_token(42)}") == "42"


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Basic abc", "token"])
def test_rejects_missing_or_malformed_header(verifier, header):
    with pytest.raises(Unauthenticated):
        verifier.verify(header)


def test_rejects_bad_signature(verifier):
    token = jwt.encode({"usuarioId": "U1"}, "another-secret", algorithm="HS256")

    with pytest.raises(Unauthenticated):
        verifier.verify(f"Bearer {token}")


def test_rejects_expired_token(verifier, make_token):
    token = make_token("U1", exp=datetime.now(timezone.utc) - timedelta(minutes=1))

    with pytest.raises(Unauthenticated):
        verifier.verify(f"Bearer {token}")


def test_rejects_token_without_owner_claim(verifier):
    token = jwt.encode({"sub": "U1"}, JWT_TEST_SECRET, algorithm="HS256")

    with pytest.raises(Unauthenticated) as exc_info:
        verifier.verify(f"Bearer {token}")

    assert exc_info.value.message == "Invalid token payload"
