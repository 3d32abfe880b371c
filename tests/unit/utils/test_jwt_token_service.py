import base64
import json

import pytest
from jose import jwt

from yoga_api.api.utils.jwt import JwtTokenService
from yoga_api.domain.entities import AuthenticatedPrincipal

SECRET = "unit-test-secret"
EXPIRATION_MS = 60_000
ISSUED_AT_MS = 1_700_000_000_123


class FakeClock:
    def __init__(self, now_ms: int):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms


@pytest.fixture
def clock():
    return FakeClock(ISSUED_AT_MS)


@pytest.fixture
def tokens(clock):
    return JwtTokenService(SECRET, EXPIRATION_MS, clock=clock)


@pytest.fixture
def principal():
    return AuthenticatedPrincipal(
        id=1,
        username="yoga@studio.com",
        first_name="Admin",
        last_name="Admin",
        admin=True,
        password="$2b$04$hash",
    )


def test_issued_token_carries_username_as_subject(tokens, principal):
    token = tokens.issue(principal)

    assert tokens.verify(token) is True
    assert tokens.extract_subject(token) == "yoga@studio.com"


def test_issued_token_has_millisecond_iat_and_exp(tokens, principal):
    token = tokens.issue(principal)
    claims = jwt.get_unverified_claims(token)

    assert round(claims["iat"] * 1000) == ISSUED_AT_MS
    assert round(claims["exp"] * 1000) == ISSUED_AT_MS + EXPIRATION_MS


def test_token_valid_until_just_before_expiry(tokens, clock, principal):
    token = tokens.issue(principal)

    clock.now_ms = ISSUED_AT_MS + EXPIRATION_MS - 1
    assert tokens.verify(token) is True


def test_token_expired_at_exact_expiry(tokens, clock, principal):
    token = tokens.issue(principal)

    clock.now_ms = ISSUED_AT_MS + EXPIRATION_MS
    assert tokens.verify(token) is False


def test_token_expired_one_millisecond_after_expiry(tokens, clock, principal):
    token = tokens.issue(principal)

    clock.now_ms = ISSUED_AT_MS + EXPIRATION_MS + 1
    assert tokens.verify(token) is False


def test_subject_still_readable_from_expired_token(tokens, clock, principal):
    token = tokens.issue(principal)

    clock.now_ms = ISSUED_AT_MS + EXPIRATION_MS + 10_000
    assert tokens.extract_subject(token) == "yoga@studio.com"


def test_token_signed_with_other_secret_is_invalid(clock, principal):
    foreign = JwtTokenService("another-secret", EXPIRATION_MS, clock=clock)
    ours = JwtTokenService(SECRET, EXPIRATION_MS, clock=clock)

    assert ours.verify(foreign.issue(principal)) is False


def test_tampered_payload_is_invalid(tokens, principal):
    header, payload, signature = tokens.issue(principal).split(".")
    claims = json.loads(base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))
    claims["sub"] = "intruder@studio.com"
    forged = base64.urlsafe_b64encode(json.dumps(claims).encode()).rstrip(b"=").decode()

    assert tokens.verify(f"{header}.{forged}.{signature}") is False


@pytest.mark.parametrize(
    "token",
    ["", "not-a-jwt", "a.b.c", "eyJhbGciOiJIUzI1NiJ9.e30."],
)
def test_malformed_tokens_are_invalid(tokens, token):
    assert tokens.verify(token) is False


def test_token_without_subject_is_invalid(tokens):
    token = jwt.encode({"exp": (ISSUED_AT_MS + 1000) / 1000}, SECRET, algorithm="HS256")

    assert tokens.verify(token) is False


def test_token_without_expiry_is_invalid(tokens):
    token = jwt.encode({"sub": "yoga@studio.com"}, SECRET, algorithm="HS256")

    assert tokens.verify(token) is False
