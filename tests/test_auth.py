"""Bearer token parsing and verification failures."""

import pytest
from fastapi import HTTPException
from jose import jwt

from cim.auth import SupabaseJwtVerifier, parse_bearer


def test_parse_bearer():
    assert parse_bearer("Bearer abc.def.ghi") == "abc.def.ghi"
    assert parse_bearer("bearer token") == "token"


@pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer"])
def test_parse_bearer_rejects_bad_headers(header):
    with pytest.raises(HTTPException) as exc_info:
        parse_bearer(header)

    assert exc_info.value.status_code == 401


async def test_malformed_token_is_401():
    verifier = SupabaseJwtVerifier("https://project.supabase.co")

    with pytest.raises(HTTPException) as exc_info:
        await verifier.verify("not-a-jwt")

    assert exc_info.value.status_code == 401


async def test_token_without_key_id_is_401():
    verifier = SupabaseJwtVerifier("https://project.supabase.co")
    token = jwt.encode({"sub": "user-1"}, "secret", algorithm="HS256")

    with pytest.raises(HTTPException) as exc_info:
        await verifier.verify(token)

    assert exc_info.value.detail == "Token missing key ID (kid)"


def test_issuer_and_jwks_url():
    verifier = SupabaseJwtVerifier("https://project.supabase.co/")

    assert verifier.issuer == "https://project.supabase.co/auth/v1"
    assert verifier.jwks_url == "https://project.supabase.co/auth/v1/.well-known/jwks.json"
