"""
Supabase JWT authentication

Bearer tokens issued by Supabase Auth are verified against the project's
JWKS (ES256 or RS256). The key set is cached for an hour; a stale copy is
used when Supabase cannot be reached.
"""
import logging
import time
from typing import Optional

import httpx
from fastapi import Header, HTTPException
from jose import jwk, jwt

from cim import config

logger = logging.getLogger(__name__)

JWT_AUDIENCE = "authenticated"
JWT_ALGORITHMS = ["ES256", "RS256"]
JWKS_CACHE_SECONDS = 60 * 60


class SupabaseJwtVerifier:
    def __init__(self, supabase_url: Optional[str] = None, cache_seconds: int = JWKS_CACHE_SECONDS):
        self._supabase_url = supabase_url
        self._cache_seconds = cache_seconds
        self._jwks: Optional[dict] = None
        self._fetched_at: float = 0

    @property
    def supabase_url(self) -> str:
        url = self._supabase_url or config.SUPABASE_URL
        if not url:
            raise ValueError("SUPABASE_URL must be set")
        return url.rstrip("/")

    @property
    def issuer(self) -> str:
        return f"{self.supabase_url}/auth/v1"

    @property
    def jwks_url(self) -> str:
        return f"{self.issuer}/.well-known/jwks.json"

    async def jwks(self) -> dict:
        now = time.time()
        if self._jwks and (now - self._fetched_at) < self._cache_seconds:
            return self._jwks

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.jwks_url, timeout=10.0)
                response.raise_for_status()
        except Exception as e:
            logger.error(f"Failed to fetch JWKS: {e}")
            if self._jwks:
                logger.warning("Using expired JWKS cache")
                return self._jwks
            raise HTTPException(status_code=500, detail="Failed to fetch authentication keys")

        self._jwks = response.json()
        self._fetched_at = now
        logger.info("JWKS refreshed")
        return self._jwks

    async def verify(self, token: str) -> dict:
        """Decoded payload of a valid token; HTTPException(401) otherwise"""
        try:
            header = jwt.get_unverified_header(token)
            kid = header.get("kid")
            if not kid:
                raise HTTPException(status_code=401, detail="Token missing key ID (kid)")

            keys = (await self.jwks()).get("keys", [])
            key_data = next((key for key in keys if key.get("kid") == kid), None)
            if key_data is None:
                raise HTTPException(status_code=401, detail=f"Key with ID '{kid}' not found in JWKS")

            payload = jwt.decode(
                token,
                jwk.construct(key_data),
                algorithms=JWT_ALGORITHMS,
                audience=JWT_AUDIENCE,
                issuer=self.issuer,
            )
            logger.debug(f"Verified token for {payload.get('sub')}")
            return payload
        except HTTPException:
            raise
        except jwt.ExpiredSignatureError:
            raise HTTPException(status_code=401, detail="Token has expired")
        except jwt.JWTClaimsError as e:
            raise HTTPException(status_code=401, detail=f"Token validation failed: {e}")
        except jwt.JWTError as e:
            raise HTTPException(status_code=401, detail=f"Invalid token: {e}")
        except Exception as e:
            logger.error(f"Token verification error: {e}", exc_info=True)
            raise HTTPException(status_code=401, detail="Token verification failed")


verifier = SupabaseJwtVerifier()


def parse_bearer(authorization: Optional[str]) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Authorization header missing")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header format. Expected 'Bearer <token>'",
        )
    return token


async def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    """FastAPI dependency returning the authenticated user's id"""
    payload = await verifier.verify(parse_bearer(authorization))
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token: no user ID")
    return user_id
