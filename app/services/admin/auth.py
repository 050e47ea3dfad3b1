"""Admin authentication - password login issuing signed session tokens."""

import base64
import hashlib
import hmac
import json
import secrets
import time
from typing import Any

from loguru import logger

from app.errors import AuthError

ALGO = "HS256"
SUBJECT = "admin"
MIN_SECRET_LENGTH = 32


def _b64u(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64ud(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _sign(secret: bytes, data: bytes) -> str:
    return _b64u(hmac.new(secret, data, hashlib.sha256).digest())


class AdminAuth:
    """Checks the admin password once and then trusts signed tokens."""

    def __init__(self, password: str | None, secret: str | None, ttl: int = 3600):
        self._password = password
        self._ttl = ttl
        if not password:
            logger.warning("ADMIN_PASSWORD not set - admin endpoints disabled")

        if secret and len(secret) >= MIN_SECRET_LENGTH:
            self._secret = secret.encode()
        else:
            # Tokens from a weak or missing secret never outlive the process
            if password:
                logger.warning(
                    "SESSION_SECRET unset or shorter than {} chars - using a per-process random secret",
                    MIN_SECRET_LENGTH,
                )
            self._secret = secrets.token_bytes(32)

    @property
    def enabled(self) -> bool:
        return bool(self._password)

    def issue_token(self, now: int | None = None) -> dict[str, Any]:
        now = int(time.time()) if now is None else now
        payload = {
            "sub": SUBJECT,
            "iat": now,
            "exp": now + self._ttl,
            "nonce": _b64u(secrets.token_bytes(8)),
        }
        header = {"typ": "JWT", "alg": ALGO}
        h = _b64u(json.dumps(header, separators=(",", ":")).encode())
        p = _b64u(json.dumps(payload, separators=(",", ":")).encode())
        sig = _sign(self._secret, f"{h}.{p}".encode())
        return {"token": f"{h}.{p}.{sig}", "expires": payload["exp"]}

    def login(self, password: str) -> dict[str, Any]:
        """Exchange the admin password for a session token."""
        if not self.enabled or not hmac.compare_digest(password.encode(), self._password.encode()):
            logger.warning("Admin login rejected")
            raise AuthError("Invalid password")
        logger.info("Admin login")
        return self.issue_token()

    def verify(self, token: str | None) -> dict[str, Any]:
        """Payload of a valid, unexpired token; AuthError otherwise."""
        if not token or not self.enabled:
            raise AuthError("Admin token required")
        parts = token.split(".")
        if len(parts) != 3:
            raise AuthError("Malformed token")
        h, p, sig = parts

        expected = _sign(self._secret, f"{h}.{p}".encode())
        if not hmac.compare_digest(sig.encode(), expected.encode()):
            raise AuthError("Invalid token")

        try:
            payload = json.loads(_b64ud(p))
        except ValueError as e:
            raise AuthError("Malformed token") from e
        if not isinstance(payload, dict):
            raise AuthError("Malformed token")
        if payload.get("sub") != SUBJECT:
            raise AuthError("Invalid token")
        exp = payload.get("exp")
        if not isinstance(exp, int):
            raise AuthError("Malformed token")
        if exp < int(time.time()):
            raise AuthError("Token expired")
        return payload
