"""Request credential helpers."""

from typing import Optional

from fastapi import Header


def _parse_bearer(header_value: Optional[str]) -> Optional[str]:
    """Extract the token from an `Authorization: Bearer <token>` value."""
    if not header_value:
        return None
    scheme, _, token = header_value.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def get_bearer_token(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> Optional[str]:
    return _parse_bearer(authorization)
