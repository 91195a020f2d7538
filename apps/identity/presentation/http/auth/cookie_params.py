"""Cookie Parameters.

Writes and clears the refresh-token cookie.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import Response

    from apps.identity.application.token.dto import RefreshCookie


def apply_refresh_cookie(response: "Response", cookie: "RefreshCookie") -> None:
    """Set the refresh-token cookie described by `cookie`."""
    params = {
        "path": cookie.path,
        "httponly": cookie.httponly,
        "secure": cookie.secure,
        "samesite": cookie.samesite,
    }
    if cookie.domain:
        params["domain"] = cookie.domain

    response.set_cookie(
        key=cookie.name,
        value=cookie.value,
        max_age=cookie.max_age,
        expires=cookie.expires,
        **params,
    )


def clear_refresh_cookie(
    response: "Response",
    *,
    name: str,
    path: str,
    domain: str | None = None,
    secure: bool = True,
    samesite: str = "lax",
) -> None:
    """Expire the refresh-token cookie; path and domain must match the original."""
    params = {"path": path, "secure": secure, "samesite": samesite}
    if domain:
        params["domain"] = domain
    response.delete_cookie(name, **params)
