"""User Role Enum."""

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role granted to a user on creation."""

    USER = "ROLE_USER"
    CLIENT = "ROLE_CLIENT"
    MASTER = "ROLE_MASTER"

    @classmethod
    def from_requested(cls, requested: str | None) -> "Role":
        """Map the role name sent by the client to a stored role.

        Unknown or missing names fall back to ROLE_USER.
        """
        mapping = {
            "client": cls.CLIENT,
            "master": cls.MASTER,
        }
        if not requested:
            return cls.USER
        return mapping.get(requested.strip().lower(), cls.USER)
