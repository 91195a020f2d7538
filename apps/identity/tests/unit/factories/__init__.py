"""In-memory test doubles and builders."""

from apps.identity.tests.unit.factories.profiles import make_profile
from apps.identity.tests.unit.factories.stores import (
    InMemoryRefreshTokenStore,
    InMemoryStateStore,
    InMemoryUserStore,
)

__all__ = [
    "InMemoryRefreshTokenStore",
    "InMemoryStateStore",
    "InMemoryUserStore",
    "make_profile",
]
