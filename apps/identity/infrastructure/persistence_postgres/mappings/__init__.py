"""ORM Mappings.

Maps domain entities onto tables.
"""

from apps.identity.infrastructure.persistence_postgres.mappings.refresh_tokens import (
    refresh_tokens_table,
    start_refresh_tokens_mapper,
)
from apps.identity.infrastructure.persistence_postgres.mappings.user_social_accounts import (
    start_user_social_accounts_mapper,
    user_social_accounts_table,
)
from apps.identity.infrastructure.persistence_postgres.mappings.users import (
    start_users_mapper,
    users_table,
)


def start_all_mappers() -> None:
    """Start every mapper."""
    start_users_mapper()
    start_user_social_accounts_mapper()
    start_refresh_tokens_mapper()


__all__ = [
    "refresh_tokens_table",
    "user_social_accounts_table",
    "users_table",
    "start_all_mappers",
]
