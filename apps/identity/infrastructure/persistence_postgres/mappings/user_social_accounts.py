"""UserSocialAccount ORM Mapping."""

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    ForeignKey,
    Identity,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.sql import func

from apps.identity.infrastructure.persistence_postgres.registry import SCHEMA, mapper_registry

user_social_accounts_table = Table(
    "user_social_accounts",
    mapper_registry.metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column(
        "user_id",
        BigInteger,
        ForeignKey(f"{SCHEMA}.users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("provider", Text, nullable=False),
    Column("provider_user_id", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("last_login_at", DateTime(timezone=True)),
    UniqueConstraint("provider", "provider_user_id", name="uq_user_social_accounts_identity"),
    UniqueConstraint("user_id", "provider", name="uq_user_social_accounts_user_provider"),
)


def start_user_social_accounts_mapper() -> None:
    from apps.identity.domain.entities.user_social_account import UserSocialAccount

    if hasattr(UserSocialAccount, "__mapper__"):
        return

    mapper_registry.map_imperatively(UserSocialAccount, user_social_accounts_table)
