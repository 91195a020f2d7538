"""RefreshToken ORM Mapping.

token_hash: VARCHAR(64), hex SHA-256 digest of the token value.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    ForeignKey,
    Identity,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.sql import func

from apps.identity.infrastructure.persistence_postgres.registry import SCHEMA, mapper_registry

refresh_tokens_table = Table(
    "refresh_tokens",
    mapper_registry.metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column(
        "user_id",
        BigInteger,
        ForeignKey(f"{SCHEMA}.users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("token_hash", String(64), nullable=False),
    Column("expires_at", DateTime(timezone=True), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    UniqueConstraint("token_hash", name="uq_refresh_tokens_token_hash"),
)


def start_refresh_tokens_mapper() -> None:
    from apps.identity.domain.entities.refresh_token import RefreshToken

    if hasattr(RefreshToken, "__mapper__"):
        return

    mapper_registry.map_imperatively(RefreshToken, refresh_tokens_table)
