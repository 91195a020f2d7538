"""Users ORM Mapping.

Type rules:
    - TEXT by default
    - VARCHAR only where a standard fixes the length
        - email: VARCHAR(320) (RFC 5321)
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Identity,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.sql import func

from apps.identity.infrastructure.persistence_postgres.registry import mapper_registry

users_table = Table(
    "users",
    mapper_registry.metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("email", String(320), nullable=False),
    Column("password_hash", Text),
    Column("name", Text),
    Column("surname", Text),
    Column("username", Text),
    Column("image_url", Text),
    Column("roles", ARRAY(Text), nullable=False, server_default=text("'{}'")),
    Column("is_active", Boolean, nullable=False, server_default=text("true")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("last_login_at", DateTime(timezone=True)),
    UniqueConstraint("email", name="uq_users_email"),
)


def start_users_mapper() -> None:
    """Start the User mapper (imperative mapping keeps the entity ORM-free)."""
    from apps.identity.domain.entities.user import User

    if hasattr(User, "__mapper__"):
        return

    mapper_registry.map_imperatively(User, users_table)
