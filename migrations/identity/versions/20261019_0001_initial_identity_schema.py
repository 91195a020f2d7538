"""Initial identity schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Schema: identity.*
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create identity schema tables."""
    op.execute("CREATE SCHEMA IF NOT EXISTS identity")

    # ============================================
    # identity.users
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS identity.users (
            id BIGINT GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
            email VARCHAR(320) NOT NULL,
            password_hash TEXT,
            name TEXT,
            surname TEXT,
            username TEXT,
            image_url TEXT,
            roles TEXT[] NOT NULL DEFAULT '{}',
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            last_login_at TIMESTAMPTZ,

            CONSTRAINT uq_users_email UNIQUE (email)
        )
    """)

    # ============================================
    # identity.user_social_accounts
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS identity.user_social_accounts (
            id BIGINT GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
            user_id BIGINT NOT NULL,
            provider TEXT NOT NULL,
            provider_user_id TEXT NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            last_login_at TIMESTAMPTZ,

            CONSTRAINT fk_user_social_accounts_user
                FOREIGN KEY (user_id) REFERENCES identity.users(id) ON DELETE CASCADE,
            CONSTRAINT uq_user_social_accounts_identity
                UNIQUE (provider, provider_user_id),
            CONSTRAINT uq_user_social_accounts_user_provider
                UNIQUE (user_id, provider)
        )
    """)

    # ============================================
    # identity.refresh_tokens
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS identity.refresh_tokens (
            id BIGINT GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
            user_id BIGINT NOT NULL,
            token_hash VARCHAR(64) NOT NULL,
            expires_at TIMESTAMPTZ NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT fk_refresh_tokens_user
                FOREIGN KEY (user_id) REFERENCES identity.users(id) ON DELETE CASCADE,
            CONSTRAINT uq_refresh_tokens_token_hash UNIQUE (token_hash)
        )
    """)

    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_refresh_tokens_user_id
        ON identity.refresh_tokens(user_id)
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS identity.refresh_tokens")
    op.execute("DROP TABLE IF EXISTS identity.user_social_accounts")
    op.execute("DROP TABLE IF EXISTS identity.users")
