from apps.identity.infrastructure.persistence_postgres.adapters.refresh_token_gateway_sqla import (
    SqlaRefreshTokenGateway,
)
from apps.identity.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaFlusher,
    SqlaTransactionManager,
)
from apps.identity.infrastructure.persistence_postgres.adapters.user_gateway_sqla import (
    SqlaUserCommandGateway,
    SqlaUserQueryGateway,
)

__all__ = [
    "SqlaFlusher",
    "SqlaRefreshTokenGateway",
    "SqlaTransactionManager",
    "SqlaUserCommandGateway",
    "SqlaUserQueryGateway",
]
