from apps.identity.application.common.ports.transaction_manager import (
    Flusher,
    TransactionManager,
)

__all__ = ["Flusher", "TransactionManager"]
