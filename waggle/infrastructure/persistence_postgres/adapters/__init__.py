"""SQLAlchemy adapters."""

from waggle.infrastructure.persistence_postgres.adapters.reference_gateway_sqla import (
    SqlaReferenceQueryGateway,
)
from waggle.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from waggle.infrastructure.persistence_postgres.adapters.user_gateway_sqla import (
    SqlaUserCommandGateway,
    SqlaUserQueryGateway,
)

__all__ = [
    "SqlaReferenceQueryGateway",
    "SqlaTransactionManager",
    "SqlaUserCommandGateway",
    "SqlaUserQueryGateway",
]
