"""Infrastructure DI providers."""

from civicfix.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
