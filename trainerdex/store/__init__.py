"""Store module: items, berries, medicine and trainer inventories."""

from trainerdex.store.routes import router as store_router

__all__ = ["store_router"]
