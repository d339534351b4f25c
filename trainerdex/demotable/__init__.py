"""Demo table module: scratch table used to smoke-test the database wiring."""

from trainerdex.demotable.routes import router as demotable_router

__all__ = ["demotable_router"]
