"""Explorer module: browse any application table by name and column."""

from trainerdex.explorer.routes import router as explorer_router

__all__ = ["explorer_router"]
