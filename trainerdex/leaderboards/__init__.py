"""Leaderboards module: aggregate rankings across trainers."""

from trainerdex.leaderboards.routes import router as leaderboards_router

__all__ = ["leaderboards_router"]
