"""Gyms module: gyms, badges, battles and gym challenges."""

from trainerdex.gyms.routes import router as gyms_router

__all__ = ["gyms_router"]
