"""Trainers module: accounts, login and profile updates."""

from trainerdex.trainers.routes import router as trainers_router
from trainerdex.trainers.service import TrainerAuth

__all__ = ["trainers_router", "TrainerAuth"]
