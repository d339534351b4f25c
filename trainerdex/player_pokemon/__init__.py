"""Player Pokémon module: a trainer's caught Pokémon and their moves."""

from trainerdex.player_pokemon.routes import router as player_pokemon_router

__all__ = ["player_pokemon_router"]
