"""Pokédex module: species, types, evolutions and type matchups."""

from trainerdex.pokedex.routes import router as pokedex_router
from trainerdex.pokedex.filters import PokedexFilter, build_filter_query

__all__ = ["pokedex_router", "PokedexFilter", "build_filter_query"]
