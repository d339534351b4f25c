"""
Parameterized query builder for Pokédex searches.

Only the filters named in ``PokedexFilter`` exist. Each one maps to a fixed
clause template; the caller's values are bound as positional parameters and
never reach the SQL text. Clauses are ANDed together in enum order.
"""

from enum import Enum
from typing import Any, List, Mapping, Tuple

from trainerdex.errors import ErrorKind, StoreError

BASE_QUERY = "SELECT DISTINCT p.name FROM Pokemon p JOIN Pokemon_Type pt ON p.name = pt.name"


class PokedexFilter(str, Enum):
    ATTACK = "pokeattack"
    DEFENCE = "pokedefence"
    SPEED = "pokespeed"
    TYPE = "poketype"


CLAUSES = {
    PokedexFilter.ATTACK: "p.attack >= {}",
    PokedexFilter.DEFENCE: "p.defence >= {}",
    PokedexFilter.SPEED: "p.speed >= {}",
    PokedexFilter.TYPE: "pt.type = {}",
}


def _bind_value(field: PokedexFilter, value: Any) -> Any:
    if field is PokedexFilter.TYPE:
        return str(value).strip().lower()
    try:
        return int(value)
    except (TypeError, ValueError):
        raise StoreError(ErrorKind.INVALID_INPUT, f"{field.value} must be an integer, got {value!r}")


def build_filter_query(params: Mapping[str, Any]) -> Tuple[str, List[Any]]:
    """Build ``(sql, args)`` from a mapping of filter keys to values.

    Unrecognized keys and ``None`` values are ignored, so an empty mapping
    selects every Pokémon name.
    """
    clauses: List[str] = []
    args: List[Any] = []
    for field in PokedexFilter:
        value = params.get(field.value)
        if value is None or value == "":
            continue
        args.append(_bind_value(field, value))
        clauses.append(CLAUSES[field].format(f"${len(args)}"))

    sql = BASE_QUERY
    if clauses:
        sql += " WHERE " + " AND ".join(clauses)
    sql += " ORDER BY p.name"
    return sql, args
