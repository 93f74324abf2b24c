"""
Head-to-head comparison of two character records
"""
from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .models import POWER_STATS
from .sorting import parse_int

NOT_AVAILABLE = "N/A"


def parse_stat_value(stat: Any) -> int:
    """Convert a stat value to an integer in [0, 100]; missing or unparseable is 0."""
    if stat is None or stat == "null":
        return 0
    return max(0, min(100, parse_int(stat)))


def _powerstats(character: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if not character:
        return {}
    return character.get("powerstats") or {}


def calculate_power_level(character: Optional[Mapping[str, Any]]) -> int:
    """Mean of the six power stats, rounded half up.

    Missing stats count as 0 and pull the average down.
    """
    stats = _powerstats(character)
    if not stats:
        return 0
    total = sum(parse_stat_value(stats.get(stat)) for stat in POWER_STATS)
    return int(math.floor(total / len(POWER_STATS) + 0.5))


def get_stat_winner(char1: Mapping[str, Any], char2: Mapping[str, Any], stat: str) -> int:
    """1 if char1 wins, 2 if char2 wins, 0 on a tie."""
    value1 = parse_stat_value(_powerstats(char1).get(stat))
    value2 = parse_stat_value(_powerstats(char2).get(stat))
    if value1 > value2:
        return 1
    if value2 > value1:
        return 2
    return 0


def get_total_wins(char1: Mapping[str, Any], char2: Mapping[str, Any]) -> Tuple[int, int, int]:
    """(char1 wins, char2 wins, ties) across the six power stats."""
    if not char1 or not char2:
        return (0, 0, 0)
    counts = [0, 0, 0]
    for stat in POWER_STATS:
        winner = get_stat_winner(char1, char2, stat)
        if winner == 1:
            counts[0] += 1
        elif winner == 2:
            counts[1] += 1
        else:
            counts[2] += 1
    return (counts[0], counts[1], counts[2])


def _display(value: Any) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def _metric(pair: Any) -> str:
    # appearance height/weight are [imperial, metric]
    if isinstance(pair, list) and len(pair) > 1:
        return _display(pair[1])
    return NOT_AVAILABLE


def compare_attributes(char1: Mapping[str, Any], char2: Mapping[str, Any]) -> List[Dict[str, Any]]:
    if not char1 or not char2:
        return []

    rows: List[Dict[str, Any]] = []
    stats1, stats2 = _powerstats(char1), _powerstats(char2)
    for stat in POWER_STATS:
        rows.append({
            "attribute": stat.capitalize(),
            "char1Value": _display(stats1.get(stat)),
            "char2Value": _display(stats2.get(stat)),
            "winner": get_stat_winner(char1, char2, stat),
        })

    level1 = calculate_power_level(char1)
    level2 = calculate_power_level(char2)
    rows.append({
        "attribute": "Overall Power",
        "char1Value": str(level1),
        "char2Value": str(level2),
        "winner": 1 if level1 > level2 else 2 if level2 > level1 else 0,
    })

    appearance1 = char1.get("appearance") or {}
    appearance2 = char2.get("appearance") or {}
    bio1 = char1.get("biography") or {}
    bio2 = char2.get("biography") or {}
    # display-only rows, never a winner
    rows.append({
        "attribute": "Height",
        "char1Value": _metric(appearance1.get("height")),
        "char2Value": _metric(appearance2.get("height")),
        "winner": 0,
    })
    rows.append({
        "attribute": "Weight",
        "char1Value": _metric(appearance1.get("weight")),
        "char2Value": _metric(appearance2.get("weight")),
        "winner": 0,
    })
    rows.append({
        "attribute": "Publisher",
        "char1Value": _display(bio1.get("publisher")),
        "char2Value": _display(bio2.get("publisher")),
        "winner": 0,
    })
    return rows
