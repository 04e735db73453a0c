"""
Player Repository

Loads and saves the single Player profile through a key-value store.

Wire format: a JSON object stored under bucket ``DB``, key ``PLAYER``::

    {"played": 3, "won": 2, "currStreak": 1, "longestStreak": 2,
     "stats": [0, 1, 1, 0, 0, 0], "hiContrast": false, "hardMode": false}

Counters are written as integers. Older data wrote them as floats (``3.0``);
those still load as long as they are whole numbers.
"""

import json
from typing import Any, Dict

from ..exceptions import SerializationError
from ..models.player import DISTRIBUTION_SIZE, Player
from ..storage.base import KeyValueStore

PLAYER_BUCKET = "DB"
PLAYER_KEY = "PLAYER"

# Wire field name -> Player attribute
_COUNTER_FIELDS = {
    "played": "games_played",
    "won": "games_won",
    "currStreak": "current_streak",
    "longestStreak": "longest_streak",
}
_FLAG_FIELDS = {
    "hiContrast": "high_contrast",
    "hardMode": "hard_mode",
}
_DISTRIBUTION_FIELD = "stats"


def player_to_dict(player: Player) -> Dict[str, Any]:
    data: Dict[str, Any] = {wire: getattr(player, attr) for wire, attr in _COUNTER_FIELDS.items()}
    data[_DISTRIBUTION_FIELD] = list(player.guess_distribution)
    data.update({wire: getattr(player, attr) for wire, attr in _FLAG_FIELDS.items()})
    return data


def _as_count(name: str, value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SerializationError(f"'{name}' must be a number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise SerializationError(f"'{name}' must be a whole number, got {value!r}")
    if value < 0:
        raise SerializationError(f"'{name}' must not be negative, got {value!r}")
    return int(value)


def player_from_dict(data: Any) -> Player:
    """
    Build a Player from a decoded JSON object. Missing fields take their zero value.

    Raises:
        SerializationError: If the object has the wrong shape or invalid values
    """
    if not isinstance(data, dict):
        raise SerializationError(f"player data must be a JSON object, got {type(data).__name__}")

    kwargs: Dict[str, Any] = {}
    for wire, attr in _COUNTER_FIELDS.items():
        if wire in data:
            kwargs[attr] = _as_count(wire, data[wire])

    if _DISTRIBUTION_FIELD in data:
        distribution = data[_DISTRIBUTION_FIELD]
        if not isinstance(distribution, list) or len(distribution) != DISTRIBUTION_SIZE:
            raise SerializationError(
                f"'{_DISTRIBUTION_FIELD}' must be a list of {DISTRIBUTION_SIZE} numbers"
            )
        kwargs["guess_distribution"] = [
            _as_count(f"{_DISTRIBUTION_FIELD}[{i}]", count) for i, count in enumerate(distribution)
        ]

    for wire, attr in _FLAG_FIELDS.items():
        if wire in data:
            if not isinstance(data[wire], bool):
                raise SerializationError(f"'{wire}' must be a boolean, got {data[wire]!r}")
            kwargs[attr] = data[wire]

    player = Player(**kwargs)
    _check_consistency(player)
    return player


def _check_consistency(player: Player) -> None:
    if player.games_won > player.games_played:
        raise SerializationError(
            f"'won' ({player.games_won}) exceeds 'played' ({player.games_played})"
        )
    if sum(player.guess_distribution) > player.games_won:
        raise SerializationError(
            f"'stats' total ({sum(player.guess_distribution)}) exceeds 'won' ({player.games_won})"
        )
    if player.current_streak > player.longest_streak:
        raise SerializationError(
            f"'currStreak' ({player.current_streak}) exceeds 'longestStreak' ({player.longest_streak})"
        )


class PlayerRepository:
    """
    Persistence adapter for the Player profile.

    The store is passed in explicitly so tests can substitute a MemoryStore.
    """

    def __init__(self, store: KeyValueStore, bucket: str = PLAYER_BUCKET, key: str = PLAYER_KEY):
        self.store = store
        self.bucket = bucket
        self.key = key

    def load(self) -> Player:
        """
        Read the stored player, or a zero-valued Player when nothing is stored.

        Raises:
            StorageError: If the store cannot be read
            SerializationError: If the stored bytes are not a valid player
        """
        raw = self.store.get(self.bucket, self.key)
        if raw is None:
            return Player()

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SerializationError(f"could not unmarshal player data json: {e}") from e

        return player_from_dict(data)

    def save(self, player: Player) -> None:
        """
        Write the player in a single transaction.

        Raises:
            StorageError: If the write fails
        """
        try:
            payload = json.dumps(player_to_dict(player)).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"could not marshal player data json: {e}") from e
        self.store.put(self.bucket, self.key, payload)
