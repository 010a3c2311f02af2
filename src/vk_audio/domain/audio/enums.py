"""
Enumerations used as audio method parameters.

Values are the integer codes the remote API expects on the wire.
"""

from enum import Enum, IntEnum
from typing import Optional


class AudioGenre(IntEnum):
    """Audio genre codes (genre_id)."""

    ROCK = 1
    POP = 2
    RAP_AND_HIP_HOP = 3
    EASY_LISTENING = 4
    DANCE_AND_HOUSE = 5
    INSTRUMENTAL = 6
    METAL = 7
    DUBSTEP = 8
    DRUM_AND_BASS = 10
    TRANCE = 11
    CHANSON = 12
    ETHNIC = 13
    ACOUSTIC_AND_VOCAL = 14
    REGGAE = 15
    CLASSICAL = 16
    INDIE_POP = 17
    OTHER = 18
    SPEECH = 19
    ALTERNATIVE = 21
    ELECTROPOP_AND_DISCO = 22
    JAZZ_AND_BLUES = 1001

    @classmethod
    def from_code(cls, code: Optional[int]) -> Optional["AudioGenre"]:
        """Return the genre for a code, or None for missing/unknown codes."""
        if code is None:
            return None
        try:
            return cls(int(code))
        except (ValueError, TypeError):
            return None


class AudioSort(IntEnum):
    """Search result ordering (sort)."""

    BY_DATE = 0
    BY_DURATION = 1
    BY_POPULARITY = 2


class BroadcastFilter(str, Enum):
    """Whose broadcasts audio.getBroadcastList returns (filter)."""

    FRIENDS = "friends"
    GROUPS = "groups"
    ALL = "all"
