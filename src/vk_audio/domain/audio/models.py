"""
Audio domain models.

Immutable records decoded from remote replies. Every decoder accepts both
the current key names and the legacy ones (aid, uid, gid) older API
revisions still return.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import AudioGenre
from .exceptions import ResponseFormatError
from .response import VkResponse


def _as_record(data: Any) -> Dict[str, Any]:
    if isinstance(data, VkResponse):
        return data.as_dict()
    if not isinstance(data, dict):
        raise ResponseFormatError(f"Expected an object, got {type(data).__name__}")
    return data


def _first_present(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ResponseFormatError(f"Field '{name}' is not an integer: {value!r}") from e


def _optional_int(value: Any, name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    return _int(value, name)


@dataclass(frozen=True)
class Audio:
    """A single audio record."""

    id: int
    owner_id: int  # Negative for communities
    artist: str
    title: str
    duration: int  # in seconds
    url: Optional[str] = None
    lyrics_id: Optional[int] = None
    album_id: Optional[int] = None
    genre: Optional[AudioGenre] = None

    @property
    def full_id(self) -> str:
        """Composite id in the "{owner_id}_{id}" form audio.getById takes."""
        return f"{self.owner_id}_{self.id}"

    @classmethod
    def from_response(cls, data: Any) -> "Audio":
        record = _as_record(data)
        audio_id = _first_present(record, "id", "aid")
        if audio_id is None:
            raise ResponseFormatError(f"Audio record has no id: {record!r}")

        return cls(
            id=_int(audio_id, "id"),
            owner_id=_int(_first_present(record, "owner_id", "oid") or 0, "owner_id"),
            artist=(record.get("artist") or "").strip(),
            title=(record.get("title") or "").strip(),
            duration=_int(record.get("duration") or 0, "duration"),
            url=record.get("url") or None,
            lyrics_id=_optional_int(record.get("lyrics_id"), "lyrics_id"),
            album_id=_optional_int(record.get("album_id"), "album_id"),
            genre=AudioGenre.from_code(
                _first_present(record, "genre_id", "genre")
            ),
        )


@dataclass(frozen=True)
class AudioAlbum:
    """An audio album (playlist folder) owned by a user or community."""

    id: int
    owner_id: int
    title: str

    @classmethod
    def from_response(cls, data: Any) -> "AudioAlbum":
        record = _as_record(data)
        album_id = _first_present(record, "id", "album_id")
        if album_id is None:
            raise ResponseFormatError(f"Album record has no id: {record!r}")

        return cls(
            id=_int(album_id, "id"),
            owner_id=_int(record.get("owner_id") or 0, "owner_id"),
            title=record.get("title") or "",
        )


@dataclass(frozen=True)
class Lyrics:
    """Lyrics attached to an audio record."""

    id: int
    text: str

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines()

    @classmethod
    def from_response(cls, data: Any) -> "Lyrics":
        record = _as_record(data)
        return cls(
            id=_int(_first_present(record, "lyrics_id", "id") or 0, "lyrics_id"),
            text=record.get("text") or "",
        )


def _status_audio(record: Dict[str, Any]) -> Optional[Audio]:
    status = record.get("status_audio")
    return Audio.from_response(status) if status else None


@dataclass(frozen=True)
class User:
    """Decoded subset of a user profile.

    status_audio is only filled in by broadcast-list queries.
    """

    id: int
    first_name: str = ""
    last_name: str = ""
    status_audio: Optional[Audio] = field(default=None, compare=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_response(cls, data: Any) -> "User":
        record = _as_record(data)
        return cls(
            id=_int(_first_present(record, "id", "uid") or 0, "id"),
            first_name=record.get("first_name") or "",
            last_name=record.get("last_name") or "",
            status_audio=_status_audio(record),
        )


@dataclass(frozen=True)
class Group:
    """Decoded subset of a community."""

    id: int
    name: str = ""
    screen_name: Optional[str] = None
    status_audio: Optional[Audio] = field(default=None, compare=False)

    @classmethod
    def from_response(cls, data: Any) -> "Group":
        record = _as_record(data)
        return cls(
            id=_int(_first_present(record, "id", "gid") or 0, "id"),
            name=record.get("name") or "",
            screen_name=record.get("screen_name"),
            status_audio=_status_audio(record),
        )


@dataclass(frozen=True)
class AudioSearchResult:
    """Reply of audio.search: total match count plus the returned page."""

    total_count: int
    audios: List[Audio]
