"""Tests for audio domain model decoding."""

from dataclasses import FrozenInstanceError

import pytest

from vk_audio.domain.audio.enums import AudioGenre
from vk_audio.domain.audio.exceptions import ResponseFormatError
from vk_audio.domain.audio.models import Audio, AudioAlbum, Group, Lyrics, User
from vk_audio.domain.audio.response import VkResponse


class TestAudio:
    """Tests for Audio."""

    def test_from_current_keys(self) -> None:
        audio = Audio.from_response(
            {
                "id": 67859194,
                "owner_id": 2,
                "artist": " The Beatles ",
                "title": "Yesterday",
                "duration": 125,
                "url": "https://cs1.example/a.mp3",
                "lyrics_id": 3596,
                "album_id": 7,
                "genre_id": 1,
            }
        )

        assert audio.id == 67859194
        assert audio.artist == "The Beatles"
        assert audio.lyrics_id == 3596
        assert audio.album_id == 7
        assert audio.genre is AudioGenre.ROCK
        assert audio.full_id == "2_67859194"

    def test_from_legacy_keys(self) -> None:
        audio = Audio.from_response({"aid": 5, "owner_id": -2, "artist": "A", "title": "T"})
        assert audio.id == 5
        assert audio.owner_id == -2
        assert audio.duration == 0
        assert audio.url is None
        assert audio.lyrics_id is None
        assert audio.genre is None

    def test_unknown_genre_is_none(self) -> None:
        audio = Audio.from_response({"id": 1, "owner_id": 1, "genre_id": 9999})
        assert audio.genre is None

    def test_from_wrapped_response(self) -> None:
        audio = Audio.from_response(VkResponse({"id": 1, "owner_id": 1}))
        assert audio.id == 1

    def test_missing_id_raises(self) -> None:
        with pytest.raises(ResponseFormatError):
            Audio.from_response({"owner_id": 1})

    def test_non_object_raises(self) -> None:
        with pytest.raises(ResponseFormatError):
            Audio.from_response(5)

    @pytest.mark.parametrize(
        "field, value",
        [("id", "abc"), ("owner_id", "x"), ("duration", "3:05"), ("lyrics_id", "n/a"), ("album_id", [])],
    )
    def test_non_numeric_field_raises_format_error(self, field, value) -> None:
        """Malformed numeric fields raise ResponseFormatError, not ValueError."""
        record = {"id": 1, "owner_id": 1, field: value}
        with pytest.raises(ResponseFormatError, match=field):
            Audio.from_response(record)

    def test_is_frozen(self) -> None:
        audio = Audio.from_response({"id": 1, "owner_id": 1})
        with pytest.raises(FrozenInstanceError):
            audio.title = "changed"  # type: ignore


class TestOtherModels:
    """Tests for AudioAlbum, Lyrics, User and Group."""

    def test_album(self) -> None:
        album = AudioAlbum.from_response({"id": 3, "owner_id": -2, "title": "Live"})
        assert album == AudioAlbum(id=3, owner_id=-2, title="Live")

    def test_lyrics_lines(self) -> None:
        lyrics = Lyrics.from_response({"lyrics_id": 1, "text": "one\ntwo\nthree"})
        assert lyrics.lines == ["one", "two", "three"]

    def test_user_legacy_uid(self) -> None:
        user = User.from_response({"uid": 1, "first_name": "Pavel", "last_name": "Durov"})
        assert user.id == 1
        assert user.full_name == "Pavel Durov"
        assert user.status_audio is None

    def test_user_status_audio(self) -> None:
        user = User.from_response(
            {"id": 1, "status_audio": {"id": 9, "owner_id": 1, "title": "Now"}}
        )
        assert user.status_audio == Audio(
            id=9, owner_id=1, artist="", title="Now", duration=0
        )

    def test_group_legacy_gid(self) -> None:
        group = Group.from_response({"gid": 2, "name": "VK API", "screen_name": "apiclub"})
        assert group == Group(id=2, name="VK API", screen_name="apiclub")

    def test_empty_status_audio_is_none(self) -> None:
        """An empty status_audio object means no broadcast."""
        user = User.from_response({"id": 1, "status_audio": {}})
        group = Group.from_response({"id": 2, "status_audio": {}})
        assert user.status_audio is None
        assert group.status_audio is None

    @pytest.mark.parametrize(
        "decode, record",
        [
            (AudioAlbum.from_response, {"id": "first", "owner_id": 1}),
            (Lyrics.from_response, {"lyrics_id": "x", "text": ""}),
            (User.from_response, {"id": "durov"}),
            (Group.from_response, {"gid": "apiclub"}),
        ],
    )
    def test_non_numeric_id_raises_format_error(self, decode, record) -> None:
        """Every decoder reports malformed ids as ResponseFormatError."""
        with pytest.raises(ResponseFormatError):
            decode(record)
