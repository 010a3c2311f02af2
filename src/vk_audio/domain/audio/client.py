"""
Audio API operations.

Each AudioClient method maps one-to-one onto a remote audio.* method:
validate arguments, build a ParameterSet, invoke the injected Caller,
and project the reply into domain models.
"""

from typing import Any, Iterable, List, Optional, Tuple, Union

from loguru import logger

from vk_audio.core.config import Config

from .caller import Caller
from .enums import AudioGenre, AudioSort, BroadcastFilter
from .models import Audio, AudioAlbum, AudioSearchResult, Group, Lyrics, User
from .params import ParameterSet, require_non_empty, require_present, require_unsigned
from .response import VkResponse, decompose

# Protocol revisions some methods are pinned to
API_VERSION_5_40 = "5.40"
API_VERSION_5_21 = "5.21"

# Above these ceilings "count" is left out of the request, not clamped
MAX_GET_COUNT = 6000
MAX_POPULAR_COUNT = 1000


def _optional_list(values: Optional[Iterable[Any]]) -> Optional[List[Any]]:
    return None if values is None else list(values)


def _unsigned_list(name: str, values: Optional[Iterable[int]]) -> Optional[List[int]]:
    values = _optional_list(values)
    for value in values or ():
        require_unsigned(name, value)
    return values


class AudioClient:
    """Client for the audio section of the API.

    Args:
        caller: Transport used to execute remote methods
        default_version: Revision sent with methods that are not pinned to
            one. None lets the caller choose.
    """

    def __init__(self, caller: Caller, default_version: Optional[str] = None):
        self._caller = caller
        self._default_version = default_version

    @classmethod
    def from_config(cls, caller: Caller, config: Config) -> "AudioClient":
        """Build a client using the [api] section of a loaded Config."""
        return cls(caller, default_version=config.api.default_version)

    def _call(
        self, method: str, params: ParameterSet, api_version: Optional[str] = None
    ) -> VkResponse:
        version = api_version or self._default_version
        logger.debug(f"Calling {method} (v={version}) with keys {list(params)}")
        return VkResponse.wrap(self._caller.call(method, params, version))

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def get_count(self, owner_id: int) -> int:
        """Return the number of audio records a user or community has.

        Args:
            owner_id: User id, or negated community id (e.g. -2 for club2)
        """
        params = ParameterSet([("owner_id", owner_id)])
        return self._call("audio.getCount", params, API_VERSION_5_40).as_int()

    def get_lyrics(self, lyrics_id: int) -> Lyrics:
        params = ParameterSet([("lyrics_id", lyrics_id)])
        response = self._call("audio.getLyrics", params, API_VERSION_5_40)
        return Lyrics.from_response(response)

    def get_by_id(self, audios: Union[str, Iterable[str]]) -> List[Audio]:
        """Return audio records by composite id.

        Args:
            audios: Composite ids in "{owner_id}_{audio_id}" form. A single
                string is treated as one id.

        Raises:
            InvalidArgumentError: If no ids are given
        """
        if isinstance(audios, str):
            audios = [audios]
        audios = require_non_empty("audios", _optional_list(audios))

        params = ParameterSet([("audios", audios)])
        response = self._call("audio.getById", params, API_VERSION_5_40)
        return [Audio.from_response(item) for item in response]

    def get_from_group(
        self,
        group_id: int,
        album_id: Optional[int] = None,
        aids: Optional[Iterable[int]] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Audio]:
        """Return a community's audio records."""
        _, audios = self._get(
            "gid", group_id, album_id, aids, need_user=False, count=count, offset=offset
        )
        return audios

    def get(
        self,
        user_id: int,
        album_id: Optional[int] = None,
        aids: Optional[Iterable[int]] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Audio]:
        """Return a user's audio records."""
        require_unsigned("user_id", user_id)
        _, audios = self._get(
            "uid", user_id, album_id, aids, need_user=False, count=count, offset=offset
        )
        return audios

    def get_with_owner(
        self,
        user_id: int,
        album_id: Optional[int] = None,
        aids: Optional[Iterable[int]] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Tuple[Optional[User], List[Audio]]:
        """Return a user's audio records together with the user's profile.

        Returns:
            (owner, audios). owner is None when the reply is empty.
        """
        require_unsigned("user_id", user_id)
        return self._get(
            "uid", user_id, album_id, aids, need_user=True, count=count, offset=offset
        )

    def _get(
        self,
        id_key: str,
        owner: int,
        album_id: Optional[int],
        aids: Optional[Iterable[int]],
        need_user: bool,
        count: Optional[int],
        offset: Optional[int],
    ) -> Tuple[Optional[User], List[Audio]]:
        params = ParameterSet(
            [
                (id_key, owner),
                ("album_id", album_id),
                ("aids", _unsigned_list("aids", aids)),
                ("need_user", need_user),
                ("offset", offset),
            ]
        )
        if count is not None and count <= MAX_GET_COUNT:
            params.add("count", count)

        response = self._call("audio.get", params, API_VERSION_5_40)

        # With need_user the owner's profile precedes the audio records
        users, audios = decompose(
            response,
            Audio.from_response,
            lead_count=1 if need_user else 0,
            decode_lead=User.from_response,
        )
        return (users[0] if users else None), audios

    def get_upload_server(self) -> str:
        """Return the URL audio files should be uploaded to before save()."""
        response = self._call("audio.getUploadServer", ParameterSet(), API_VERSION_5_40)
        return VkResponse(response["upload_url"]).as_str()

    def search(
        self,
        query: str,
        auto_complete: Optional[bool] = None,
        sort: Optional[AudioSort] = None,
        find_lyrics: Optional[bool] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> AudioSearchResult:
        """Search the audio catalogue.

        Args:
            query: Search string
            auto_complete: Correct typos in the query
            sort: Result ordering
            find_lyrics: Only return records that have lyrics
            count: Page size (the API serves at most 200)
            offset: Page offset

        Returns:
            AudioSearchResult with the total match count and the page

        Raises:
            InvalidArgumentError: If query is empty
        """
        require_non_empty("query", query)

        params = ParameterSet(
            [
                ("q", query),
                ("auto_complete", auto_complete),
                ("sort", sort),
                ("lyrics", find_lyrics),
                ("count", count),
                ("offset", offset),
            ]
        )
        response = self._call("audio.search", params)

        totals, audios = decompose(
            response,
            Audio.from_response,
            lead_count=1,
            decode_lead=lambda value: VkResponse(value).as_int(),
        )
        return AudioSearchResult(total_count=totals[0] if totals else 0, audios=audios)

    def get_popular(
        self,
        only_eng: bool = False,
        genre: Optional[AudioGenre] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Audio]:
        """Return the current popular chart, optionally for one genre."""
        params = ParameterSet(
            [
                ("only_eng", only_eng),
                ("genre_id", genre),
                ("offset", offset),
            ]
        )
        if count is not None and count <= MAX_POPULAR_COUNT:
            params.add("count", count)

        response = self._call("audio.getPopular", params)
        return [Audio.from_response(item) for item in response]

    def get_albums(
        self,
        owner_id: int,
        count: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[AudioAlbum]:
        params = ParameterSet(
            [
                ("owner_id", owner_id),
                ("count", count),
                ("offset", offset),
            ]
        )
        response = self._call("audio.getAlbums", params)

        # Leading element is the album count
        _, albums = decompose(response, AudioAlbum.from_response, lead_count=1)
        return albums

    def get_recommendations(
        self,
        user_id: Optional[int] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
        shuffle: bool = True,
        target_audio: Optional[str] = None,
    ) -> List[Audio]:
        """Return recommendations for a user or seeded by one audio record.

        Args:
            user_id: Whose listening history to use (current user if None)
            count: Number of records
            offset: Offset
            shuffle: Shuffle the result
            target_audio: Composite id of the seed record
        """
        require_unsigned("user_id", user_id)

        params = ParameterSet(
            [
                ("target_audio", target_audio or None),
                ("user_id", user_id),
                ("offset", offset),
                ("count", count),
                ("shuffle", shuffle),
            ]
        )
        response = self._call("audio.getRecommendations", params)
        return [Audio.from_response(item) for item in response]

    def get_broadcast_list_friends(self, active: bool = False) -> List[User]:
        """Return friends broadcasting audio to their status.

        Args:
            active: Only those currently broadcasting
        """
        response = self._get_broadcast_list(BroadcastFilter.FRIENDS, active)
        return [User.from_response(item) for item in response]

    def get_broadcast_list_groups(self, active: bool = False) -> List[Group]:
        """Return communities broadcasting audio to their status."""
        response = self._get_broadcast_list(BroadcastFilter.GROUPS, active)
        return [Group.from_response(item) for item in response]

    def _get_broadcast_list(self, filter_: BroadcastFilter, active: bool) -> VkResponse:
        params = ParameterSet(
            [
                ("filter", filter_.value),
                ("active", active),
            ]
        )
        return self._call("audio.getBroadcastList", params)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def add(self, audio_id: int, owner_id: int, group_id: Optional[int] = None) -> int:
        """Copy an audio record to the current user's (or a community's) page.

        Returns:
            Id of the new copy
        """
        require_unsigned("audio_id", audio_id)
        params = ParameterSet(
            [
                ("aid", audio_id),
                ("oid", owner_id),
                ("gid", group_id),
            ]
        )
        return self._call("audio.add", params).as_int()

    def delete(self, audio_id: int, owner_id: int) -> bool:
        require_unsigned("audio_id", audio_id)
        params = ParameterSet([("aid", audio_id), ("oid", owner_id)])
        return self._call("audio.delete", params).as_bool()

    def edit(
        self,
        audio_id: int,
        owner_id: int,
        artist: Optional[str],
        title: Optional[str],
        text: Optional[str],
        no_search: Optional[bool] = None,
        genre: Optional[AudioGenre] = AudioGenre.OTHER,
    ) -> int:
        """Edit an audio record's metadata and lyrics.

        Raises:
            InvalidArgumentError: If artist, title or text is None

        Returns:
            Id of the record's lyrics
        """
        require_unsigned("audio_id", audio_id)
        require_present("artist", artist)
        require_present("title", title)
        require_present("text", text)

        params = ParameterSet(
            [
                ("aid", audio_id),
                ("oid", owner_id),
                ("artist", artist),
                ("title", title),
                ("text", text),
                ("no_search", no_search),
                ("genre_id", genre),
            ]
        )
        return self._call("audio.edit", params).as_int()

    def restore(self, audio_id: int, owner_id: Optional[int] = None) -> Audio:
        """Restore a deleted audio record."""
        require_unsigned("audio_id", audio_id)
        params = ParameterSet([("aid", audio_id), ("oid", owner_id)])
        return Audio.from_response(self._call("audio.restore", params))

    def reorder(self, audio_id: int, owner_id: int, after: int, before: int) -> bool:
        """Move an audio record between two others in the owner's list."""
        require_unsigned("audio_id", audio_id)
        params = ParameterSet(
            [
                ("aid", audio_id),
                ("oid", owner_id),
                ("after", after),
                ("before", before),
            ]
        )
        return self._call("audio.reorder", params).as_bool()

    def set_broadcast(
        self, audio: str, target_ids: Optional[Iterable[int]] = None
    ) -> List[int]:
        """Broadcast an audio record to user or community statuses.

        Args:
            audio: Composite id of the record
            target_ids: Users/communities to broadcast to (current user if None)

        Returns:
            Ids the broadcast was applied to
        """
        require_non_empty("audio", audio)
        params = ParameterSet(
            [
                ("audio", audio),
                ("target_ids", _optional_list(target_ids)),
            ]
        )
        response = self._call("audio.setBroadcast", params)
        return [VkResponse(item).as_int() for item in response]

    def save(
        self,
        server: int,
        audio: str,
        audio_hash: Optional[str] = None,
        artist: Optional[str] = None,
        title: Optional[str] = None,
    ) -> List[Audio]:
        """Save an uploaded audio file.

        Args:
            server: Server value returned by the upload
            audio: Audio token returned by the upload
            audio_hash: Hash returned by the upload
            artist: Artist override (taken from ID3 tags otherwise)
            title: Title override (taken from ID3 tags otherwise)

        Raises:
            InvalidArgumentError: If audio is empty
        """
        require_non_empty("audio", audio)
        params = ParameterSet(
            [
                ("server", server),
                ("audio", audio),
                ("hash", audio_hash),
                ("artist", artist),
                ("title", title),
            ]
        )
        response = self._call("audio.save", params, API_VERSION_5_21)
        return [Audio.from_response(item) for item in response]

    # ------------------------------------------------------------------
    # Albums
    # ------------------------------------------------------------------

    def add_album(self, title: str, group_id: Optional[int] = None) -> int:
        """Create an album.

        Returns:
            Id of the new album
        """
        require_non_empty("title", title)
        require_unsigned("group_id", group_id)
        params = ParameterSet(
            [
                ("title", title),
                ("group_id", group_id),
            ]
        )
        response = self._call("audio.addAlbum", params)
        return VkResponse(response["album_id"]).as_int()

    def edit_album(self, title: str, album_id: int, group_id: Optional[int] = None) -> bool:
        require_non_empty("title", title)
        require_unsigned("album_id", album_id)
        require_unsigned("group_id", group_id)
        params = ParameterSet(
            [
                ("title", title),
                ("group_id", group_id),
                ("album_id", album_id),
            ]
        )
        return self._call("audio.editAlbum", params).as_bool()

    def delete_album(self, album_id: int, group_id: Optional[int] = None) -> bool:
        require_unsigned("album_id", album_id)
        require_unsigned("group_id", group_id)
        params = ParameterSet(
            [
                ("album_id", album_id),
                ("group_id", group_id),
            ]
        )
        return self._call("audio.deleteAlbum", params).as_bool()

    def move_to_album(
        self,
        album_id: int,
        audio_ids: Iterable[int],
        group_id: Optional[int] = None,
    ) -> bool:
        """Move audio records into an album."""
        require_unsigned("album_id", album_id)
        require_unsigned("group_id", group_id)
        params = ParameterSet(
            [
                ("album_id", album_id),
                ("group_id", group_id),
                ("audio_ids", _unsigned_list("audio_ids", audio_ids)),
            ]
        )
        return self._call("audio.moveToAlbum", params).as_bool()
