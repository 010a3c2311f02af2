"""
Audio section of the API.

AudioClient maps each audio.* remote method onto a typed Python method.
It needs a Caller (anything with a call(method, params, api_version)
method) to reach the network.
"""

from .caller import Caller
from .client import MAX_GET_COUNT, MAX_POPULAR_COUNT, AudioClient
from .enums import AudioGenre, AudioSort, BroadcastFilter
from .exceptions import InvalidArgumentError, ResponseFormatError, VkAudioError
from .models import Audio, AudioAlbum, AudioSearchResult, Group, Lyrics, User
from .params import ParameterSet
from .response import VkResponse, decompose

__all__ = [
    "AudioClient",
    "Caller",
    "MAX_GET_COUNT",
    "MAX_POPULAR_COUNT",
    "AudioGenre",
    "AudioSort",
    "BroadcastFilter",
    "VkAudioError",
    "InvalidArgumentError",
    "ResponseFormatError",
    "Audio",
    "AudioAlbum",
    "AudioSearchResult",
    "Group",
    "Lyrics",
    "User",
    "ParameterSet",
    "VkResponse",
    "decompose",
]
