"""
vk-audio: client binding for the audio methods of the VK API.

Example:
    from vk_audio import AudioClient

    client = AudioClient(caller)
    result = client.search("Beatles", count=10)
"""

from .domain.audio import (
    Audio,
    AudioAlbum,
    AudioClient,
    AudioGenre,
    AudioSearchResult,
    AudioSort,
    Caller,
    Group,
    InvalidArgumentError,
    Lyrics,
    ParameterSet,
    ResponseFormatError,
    User,
    VkAudioError,
)

__version__ = "0.1.0"

__all__ = [
    "Audio",
    "AudioAlbum",
    "AudioClient",
    "AudioGenre",
    "AudioSearchResult",
    "AudioSort",
    "Caller",
    "Group",
    "InvalidArgumentError",
    "Lyrics",
    "ParameterSet",
    "ResponseFormatError",
    "User",
    "VkAudioError",
]
