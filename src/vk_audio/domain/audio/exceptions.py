"""Audio-domain exceptions for error handling."""


class VkAudioError(Exception):
    """Base exception for audio API operations."""

    pass


class InvalidArgumentError(VkAudioError, ValueError):
    """Raised when a required argument is missing, empty or out of range.

    Always raised before any remote call is made.
    """

    def __init__(self, param_name: str, message: str = None):
        self.param_name = param_name
        super().__init__(message or f"Parameter '{param_name}' is null or empty")


class ResponseFormatError(VkAudioError):
    """Raised when a response cannot be projected into the expected type."""

    pass
