"""
Caller interface for remote method invocation.

The audio client never talks to the network itself. It is handed an object
satisfying this protocol; signing, HTTP, retries and error-envelope decoding
all live behind it. Exceptions raised by a caller propagate unchanged.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .params import ParameterSet


@runtime_checkable
class Caller(Protocol):
    """Protocol for the transport that executes remote methods.

    Example implementation:

        class SessionCaller:
            def call(self, method, params, api_version=None):
                payload = {**params.encoded(), "v": api_version or "5.40"}
                reply = session.post(f"{API_BASE}/{method}", data=payload).json()
                return reply["response"]
    """

    def call(
        self, method: str, params: ParameterSet, api_version: Optional[str] = None
    ) -> Any:
        """Invoke a remote method.

        Args:
            method: Remote method name, e.g. "audio.get"
            params: Parameters to send (absent values already dropped)
            api_version: Protocol revision the method is pinned to, or None

        Returns:
            The decoded "response" value of the reply
        """
        ...
