"""
Outgoing parameter bag for remote method calls.

A ParameterSet is an ordered mapping that never holds None: absent
optional arguments are dropped on insertion, so they never reach the wire.
"""

from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from loguru import logger

from .exceptions import InvalidArgumentError


class ParameterSet(dict):
    """Ordered key -> value mapping that omits absent values."""

    def __init__(self, pairs: Optional[Iterable[Tuple[str, Any]]] = None):
        super().__init__()
        for key, value in pairs or ():
            self.add(key, value)

    def add(self, key: str, value: Any) -> "ParameterSet":
        """Store value under key unless it is None. Returns self for chaining."""
        if value is not None:
            self[key] = value
        return self

    def __setitem__(self, key: str, value: Any) -> None:
        if value is None:
            # Assigning None means "absent"
            self.pop(key, None)
            return
        super().__setitem__(key, value)

    def update(self, *args: Any, **kwargs: Any) -> None:
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key: str, default: Any = None) -> Any:
        if key not in self:
            self[key] = default
        return self.get(key)

    def __ior__(self, other: Any) -> "ParameterSet":
        self.update(other)
        return self

    def encoded(self) -> Dict[str, str]:
        """Render every value as the string the remote API expects.

        Booleans become "1"/"0", enums their value, sequences are comma-joined.
        """
        return {key: _encode_value(value) for key, value in self.items()}


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, Iterable):
        return ",".join(_encode_value(item) for item in value)
    return str(value)


def require_present(name: str, value: Any) -> Any:
    """Fail if value is None."""
    if value is None:
        logger.warning(f"Rejected call: parameter '{name}' is None")
        raise InvalidArgumentError(name, f"Parameter '{name}' can not be null")
    return value


def require_non_empty(name: str, value: Any) -> Any:
    """Fail if value is None, an empty string or an empty collection."""
    require_present(name, value)
    if len(value) == 0:
        logger.warning(f"Rejected call: parameter '{name}' is empty")
        raise InvalidArgumentError(name)
    return value


def require_unsigned(name: str, value: Optional[int]) -> Optional[int]:
    """Fail if a (possibly absent) identifier is negative."""
    if value is not None and value < 0:
        logger.warning(f"Rejected call: parameter '{name}' is negative ({value})")
        raise InvalidArgumentError(
            name, f"Parameter '{name}' must be non-negative, got {value}"
        )
    return value
