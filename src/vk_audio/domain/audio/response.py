"""
Response wrapper and response-array decomposition.

Several audio methods reply with an array whose first element is metadata
(a total count, or the owner's user record) followed by the homogeneous
payload. decompose() is the single place that peels those leading
elements off before the payload is projected.
"""

from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar

from .exceptions import ResponseFormatError

T = TypeVar("T")
L = TypeVar("L")


class VkResponse:
    """Read-only view over a decoded reply value."""

    __slots__ = ("raw",)

    def __init__(self, raw: Any):
        self.raw = raw

    @classmethod
    def wrap(cls, value: Any) -> "VkResponse":
        """Wrap value unless it is already a VkResponse."""
        return value if isinstance(value, cls) else cls(value)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(self.raw, dict):
            return self.raw.get(key)
        if isinstance(self.raw, (list, tuple)):
            try:
                return self.raw[key]
            except (TypeError, IndexError) as e:
                raise ResponseFormatError(
                    f"Cannot index an array response of length {len(self.raw)} with {key!r}"
                ) from e
        raise ResponseFormatError(
            f"Cannot index a {type(self.raw).__name__} response with {key!r}"
        )

    def __len__(self) -> int:
        return len(self.as_list())

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_list())

    def __repr__(self) -> str:
        return f"VkResponse({self.raw!r})"

    def skip(self, count: int) -> List[Any]:
        """Return the array elements after the first `count`."""
        return self.as_list()[count:]

    def as_list(self) -> List[Any]:
        if self.raw is None:
            return []
        if isinstance(self.raw, (list, tuple)):
            return list(self.raw)
        raise ResponseFormatError(
            f"Expected an array response, got {type(self.raw).__name__}"
        )

    def as_int(self) -> int:
        try:
            return int(self.raw)
        except (TypeError, ValueError) as e:
            raise ResponseFormatError(f"Expected an integer response, got {self.raw!r}") from e

    def as_bool(self) -> bool:
        # The API answers 1 for success
        if isinstance(self.raw, bool):
            return self.raw
        if isinstance(self.raw, (int, str)):
            return str(self.raw).strip().lower() in ("1", "true")
        raise ResponseFormatError(f"Expected a boolean response, got {self.raw!r}")

    def as_str(self) -> str:
        if self.raw is None or isinstance(self.raw, (dict, list, tuple)):
            raise ResponseFormatError(f"Expected a string response, got {self.raw!r}")
        return str(self.raw)

    def as_dict(self) -> dict:
        if not isinstance(self.raw, dict):
            raise ResponseFormatError(
                f"Expected an object response, got {type(self.raw).__name__}"
            )
        return self.raw


def decompose(
    response: Any,
    decode_item: Callable[[Any], T],
    lead_count: int = 1,
    decode_lead: Optional[Callable[[Any], L]] = None,
) -> Tuple[List[L], List[T]]:
    """Split a response array into decoded leading elements and payload.

    Args:
        response: Reply value (raw or VkResponse) holding an array
        decode_item: Decoder applied to each payload element
        lead_count: Number of leading metadata elements to peel off
        decode_lead: Decoder for the leading elements (identity if None)

    Returns:
        (leading, items). Both keep response order; leading is shorter than
        lead_count when the array is.
    """
    elements = VkResponse.wrap(response).as_list()
    head, rest = elements[:lead_count], elements[lead_count:]

    if decode_lead is not None:
        head = [decode_lead(element) for element in head]

    return head, [decode_item(element) for element in rest]
