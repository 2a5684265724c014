"""Built-in codecs for scalar rich types."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import AnyUrl

from wrapped_defaults.codecs.registry import CodecRegistry, register_codec
from wrapped_defaults.core.contracts import Codec


class PassThroughCodec(Codec[Any, Any]):
    """Scalars the store holds natively are their own stored value."""

    def __init__(self, rich_type: type):
        super().__init__(rich_type)
        self.rich_type = rich_type

    def to_stored(self, value: Any) -> Any:
        return value

    def from_stored(self, stored: Any) -> Any:
        return stored


@register_codec(datetime)
class DateCodec(Codec[datetime, float]):
    """Stores a datetime as float seconds since the Unix epoch.

    Naive datetimes are taken to be UTC. Values come back UTC-aware, equal to the
    original up to float precision (roughly a microsecond for present-day dates).
    """

    def __init__(self) -> None:
        super().__init__(float)

    def to_stored(self, value: datetime) -> float:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()

    def from_stored(self, stored: float) -> datetime:
        # JSON-backed stores hand integral seconds back as int
        seconds = float(stored)
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            # datetime.max rounds up past year 9999 as a float
            edge = datetime.max if seconds > 0 else datetime.min
            return edge.replace(tzinfo=timezone.utc)


for _scalar in (bool, int, float, str, bytes, AnyUrl):
    CodecRegistry.register(rich_type=_scalar, codec=PassThroughCodec(_scalar))
