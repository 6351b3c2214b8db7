"""Items that remember when they were created."""

from dataclasses import dataclass, field
from typing import Protocol, Union, runtime_checkable
import time

from enhanced_containers.constants import CREATION_TIME_KEY
from enhanced_containers.data_model.base import ItemSerializable


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


@runtime_checkable
class HasCreationTimestamp(Protocol):
    """Anything exposing a numeric creation time stamp can be ordered by time."""

    creation_time_stamp: Union[int, float]


@dataclass(frozen=True)
class ItemSerializableWithCreationTime(ItemSerializable):
    """
    An item holding its creation time stamp, in milliseconds since the epoch.

    The time stamp is serialized under the `t` key next to the id, so subclasses only
    serialize their own fields.
    """

    creation_time_stamp: int = field(default_factory=now_ms, kw_only=True)
    "When the item was created"

    def serialize(self):
        out = super().serialize()
        out[CREATION_TIME_KEY] = self.creation_time_stamp
        return out

    @classmethod
    def fields_from_serialized(cls, data):
        fields = super().fields_from_serialized(data)
        if data is not None and data.get(CREATION_TIME_KEY) is not None:
            fields['creation_time_stamp'] = data[CREATION_TIME_KEY]
        return fields
