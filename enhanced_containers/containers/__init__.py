"""Serializable containers of `ItemSerializable` objects."""

from enhanced_containers.containers.list_serializable import (
    ListSerializable,
    NamedItemSerializableList
)
from enhanced_containers.containers.map_serializable import (
    MapSerializable
)
from enhanced_containers.containers.ordering import (
    TimedListSerializable,
    to_list_by_time
)


__all__ = [
    "ListSerializable",
    "NamedItemSerializableList",
    "MapSerializable",
    "TimedListSerializable",
    "to_list_by_time"
]
