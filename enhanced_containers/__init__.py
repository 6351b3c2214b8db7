"""Serializable list and map containers for items identified by a stable id."""

from enhanced_containers._version import __version__
from enhanced_containers.containers import (
    ListSerializable,
    MapSerializable,
    NamedItemSerializableList,
    TimedListSerializable,
    to_list_by_time
)
from enhanced_containers.data_model import (
    HasCreationTimestamp,
    ItemSerializable,
    ItemSerializableWithCreationTime,
    NamedItemSerializable,
    new_id
)
from enhanced_containers.exceptions import (
    ContainerTypeError,
    ItemNotFoundError,
    MissingIdError
)
from enhanced_containers.references import ById, ByIndex, ByItem, Reference


__all__ = [
    "__version__",
    "ListSerializable",
    "MapSerializable",
    "NamedItemSerializableList",
    "TimedListSerializable",
    "to_list_by_time",
    "HasCreationTimestamp",
    "ItemSerializable",
    "ItemSerializableWithCreationTime",
    "NamedItemSerializable",
    "new_id",
    "ContainerTypeError",
    "ItemNotFoundError",
    "MissingIdError",
    "ById",
    "ByIndex",
    "ByItem",
    "Reference"
]
