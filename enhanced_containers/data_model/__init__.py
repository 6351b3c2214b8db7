"""Base classes for the items stored in the containers."""

from enhanced_containers.data_model.base import (
    ItemSerializable,
    new_id
)
from enhanced_containers.data_model.named import (
    NamedItemSerializable
)
from enhanced_containers.data_model.timed import (
    HasCreationTimestamp,
    ItemSerializableWithCreationTime
)


__all__ = [
    "ItemSerializable",
    "new_id",
    "NamedItemSerializable",
    "HasCreationTimestamp",
    "ItemSerializableWithCreationTime"
]
