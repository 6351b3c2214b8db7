from dataclasses import dataclass
from typing import Optional

from enhanced_containers.constants import ID_KEY, NAME_KEY
from enhanced_containers.data_model.base import ItemSerializable


def _try_parse_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class NamedItemSerializable(ItemSerializable):
    """An item with a human readable name, stored under the `n` key."""

    name: str
    "The name of the item"

    def serialized_map(self):
        return {ID_KEY: self.id, NAME_KEY: self.name}

    @classmethod
    def fields_from_serialized(cls, data):
        return {**super().fields_from_serialized(data), 'name': data[NAME_KEY]}

    @property
    def id_with_name(self) -> str:
        """The id, read as an integer, followed by the name.
        A non numeric id is shown as `None`."""
        return f"{_try_parse_int(self.id)} - {self.name}"
