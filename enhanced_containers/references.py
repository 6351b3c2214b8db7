"""
The three ways of pointing at an element of a container: by position, by id, or by
handing over the item itself, in which case its id is used.
"""

from dataclasses import dataclass
from typing import Union

from enhanced_containers.data_model.base import ItemSerializable
from enhanced_containers.exceptions import ContainerTypeError


@dataclass(frozen=True)
class ByIndex:
    index: int


@dataclass(frozen=True)
class ById:
    id: str


@dataclass(frozen=True)
class ByItem:
    item: ItemSerializable

    @property
    def id(self) -> str:
        return self.item.id


Reference = Union[ByIndex, ById, ByItem]


def as_reference(value, container: str = "list") -> Reference:
    """Wrap an int, a str or an item into the matching reference.

    Args:
        value: The raw reference, or an already built `Reference`.
        container: Name of the container, used in the error message.

    Raises:
        ContainerTypeError: If `value` is of any other type. Booleans are rejected
            even though they are ints.
    """
    if isinstance(value, (ByIndex, ById, ByItem)):
        return value
    if isinstance(value, bool):
        raise ContainerTypeError(value, container)
    if isinstance(value, int):
        return ByIndex(value)
    if isinstance(value, str):
        return ById(value)
    if isinstance(value, ItemSerializable):
        return ByItem(value)
    raise ContainerTypeError(value, container)
