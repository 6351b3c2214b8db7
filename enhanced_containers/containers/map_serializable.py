from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar
import abc

from enhanced_containers.data_model.base import ItemSerializable
from enhanced_containers.exceptions import ContainerTypeError
from enhanced_containers.references import ByIndex, as_reference
from enhanced_containers.utils.logger import Logger

T = TypeVar('T', bound=ItemSerializable)


class MapSerializable(abc.ABC, Generic[T]):
    """
    A key to item mapping made to handle `ItemSerializable` objects.

    It allows to serialize and deserialize the whole map easily with :meth:`serialize`
    and :meth:`from_serialized`. Keys are strings; wherever a key is expected an item
    may be given instead, in which case its id is the key.
    """

    def __init__(self):
        self._items: Dict[str, T] = {}

    @classmethod
    def from_serialized(cls, data: Dict[str, Any]):
        """Creates a map from a map of serialized items."""
        container = cls()
        container.deserialize(data)
        return container

    @abc.abstractmethod
    def deserialize_item(self, data: Dict[str, Any]) -> T:
        """Returns a new item from the provided serialized data."""

    def serialize(self) -> Dict[str, Dict[str, Any]]:
        """Serializes all of its items into a single map, under their key."""
        serialized = {key: element.serialize() for key, element in self._items.items()}
        Logger().get_logger().debug(f"Serialized {len(serialized)} items of {type(self).__name__}")
        return serialized

    def deserialize(self, data: Dict[str, Any]):
        """Replaces the content of the map with the items of `data`, deserialized with
        :meth:`deserialize_item`. The keys of `data` are kept even when they differ
        from the id of the item."""
        items = {key: self.deserialize_item(element) for key, element in data.items()}
        self._items.clear()
        self._items.update(items)
        Logger().get_logger().debug(f"Deserialized {len(items)} items into {type(self).__name__}")

    def add(self, item: T, key: Optional[str] = None):
        """Adds `item` under `key`, or under its id when no key is given.
        An item already stored under that key is overwritten."""
        self._items[self._get_key(key if key is not None else item)] = item

    def replace(self, item: T, key: Optional[str] = None):
        """Updates the value stored under `key`, or under the id of `item`.
        Same as :meth:`add`: nothing has to be stored under the key beforehand."""
        self[key if key is not None else item] = item

    def get(self, key) -> Optional[T]:
        """Returns the item specified by `key`, None if there is none."""
        return self._items.get(self._get_key(key))

    def remove(self, value):
        """Removes a single item from the map. Does nothing if the key is absent."""
        self._items.pop(self._get_key(value), None)

    def contains_key(self, key) -> bool:
        """Returns if the element specified by `key` is in the map."""
        return self._get_key(key) in self._items

    def clear(self):
        """Removes all objects from this map; the length of the map becomes zero."""
        self._items.clear()

    def keys(self) -> List[str]:
        return list(self._items.keys())

    def values(self) -> List[T]:
        return list(self._items.values())

    def items(self) -> List[Tuple[str, T]]:
        return list(self._items.items())

    def _get_key(self, value) -> str:
        """Returns the key represented by `value` using different methods depending on its type.

        Raises:
            ContainerTypeError: If `value` is neither a key nor an item.
        """
        reference = as_reference(value, "map")
        if isinstance(reference, ByIndex):
            raise ContainerTypeError(value, "map")
        return reference.id

    def __getitem__(self, key) -> Optional[T]:
        return self.get(key)

    def __setitem__(self, key, item: T):
        """Sets the value of the item to `item` under `key`."""
        self._items[self._get_key(key)] = item

    def __delitem__(self, key):
        self.remove(key)

    def __contains__(self, key) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[Tuple[str, T]]:
        """Iterates over the (key, item) pairs."""
        return iter(self._items.items())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)})"
