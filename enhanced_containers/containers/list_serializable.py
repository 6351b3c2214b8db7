from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar
import abc

from enhanced_containers.data_model.base import ItemSerializable
from enhanced_containers.data_model.named import NamedItemSerializable
from enhanced_containers.exceptions import ItemNotFoundError
from enhanced_containers.references import ByIndex, as_reference
from enhanced_containers.utils.logger import Logger

T = TypeVar('T', bound=ItemSerializable)
U = TypeVar('U')
N = TypeVar('N', bound=NamedItemSerializable)


class ListSerializable(abc.ABC, Generic[T]):
    """
    An ordered container made to handle `ItemSerializable` objects.

    It allows to serialize and deserialize the whole list easily with :meth:`serialize`
    and :meth:`from_serialized`. Elements are reached by position, by id or by item,
    see :func:`enhanced_containers.references.as_reference`.

    The list does not enforce unique ids. Lookups by id return the first match.
    """

    def __init__(self):
        self._items: List[T] = []

    @classmethod
    def from_serialized(cls, data: Dict[str, Any]):
        """Creates a list from a map of serialized items."""
        container = cls()
        container.deserialize(data)
        return container

    @abc.abstractmethod
    def deserialize_item(self, data: Dict[str, Any]) -> T:
        """Returns a new item from the provided serialized data."""

    def serialize(self) -> Dict[str, Dict[str, Any]]:
        """Serializes all of its items into a single map, keyed by their id.
        The order of the list is not part of the result."""
        serialized = {}
        for element in self._items:
            serialized[element.id] = element.serialize()
        Logger().get_logger().debug(f"Serialized {len(serialized)} items of {type(self).__name__}")
        return serialized

    def deserialize(self, data: Dict[str, Any]):
        """Replaces the content of the list with the items of `data`, deserialized with
        :meth:`deserialize_item` in the iteration order of `data`."""
        items = [self.deserialize_item(element) for element in data.values()]
        self._items.clear()
        self._items.extend(items)
        Logger().get_logger().debug(f"Deserialized {len(items)} items into {type(self).__name__}")

    @property
    def raw_list(self) -> List[T]:
        """The backing list. This must be used with great care since modifying it
        can result in an ill-state of the container."""
        return self._items

    def add(self, item: T):
        """Adds `item` to the end of this list, extending the length by one."""
        self._items.append(item)

    def add_all(self, items: Iterable[T]):
        """Adds all of `items` to the end of this list."""
        self._items.extend(items)

    def replace(self, item: T):
        """Updates the value of `item`.

        This only works when the ids of the new and old value are identical.

        Raises:
            IndexError: If no element has the id of `item`.
        """
        self._items[self._get_index(item)] = item

    def remove(self, value):
        """Removes a single item from the list.

        This method accepts an `int` as an index, a `str` as an id,
        and an `ItemSerializable` as the item to remove.
        """
        del self._items[self._get_index(value)]

    def move(self, old_index: int, new_index: int):
        """Moves an item from one position to another.

        `new_index` is counted before the item is taken out of the list, so moving
        the first of `[A, B, C, D]` to 2 gives `[B, A, C, D]`. It may be equal to the
        length of the list to move the item to the end.
        """
        length = len(self._items)
        if not 0 <= old_index < length:
            raise IndexError(f"Index {old_index} out of range for a list of length {length}")
        if not 0 <= new_index <= length:
            raise IndexError(f"Index {new_index} out of range for a list of length {length}")

        if new_index > old_index:
            new_index -= 1
        item = self._items.pop(old_index)
        self._items.insert(new_index, item)

    def clear(self):
        """Removes all objects from this list; the length of the list becomes zero."""
        self._items.clear()

    def index_where(self, test: Callable[[T], bool], start: int = 0) -> int:
        """The first index in the list that satisfies the provided `test`.

        Searches the list from index `start` to the end of the list.
        Returns -1 if no element satisfies `test`.
        """
        for index in range(max(start, 0), len(self._items)):
            if test(self._items[index]):
                return index
        return -1

    def first_where_or_none(self, test: Callable[[T], bool],
                            or_else: Optional[Callable[[], T]] = None) -> Optional[T]:
        """The first object in the list that satisfies the provided `test`.

        If no element satisfies `test`, the result of `or_else` is returned,
        or None when `or_else` is omitted.
        """
        for element in self._items:
            if test(element):
                return element
        return or_else() if or_else is not None else None

    def from_id(self, id: str) -> T:
        """Return the element with the specified `id`.

        Raises:
            ItemNotFoundError: If no element has this id.
        """
        element = self.from_id_or_none(id)
        if element is None:
            raise ItemNotFoundError(id)
        return element

    def from_id_or_none(self, id: str) -> Optional[T]:
        return self.first_where_or_none(lambda element: element.id == id)

    def has_id(self, id: str) -> bool:
        """Return whether the specified `id` is in the list."""
        return self.index_where(lambda element: element.id == id) >= 0

    def map(self, to_element: Callable[[T], U]) -> List[U]:
        return [to_element(element) for element in self._items]

    def map_remove_none(self, to_element: Callable[[T], Optional[U]]) -> List[U]:
        return [mapped for mapped in self.map(to_element) if mapped is not None]

    def _get_index(self, value) -> int:
        """Returns the index of `value` using different methods depending on its type.

        Raises:
            ContainerTypeError: If `value` is not an index, an id or an item.
            IndexError: If the index is out of range or no element has the id.
        """
        reference = as_reference(value, "list")
        if isinstance(reference, ByIndex):
            index = reference.index
            if not 0 <= index < len(self._items):
                raise IndexError(f"Index {index} out of range for a list of length {len(self._items)}")
            return index

        index = self.index_where(lambda element: element.id == reference.id)
        if index < 0:
            raise IndexError(f"No element with id '{reference.id}' in the list")
        return index

    def __getitem__(self, value) -> T:
        """Returns the item at the location specified by `value`.

        This method accepts an `int` as an index, a `str` as an id,
        and an `ItemSerializable` whose id is used.
        """
        return self._items[self._get_index(value)]

    def __setitem__(self, value, item: T):
        """Sets the value of the item to `item` at the specified location."""
        self._items[self._get_index(value)] = item

    def __delitem__(self, value):
        self.remove(value)

    def __contains__(self, element) -> bool:
        """A `str` is looked up among the ids, anything else among the elements."""
        if isinstance(element, str):
            return any(item.id == element for item in self._items)
        return element in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[item.id for item in self._items]})"


class NamedItemSerializableList(ListSerializable[N]):
    """A `ListSerializable` of `NamedItemSerializable`."""

    def from_name_or_none(self, name: str) -> Optional[N]:
        """Return the first element called `name`, None if there is none."""
        return self.first_where_or_none(lambda element: element.name == name)
