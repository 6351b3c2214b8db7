"""Ordering helpers for containers whose items know when they were created."""

from typing import Iterable, List, TypeVar

from enhanced_containers.containers.list_serializable import ListSerializable
from enhanced_containers.data_model.timed import HasCreationTimestamp

S = TypeVar('S', bound=HasCreationTimestamp)


def to_list_by_time(items: Iterable[S], reversed: bool = False) -> List[S]:
    """Returns a new list sorted by creation time, from the newest to the oldest.

    The order is reversed (oldest first) if `reversed` is true. Items with the same
    time stamp keep their relative order.
    """
    return sorted(items, key=lambda item: item.creation_time_stamp, reverse=not reversed)


class TimedListSerializable(ListSerializable[S]):
    """A `ListSerializable` of items exposing a `creation_time_stamp`."""

    def to_list_by_time(self, reversed: bool = False) -> List[S]:
        return to_list_by_time(self, reversed=reversed)
