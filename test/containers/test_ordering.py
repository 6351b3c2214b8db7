from dataclasses import dataclass

import pytest

from enhanced_containers.containers import TimedListSerializable, to_list_by_time
from enhanced_containers.data_model import HasCreationTimestamp, ItemSerializableWithCreationTime


@dataclass(frozen=True)
class Message(ItemSerializableWithCreationTime):
    text: str

    def serialized_map(self):
        return {"text": self.text}

    @classmethod
    def fields_from_serialized(cls, data):
        return {**super().fields_from_serialized(data), "text": data["text"]}


class Messages(TimedListSerializable[Message]):
    def deserialize_item(self, data):
        return Message.from_serialized(data)


@dataclass
class Event:
    creation_time_stamp: float


@pytest.fixture()
def messages():
    messages = Messages()
    for stamp in (10, 30, 20):
        messages.add(Message(str(stamp), creation_time_stamp=stamp))
    return messages


def _stamps(items):
    return [item.creation_time_stamp for item in items]


def test_newest_first_by_default(messages):
    assert _stamps(messages.to_list_by_time()) == [30, 20, 10]


def test_oldest_first_when_reversed(messages):
    assert _stamps(messages.to_list_by_time(reversed=True)) == [10, 20, 30]


def test_sorting_does_not_touch_the_list(messages):
    messages.to_list_by_time()
    assert _stamps(messages) == [10, 30, 20]


def test_function_accepts_any_timed_object():
    events = [Event(1.5), Event(0.5)]
    assert isinstance(events[0], HasCreationTimestamp)
    assert to_list_by_time(events, reversed=True) == [Event(0.5), Event(1.5)]


def test_ties_keep_input_order():
    first, second = Message("first", creation_time_stamp=5), Message("second", creation_time_stamp=5)
    assert to_list_by_time([first, second]) == [first, second]


def test_creation_time_is_serialized():
    message = Message("hi", id="m", creation_time_stamp=42)
    assert message.serialize() == {"text": "hi", "id": "m", "t": 42}
    assert Message.from_serialized(message.serialize()) == message


def test_creation_time_defaults_to_now():
    message = Message.from_serialized({"id": "m", "text": "hi"})
    assert message.creation_time_stamp > 1_600_000_000_000
