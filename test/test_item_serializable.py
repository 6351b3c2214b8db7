import dataclasses
import logging
import uuid
from dataclasses import dataclass

import pytest

from enhanced_containers.configuration.config_loader import set_config
from enhanced_containers.configuration.configuration_model import ContainersConfiguration
from enhanced_containers.data_model import ItemSerializable, NamedItemSerializable
from enhanced_containers.exceptions import MissingIdError


@dataclass(frozen=True)
class Counter(ItemSerializable):
    count: int = 0

    def serialized_map(self):
        return {"count": self.count, "id": "overwritten"}

    @classmethod
    def fields_from_serialized(cls, data):
        return {"count": data["count"]}


def test_generated_id_is_uuid4():
    item = Counter()
    assert uuid.UUID(item.id).version == 4, "Expected a version 4 UUID"
    assert Counter().id != item.id, "Expected every generated id to be different"


def test_explicit_id_is_kept():
    assert Counter(3, id="abc").id == "abc"


def test_id_is_immutable():
    item = Counter(id="abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.id = "other"


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        ItemSerializable()


def test_serialize_injects_id_over_subclass_value():
    assert Counter(2, id="abc").serialize() == {"count": 2, "id": "abc"}


def test_from_serialized_keeps_id():
    item = Counter.from_serialized({"id": "abc", "count": 5})
    assert item == Counter(5, id="abc")


def test_round_trip_keeps_identity():
    item = Counter(7)
    assert Counter.from_serialized(item.serialize()) == item


def test_missing_id_generates_one_and_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="enhanced_containers"):
        item = Counter.from_serialized({"count": 1})
    assert uuid.UUID(item.id).version == 4
    assert "has no 'id' field" in caplog.text, "Expected a warning about the missing id"


def test_null_id_generates_one():
    first = Counter.from_serialized({"id": None, "count": 1})
    second = Counter.from_serialized({"id": None, "count": 1})
    assert first.id != second.id


def test_id_from_none_data():
    assert ItemSerializable.id_from_serialized(None)


def test_missing_id_raises_with_raise_policy():
    set_config(ContainersConfiguration(missing_id_policy="raise"))
    with pytest.raises(MissingIdError):
        Counter.from_serialized({"count": 1})
    assert Counter.from_serialized({"id": "abc", "count": 1}).id == "abc"


def test_named_item_serialization():
    item = NamedItemSerializable("Alice", id="12")
    assert item.serialize() == {"id": "12", "n": "Alice"}
    assert NamedItemSerializable.from_serialized({"id": "12", "n": "Alice"}) == item


def test_named_item_missing_name():
    with pytest.raises(KeyError):
        NamedItemSerializable.from_serialized({"id": "12"})


@pytest.mark.parametrize(
    "item_id, expected",
    [
        ("12", "12 - Alice"),
        ("-4", "-4 - Alice"),
        ("abc", "None - Alice"),
    ],
)
def test_id_with_name(item_id, expected):
    assert NamedItemSerializable("Alice", id=item_id).id_with_name == expected
