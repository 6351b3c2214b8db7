from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import abc
import uuid

from enhanced_containers.configuration.config_loader import get_config
from enhanced_containers.constants import ID_KEY
from enhanced_containers.exceptions import MissingIdError
from enhanced_containers.utils.logger import Logger


def new_id() -> str:
    """Return a new random identifier, a version 4 UUID as a string."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class ItemSerializable(abc.ABC):
    """
    This is the common base class for all the items held by the custom containers.
    Items carry an identifier that never changes and know how to turn themselves into
    a flat dictionary.

    Subclasses must be frozen dataclasses themselves, or plain classes.
    """

    id: str = field(default_factory=new_id, kw_only=True)
    """The global id of the instance. A random one is generated when it is not provided."""

    @abc.abstractmethod
    def serialized_map(self) -> Dict[str, Any]:
        """Must be overridden to serialize the fields of the item other than its id."""

    def serialize(self) -> Dict[str, Any]:
        """Serializes the item. Any `id` returned by :meth:`serialized_map` is overwritten."""
        out = dict(self.serialized_map())
        out[ID_KEY] = self.id
        return out

    @staticmethod
    def id_from_serialized(data: Optional[Dict[str, Any]]) -> str:
        """
        Read the id stored in serialized data.

        When the data holds no id, a new one is generated, unless the active configuration
        uses the 'raise' missing id policy in which case a `MissingIdError` is raised.
        """
        if data is not None and data.get(ID_KEY) is not None:
            return data[ID_KEY]

        if get_config().missing_id_policy == 'raise':
            raise MissingIdError(f"Serialized data has no '{ID_KEY}' field")

        generated = new_id()
        Logger().get_logger().warning(
            f"Serialized data has no '{ID_KEY}' field, generated id {generated}")
        return generated

    @classmethod
    def fields_from_serialized(cls, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Constructor arguments other than the id read from serialized data.
        Overridden by items that serialize additional fields."""
        return {}

    @classmethod
    def from_serialized(cls, data: Optional[Dict[str, Any]]):
        """Creates an item from its serialized form."""
        return cls(id=cls.id_from_serialized(data), **cls.fields_from_serialized(data))
