"""Errors raised by the containers when they are used incorrectly."""


class ContainerTypeError(TypeError):
    """Raised when a reference or key is of a type a container cannot resolve."""

    def __init__(self, value, container: str):
        self.value = value
        super().__init__(
            f"Wrong type for getting an element of the {container}: {type(value).__name__}"
        )


class ItemNotFoundError(LookupError):
    """Raised when no item of a container carries the requested id."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"No element with id '{item_id}'")


class MissingIdError(KeyError):
    """Raised when serialized data has no id and the configuration forbids generating one."""
