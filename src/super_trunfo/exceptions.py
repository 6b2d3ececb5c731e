class SuperTrunfoError(Exception):
    """Base class for errors raised by the card game core."""


def _label(attribute) -> str:
    return getattr(attribute, "name", repr(attribute))


class UnknownAttribute(SuperTrunfoError, ValueError):
    """An attribute identifier outside the six known attributes was supplied."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown attribute: {value!r}. Choose between 1 and 6.")


class DuplicateAttributeSelection(SuperTrunfoError, ValueError):
    """The same attribute was chosen twice for one match."""

    def __init__(self, attribute):
        self.attribute = attribute
        super().__init__(f"Attribute {_label(attribute)} was chosen twice. Select two different attributes.")


class MetricsNotComputed(SuperTrunfoError):
    """A derived attribute was read before the profile's metrics were computed."""
