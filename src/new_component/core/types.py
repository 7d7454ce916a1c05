"""Shared enums."""

from enum import Enum


class ComponentType(str, Enum):
    """Available component templates."""

    CLASS = "class"
    PURE_CLASS = "pure-class"
    FUNCTIONAL = "functional"

    @classmethod
    def parse(cls, value: str) -> "ComponentType":
        """Case-insensitive lookup by value."""
        try:
            return cls(value.lower())
        except ValueError:
            valid = ", ".join(f"'{t.value}'" for t in cls)
            raise ValueError(f"{value!r} is not a valid component type ({valid}).") from None

    @property
    def label(self) -> str:
        labels: dict[ComponentType, str] = {
            ComponentType.CLASS: "Class component",
            ComponentType.PURE_CLASS: "Pure class component",
            ComponentType.FUNCTIONAL: "Functional component",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[ComponentType, str] = {
            ComponentType.CLASS: "Extends React.Component with a render() method.",
            ComponentType.PURE_CLASS: "Extends React.PureComponent; skips re-renders on equal props.",  # noqa: E501
            ComponentType.FUNCTIONAL: "Plain function returning JSX.",
        }
        return descriptions[self]
