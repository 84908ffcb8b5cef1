"""Entities read from a Quake map and the errors raised when reading their properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

_PARSE_FAILURES = (ValueError, TypeError, LookupError, ArithmeticError)


class QuakeEntityError(Exception):
    """Base class for errors about map entities."""


class RequiredPropertyNotFound(QuakeEntityError):
    def __init__(self, property: str) -> None:
        self.property = property
        super().__init__(f"required property `{property}` not found")


class PropertyParseError(QuakeEntityError):
    def __init__(self, property: str, value: str, required_type: str, error: str) -> None:
        self.property = property
        self.value = value
        self.required_type = required_type
        self.error = error
        super().__init__(
            f"requires property `{property}` to be a valid `{required_type}` (got `{value}`). Error: {error}"
        )


class DefinitionNotFound(QuakeEntityError):
    def __init__(self, classname: str) -> None:
        self.classname = classname
        super().__init__(f'definition for "{classname}" not found')


class InvalidBase(QuakeEntityError):
    def __init__(self, classname: str, base_name: str) -> None:
        self.classname = classname
        self.base_name = base_name
        super().__init__(
            f"Entity class {classname} has a base of {base_name}, but that class does not exist"
        )


@dataclass
class QuakeMapEntity:
    """A single map entity: its property map and, for solid entities, its brushes."""

    properties: dict[str, str] = field(default_factory=dict)
    brushes: list[Any] = field(default_factory=list)

    def classname(self) -> str:
        """Return the entity's classname, raising if it has none."""
        try:
            return self.properties["classname"]
        except KeyError:
            raise RequiredPropertyNotFound("classname") from None

    def get(self, key: str, parser: Callable[[str], T]) -> T:
        """Parse the property ``key`` with ``parser``."""
        try:
            raw = self.properties[key]
        except KeyError:
            raise RequiredPropertyNotFound(key) from None
        try:
            return parser(raw)
        except _PARSE_FAILURES as err:
            raise PropertyParseError(
                property=key,
                value=raw,
                required_type=getattr(parser, "__name__", repr(parser)),
                error=str(err),
            ) from err

    def get_or(self, key: str, parser: Callable[[str], T], default: T) -> T:
        """Like :meth:`get`, but return ``default`` when the property is missing."""
        try:
            return self.get(key, parser)
        except RequiredPropertyNotFound:
            return default


class QuakeMapEntities(list):
    """All the entities stored in a Quake map."""

    def worldspawn(self) -> Optional[QuakeMapEntity]:
        """Return the worldspawn entity, normally the first one, or None."""
        for entity in self:
            if entity.properties.get("classname") == "worldspawn":
                return entity
        return None