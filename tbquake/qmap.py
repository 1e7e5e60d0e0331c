"""Entities of a Quake map and the errors raised when reading their properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TypeVar

T = TypeVar("T")


class QuakeEntityError(Exception):
    """Base class for errors about map entities."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), str(self)))


class RequiredPropertyNotFound(QuakeEntityError):
    def __init__(self, property: str):
        self.property = property
        super().__init__(f"required property `{property}` not found")


class PropertyParseError(QuakeEntityError):
    def __init__(self, property: str, required_type: str, error: str):
        self.property = property
        self.required_type = required_type
        self.error = error
        super().__init__(
            f"requires property `{property}` to be a valid `{required_type}`. Error: {error}"
        )


class DefinitionNotFound(QuakeEntityError):
    def __init__(self, classname: str):
        self.classname = classname
        super().__init__(f'definition for "{classname}" not found')


class InvalidBase(QuakeEntityError):
    def __init__(self, classname: str, base_name: str):
        self.classname = classname
        self.base_name = base_name
        super().__init__(
            f"Entity class {classname} has a base of {base_name}, but that class does not exist"
        )


@dataclass
class QuakeMapEntity:
    """A single map entity: its property map and, for solid entities, its brushes."""

    properties: Dict[str, str] = field(default_factory=dict)
    brushes: List[Any] = field(default_factory=list)

    def classname(self) -> str:
        """Return the entity's classname, raising RequiredPropertyNotFound if it has none."""
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
        except (ValueError, TypeError, ArithmeticError) as err:
            type_name = getattr(parser, "__name__", repr(parser))
            raise PropertyParseError(key, type_name, str(err)) from err


class QuakeMapEntities(list):
    """All the entities stored in a Quake map."""

    def worldspawn(self) -> Optional[QuakeMapEntity]:
        """Return the worldspawn entity, or None if the map has none."""
        for entity in self:
            if entity.properties.get("classname") == "worldspawn":
                return entity
        return None


def with_default(call: Callable[[], T], default: T) -> T:
    """Run ``call``; if a required property is missing, return ``default`` instead."""
    try:
        return call()
    except RequiredPropertyNotFound:
        return default