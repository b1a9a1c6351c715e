"""Domain layer: ValueObject base, Tag value type, Person data holder."""
from poeaa.domain.value_object import ValueObject
from poeaa.domain.tag import Tag
from poeaa.domain.person import Person

__all__ = [
    "ValueObject",
    "Tag",
    "Person",
]
