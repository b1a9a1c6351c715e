"""
poeaa: Value Object pattern in Python.
Values compare by content; Tag is the worked example, Person an unrelated holder.
"""
from poeaa.config import Config
from poeaa.domain import Person, Tag, ValueObject

__all__ = [
    "Config",
    "Person",
    "Tag",
    "ValueObject",
]
