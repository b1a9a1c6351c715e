"""ValueObject: value without identity; equality by fields."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject:
    """
    Value object: equality and hash by all fields (via dataclass).
    Subclasses are frozen dataclasses; declare eq=False to supply custom __eq__/__hash__.
    """
    pass
