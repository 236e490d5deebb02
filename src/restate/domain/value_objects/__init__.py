"""Domain value objects."""

from restate.domain.value_objects.query import CREATED_AT, Directive, QueryMethod

__all__ = [
    "CREATED_AT",
    "Directive",
    "QueryMethod",
]
