"""Query directives understood by the document store's query executor."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

CREATED_AT = "$createdAt"


class QueryMethod(StrEnum):
    """Directive kinds, named as the store's query wire format names them."""

    ORDER_ASC = "orderAsc"
    ORDER_DESC = "orderDesc"
    EQUAL = "equal"
    SEARCH = "search"
    OR = "or"
    LIMIT = "limit"


@dataclass(frozen=True)
class Directive:
    """One sort, filter, search or limit instruction.

    Directives are values: two directives built from the same arguments
    compare equal, which keeps composed query lists comparable.
    """

    method: QueryMethod
    attribute: str | None = None
    values: tuple[Any, ...] = ()

    @classmethod
    def order_asc(cls, attribute: str) -> Directive:
        return cls(QueryMethod.ORDER_ASC, attribute)

    @classmethod
    def order_desc(cls, attribute: str) -> Directive:
        return cls(QueryMethod.ORDER_DESC, attribute)

    @classmethod
    def equal(cls, attribute: str, value: Any) -> Directive:
        """Match documents whose attribute equals value (or any of a list of values)."""
        if isinstance(value, (list, tuple)):
            return cls(QueryMethod.EQUAL, attribute, tuple(value))
        return cls(QueryMethod.EQUAL, attribute, (value,))

    @classmethod
    def search(cls, attribute: str, term: str) -> Directive:
        """Full-text search on one attribute."""
        return cls(QueryMethod.SEARCH, attribute, (term,))

    @classmethod
    def or_(cls, directives: Iterable[Directive]) -> Directive:
        """Match documents satisfying at least one of the nested directives."""
        return cls(QueryMethod.OR, None, tuple(directives))

    @classmethod
    def limit(cls, count: int) -> Directive:
        return cls(QueryMethod.LIMIT, None, (count,))

    def to_dict(self) -> dict[str, Any]:
        """Render in the store's query wire format."""
        payload: dict[str, Any] = {"method": str(self.method)}
        if self.attribute is not None:
            payload["attribute"] = self.attribute
        if self.values:
            payload["values"] = [
                v.to_dict() if isinstance(v, Directive) else v for v in self.values
            ]
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))
