"""Directive lists for property listings."""

from restate.domain.value_objects import CREATED_AT, Directive

ALL_FILTER = "All"
LATEST_LIMIT = 5
SEARCH_FIELDS = ("name", "address", "type")


def compose_listing_query(
    filter: str | None = None,
    search_term: str | None = None,
    limit: int | None = None,
) -> list[Directive]:
    """Build the listing query: newest first, optional type, search and cap.

    Directive order is significant to the executor and is always
    sort, type filter, search, limit. Any non-zero limit is passed through
    as given, negative values included; validating it is left to the store.
    """
    directives = [Directive.order_desc(CREATED_AT)]

    if filter and filter != ALL_FILTER:
        directives.append(Directive.equal("type", filter))

    if search_term:
        directives.append(
            Directive.or_(Directive.search(f, search_term) for f in SEARCH_FIELDS)
        )

    if limit:
        directives.append(Directive.limit(limit))

    return directives


def compose_latest_query() -> list[Directive]:
    """Five documents, ascending by creation time."""
    return [Directive.order_asc(CREATED_AT), Directive.limit(LATEST_LIMIT)]
