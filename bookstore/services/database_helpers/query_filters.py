# /bookstore/services/database_helpers/query_filters.py

from sqlalchemy.orm import Query

# A filter value equal to this sentinel means "do not filter on this column".
WILDCARD = "%"


def apply_contains_filter(query: Query, column, value: str) -> Query:
    """
    Narrows `query` to rows whose `column` contains `value` as a substring
    (LIKE '%value%'). The wildcard sentinel leaves the query untouched.
    """
    if value is None or value == WILDCARD:
        return query
    # autoescape keeps user-supplied '%' and '_' literal inside the pattern.
    return query.filter(column.contains(value, autoescape=True))
