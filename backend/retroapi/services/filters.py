"""
Retro Board Backend — Query-String Filters
===========================================

What:  Turns list-route query parameters into SQLAlchemy WHERE clauses.
How:   Each service declares a mapping of public field name → FilterField
       (a parser for the raw string and a builder for the clause).
       Repeated keys (`?category=Keep&category=Drop`) match any of the values.
Who:   Used by the list_* methods of every resource service.

Behavior:
    - No parameters: no clauses (the route returns every record)
    - Unknown field or unparsable value: ValidationError (→ 400)
    - Valid filter matching nothing: empty list, never an error
"""

import uuid
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Tuple

from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement

from retroapi.exceptions import ValidationError


class FilterField(NamedTuple):
    parse: Callable[[str], Any]
    clause: Callable[[Any], ColumnElement]


def parse_uuid(raw: str) -> uuid.UUID:
    return uuid.UUID(raw)


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in {"true", "1", "yes"}:
        return True
    if value in {"false", "0", "no"}:
        return False
    raise ValueError(f"'{raw}' is not a boolean")


def parse_str(raw: str) -> str:
    return raw


def build_filters(
    params: Iterable[Tuple[str, str]],
    fields: Dict[str, FilterField],
) -> List[ColumnElement]:
    """
    Build WHERE clauses from query-string pairs.

    Args:
        params: (key, value) pairs, e.g. `request.query_params.multi_items()`
        fields: Allowed filter fields for the resource

    Returns:
        One clause per distinct key; values of a repeated key are OR-ed.

    Raises:
        ValidationError: Unknown key or a value the field cannot parse
    """
    grouped: Dict[str, List[str]] = defaultdict(list)
    for key, value in params:
        grouped[key].append(value)

    clauses: List[ColumnElement] = []
    for key, values in grouped.items():
        field = fields.get(key)
        if field is None:
            raise ValidationError(
                message=f"Unknown filter '{key}'. Allowed: {', '.join(sorted(fields))}",
                field=key,
            )
        parsed = []
        for value in values:
            try:
                parsed.append(field.parse(value))
            except ValueError:
                raise ValidationError(
                    message=f"Invalid value '{value}' for filter '{key}'",
                    field=key,
                )
        if len(parsed) == 1:
            clauses.append(field.clause(parsed[0]))
        else:
            clauses.append(or_(*(field.clause(v) for v in parsed)))
    return clauses
