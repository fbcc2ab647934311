"""Helpers for building TypeScript type expressions as text."""

from collections.abc import Iterable

__all__ = [
    'ANY',
    'NEVER',
    'OPEN_MAP',
    'UNCONSTRAINED',
    'UNKNOWN',
    'comment',
    'ts_array_of',
    'ts_intersection_of',
    'ts_literal',
    'ts_partial',
    'ts_record_of',
    'ts_tuple_of',
    'ts_union_of',
]

# Returned for nodes that carry no recognised shape. Callers treat it as "no
# constraint"; it is never an error.
UNCONSTRAINED = ''

ANY = 'any'
UNKNOWN = 'unknown'
NEVER = 'never'
OPEN_MAP = '{ [key: string]: any }'


def ts_union_of(types: Iterable[str]) -> str:
    types = [str(t) for t in types]
    if not types:
        return NEVER
    if len(types) == 1:
        return types[0]
    return f'({") | (".join(types)})'


def ts_intersection_of(types: Iterable[str]) -> str:
    types = [str(t) for t in types]
    if not types:
        return UNKNOWN
    if len(types) == 1:
        return types[0]
    return f'({") & (".join(types)})'


def ts_partial(type_: str) -> str:
    return f'Partial<{type_}>'


def ts_array_of(type_: str) -> str:
    return f'({type_})[]'


def ts_tuple_of(types: Iterable[str]) -> str:
    return f'[{", ".join(types)}]'


def ts_record_of(value_type: str) -> str:
    """Open string-keyed map whose values are `value_type`."""
    return f'{{ [key: string]: {value_type} }}'


def ts_literal(value) -> str:
    """Render a scalar enum member as a TypeScript literal type.

    Strings are single-quoted with backslashes, quotes and line breaks
    escaped so the result is always one string literal on one line. bool is
    checked before int since it is a subclass of it.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return repr(value)
    escaped = (
        str(value)
        .replace('\\', '\\\\')
        .replace("'", "\\'")
        .replace('\n', '\\n')
        .replace('\r', '\\r')
        .replace('\t', '\\t')
    )
    return f"'{escaped}'"


def comment(text: str) -> str:
    """Format text as a JSDoc comment placed above a declaration."""
    text = str(text).strip().replace('*/', '*\\/')
    if '\n' not in text:
        return f'/** {text} */\n'
    lines = text.replace('\r\n', '\n').split('\n')
    body = '\n'.join(f' * {line}'.rstrip() for line in lines)
    return f'/**\n{body}\n */\n'
