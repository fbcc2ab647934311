"""Import synthesis for external schema documents.

References into other documents (`other.json#/Widget`) are emitted as
lookups on an `external` type. This module produces the import statements
and the `external` alias that make those lookups type-check.
"""

from collections.abc import Iterable

__all__ = ['synthesize_imports']


def synthesize_imports(external_keys: Iterable[str]) -> str:
    """Build the import block for the collected external document keys.

    Each document is imported under a positional alias (`external$0`,
    `external$1`, ...) so documents with clashing names cannot collide.

    Example:
        >>> print(synthesize_imports(['other']))
        import { schemas as external$0 } from "./other";
        <BLANKLINE>
        export type external = {
        "other": external$0;
        }
        <BLANKLINE>
        <BLANKLINE>

    Args:
        external_keys: Document keys in first-discovery order.

    Returns:
        The import text, or an empty string if there are no keys.
    """
    keys = list(dict.fromkeys(external_keys))
    if not keys:
        return ''

    imports = [
        f'import {{ schemas as external${index} }} from "./{key}";'
        for index, key in enumerate(keys)
    ]
    mappings = [
        'export type external = {',
        *(f'"{key}": external${index};' for index, key in enumerate(keys)),
        '}',
    ]
    return '\n'.join(imports) + '\n\n' + '\n'.join(mappings) + '\n\n'
