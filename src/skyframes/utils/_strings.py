"""String helpers used by the angle parsers."""

from __future__ import annotations


def split_string(text: str, delimiter: str, skip_empty: bool = True) -> list[str]:
    """Split *text* on *delimiter*, preserving field order.

    Args:
        text (str): String to split.
        delimiter (str): Separator between fields.
        skip_empty (bool): Drop empty fields. Default: ``True``

    Returns:
        list[str]: The fields of *text*.
    """
    fields = text.split(delimiter)
    if skip_empty:
        return [field for field in fields if field]
    return fields
