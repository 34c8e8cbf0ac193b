from collections.abc import Sequence


def as_string_tuple(value: str | Sequence[str]) -> tuple[str, ...]:
    """Normalize a single string or a sequence of strings to a tuple."""
    if isinstance(value, str):
        return (value,)
    return tuple(value)
