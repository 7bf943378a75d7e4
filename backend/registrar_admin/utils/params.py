"""Helpers for reading operation parameters from a request."""

from __future__ import annotations

from typing import Any, Iterable, Mapping


def _coerce_int(raw_value: Any) -> int | None:
    if raw_value in (None, "") or isinstance(raw_value, bool):
        return None
    if isinstance(raw_value, int):
        return raw_value
    if isinstance(raw_value, float):
        return int(raw_value) if raw_value.is_integer() else None
    try:
        return int(str(raw_value).strip())
    except (TypeError, ValueError):
        return None


def parse_choice_arg(
    sources: Iterable[Mapping[str, Any]],
    *,
    name: str,
    choices: Iterable[int],
    default: int,
) -> int:
    """Return the first integer value of ``name`` found in ``sources``.

    Values outside ``choices``, and values that are not integers at all,
    fall back to ``default`` instead of failing the request.
    """

    allowed = set(choices)
    for source in sources:
        if not isinstance(source, Mapping) or name not in source:
            continue
        value = _coerce_int(source.get(name))
        if value is None:
            return default
        return value if value in allowed else default
    return default


__all__ = ["parse_choice_arg"]
