"""Utility helpers."""

from __future__ import annotations

from typing import Any, Mapping


def truncate_to_limit(content: str, limit: int, ellipsis: bool = True) -> str:
    if len(content) <= limit:
        return content
    if not ellipsis or limit <= 3:
        return content[:limit]
    return f"{content[: limit - 3].rstrip()}..."


def clean_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def first_present(payload: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = clean_str(payload.get(key))
        if value:
            return value
    return ""
