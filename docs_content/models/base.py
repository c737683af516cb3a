"""Declarative base shared by all content models."""

import json

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def str_list_to_json(values: list[str] | None) -> str:
    return json.dumps([str(v) for v in (values or [])])


def str_list_from_json(s: str | None) -> list[str]:
    if not s or not s.strip():
        return []
    try:
        data = json.loads(s)
    except (json.JSONDecodeError, TypeError):
        return []
    if not isinstance(data, list):
        return []
    return [str(x) for x in data]
