"""リクエストのクエリから並び替え指定を取り出す薄い層。"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableSequence

from .comparator import ORDER_ASC, ORDER_DESC, sort_entries
from .models import Entry

ORDER_BY_PARAM = "order_by"
ORDER_DIRECTION_PARAM = "order_direction"


def _query_value(query: Mapping[str, Any], name: str, default: str) -> str:
    value = query.get(name)
    # ?a=1&a=2 のような多値はリストで来るので先頭を使う
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return default
    return str(value)


@dataclass(frozen=True)
class SortOptions:
    """一覧 API に渡された並び替え条件。値の検証はしない。"""

    order_by: str = ""
    order_direction: str = ORDER_ASC

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> "SortOptions":
        return cls(
            order_by=_query_value(query, ORDER_BY_PARAM, ""),
            order_direction=_query_value(query, ORDER_DIRECTION_PARAM, ORDER_ASC),
        )

    @property
    def is_descending(self) -> bool:
        return self.order_direction == ORDER_DESC

    def apply(self, entries: MutableSequence[Entry]) -> None:
        sort_entries(entries, self.order_by, self.order_direction)
