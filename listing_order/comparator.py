"""一覧エントリの並び替え (名前・サイズ・更新日時・種類)。"""
from __future__ import annotations

import functools
from datetime import datetime, timezone
from typing import MutableSequence

from .logger import log_message
from .models import Entry
from .sorting import natural_compare

ORDER_NAME = "name"
ORDER_SIZE = "size"
ORDER_MODIFIED = "modified"
ORDER_TYPE = "type"
KNOWN_ORDER_KEYS = (ORDER_NAME, ORDER_SIZE, ORDER_MODIFIED, ORDER_TYPE)

ORDER_ASC = "asc"
ORDER_DESC = "desc"

FOLDER_TAG = "000_folder"
NO_EXTENSION_TAG = "999_file"


def file_type_tag(entry: Entry) -> str:
    """``type`` 並び替え用の種類タグ。

    フォルダは ``000_folder``、拡張子なしは ``999_file``、
    それ以外は小文字化した拡張子 (ドットなし)。
    """
    if entry.is_dir:
        return FOLDER_TAG
    if "." not in entry.name:
        return NO_EXTENSION_TAG
    # 最後のドット以降。".bashrc" は "bashrc"、"memo." は空文字になる
    return entry.name.rsplit(".", 1)[1].lower()


def _timestamp(entry: Entry) -> datetime:
    # naive と aware が混ざっても比較できるよう naive は UTC とみなす
    if entry.date.tzinfo is None:
        return entry.date.replace(tzinfo=timezone.utc)
    return entry.date


def _cmp(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def _compare_by_key(a: Entry, b: Entry, order_by: str) -> int:
    if order_by == ORDER_SIZE:
        result = _cmp(a.size, b.size)
    elif order_by == ORDER_MODIFIED:
        result = _cmp(_timestamp(a), _timestamp(b))
    elif order_by == ORDER_TYPE:
        result = _cmp(file_type_tag(a), file_type_tag(b))
    else:
        # name および未知のキー
        result = 0
    if result == 0:
        result = natural_compare(a.name, b.name)
    return result


def compare_entries(a: Entry, b: Entry, order_by: str, order_direction: str) -> int:
    """``a`` と ``b`` の三方向比較。

    ``type`` 以外ではフォルダが常に先頭 (降順でも反転しない)。
    降順は ``order_direction`` が厳密に ``"desc"`` のときだけ。
    """
    if order_by != ORDER_TYPE and a.is_dir != b.is_dir:
        return -1 if a.is_dir else 1

    result = _compare_by_key(a, b, order_by)
    if order_direction == ORDER_DESC:
        result = -result
    return result


def sort_entries(entries: MutableSequence[Entry], order_by: str, order_direction: str) -> None:
    """``entries`` をその場で並び替える。例外は投げない。

    ``order_by`` が空なら何もしない。未知のキーは名前順、
    ``"desc"`` 以外の方向は昇順として扱う。
    """
    if not order_by:
        return

    if order_by not in KNOWN_ORDER_KEYS:
        log_message(f"unknown order_by {order_by!r}, falling back to {ORDER_NAME!r}")
    if order_direction not in (ORDER_ASC, ORDER_DESC):
        log_message(f"unknown order_direction {order_direction!r}, using {ORDER_ASC!r}")

    key = functools.cmp_to_key(
        lambda a, b: compare_entries(a, b, order_by, order_direction)
    )
    if isinstance(entries, list):
        entries.sort(key=key)
    else:
        entries[:] = sorted(entries, key=key)


class EntryList(list):
    """並び替えメソッド付きのエントリ一覧。"""

    def sort_by(self, order_by: str, order_direction: str) -> None:
        sort_entries(self, order_by, order_direction)
