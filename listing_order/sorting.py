"""自然順 (数字を数値として扱う) の文字列比較ユーティリティ。"""
from __future__ import annotations

import functools
from typing import Iterable, List

# 数値として読めるのは符号なし 64bit まで。超えたら文字列として比べる
_MAX_NUMBER = 2 ** 64 - 1


def _is_digit(ch: str) -> bool:
    # 全角数字などは数字として扱わない
    return "0" <= ch <= "9"


def _common_prefix(a: str, b: str) -> int:
    """数字が現れるか文字が食い違う直前までの共通部分の長さ。"""
    i = 0
    for ca, cb in zip(a, b):
        if _is_digit(ca) or _is_digit(cb) or ca != cb:
            break
        i += 1
    return i


def _leading_digits(s: str) -> int:
    i = 0
    for ch in s:
        if not _is_digit(ch):
            break
        i += 1
    return i


def natural_less(a: str, b: str) -> bool:
    """数字を含む名前を人間にとって自然な順序で比較する。

    例: ``"file2.txt"`` は ``"file10.txt"`` より前。

    共通部分を読み飛ばし、双方の残りが数字で始まるときだけ数値で比べる。
    それ以外は残りを普通の文字列として比べる。大文字小文字は区別する。
    """
    while True:
        p = _common_prefix(a, b)
        a, b = a[p:], b[p:]
        if not a:
            return bool(b)

        ia = _leading_digits(a)
        ib = _leading_digits(b)
        if ia and ib:
            an, bn = int(a[:ia]), int(b[:ib])
            if an <= _MAX_NUMBER and bn <= _MAX_NUMBER:
                if an != bn:
                    return an < bn
                # "01" と "1" のように同じ値で、両方に続きがあるときだけ先へ進む
                if ia != len(a) and ib != len(b):
                    a, b = a[ia:], b[ib:]
                    continue
        return a < b


def natural_compare(a: str, b: str) -> int:
    """``a`` と ``b`` を自然順で比較し -1 / 0 / 1 を返す。"""

    if a == b:
        return 0
    if natural_less(a, b):
        return -1
    if natural_less(b, a):
        return 1
    return -1 if a < b else 1


natural_sort_key = functools.cmp_to_key(natural_compare)


def natural_sorted(names: Iterable[str]) -> List[str]:
    return sorted(names, key=natural_sort_key)
