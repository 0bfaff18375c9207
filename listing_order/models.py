"""ディレクトリ一覧に載せるエントリのデータモデル。"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_FRACTION = re.compile(r"\.([0-9]+)")


def _parse_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        # 末尾の "Z" と 6 桁以外の小数秒は古い fromisoformat が読めないので揃える
        text = value.replace("Z", "+00:00")
        text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return _EPOCH
    return _EPOCH


def _format_date(value: datetime) -> str:
    """RFC3339 形式。UTC は "Z"、小数秒は末尾の 0 を落とす。naive は UTC とみなす。"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    if not offset:
        return text + "Z"
    sign = "-" if offset.days < 0 else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass
class Entry:
    """一覧に表示するファイルまたはフォルダ 1 件。

    並び替えで参照するのは ``name`` / ``is_dir`` / ``date`` / ``size`` のみ。
    それ以外は表示用にそのまま運ぶだけ。
    """

    name: str
    path: str = ""
    is_dir: bool = False
    date: datetime = _EPOCH
    size: int = 0
    type: str = ""
    label: str = ""
    write: bool = False
    extensions: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "path": self.path,
            "is_dir": self.is_dir,
            "date": _format_date(self.date),
            "size": self.size,
        }
        if self.type:
            data["type"] = self.type
        if self.label:
            data["label"] = self.label
        data["write"] = self.write
        data["extensions"] = dict(self.extensions)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entry":
        return cls(
            name=str(data.get("name", "")),
            path=str(data.get("path", "")),
            is_dir=bool(data.get("is_dir", False)),
            date=_parse_date(data.get("date")),
            size=int(data.get("size") or 0),
            type=str(data.get("type") or ""),
            label=str(data.get("label") or ""),
            write=bool(data.get("write", False)),
            extensions=dict(data.get("extensions") or {}),
        )


@dataclass
class DeviceInfo:
    lan_ipv4: List[str] = field(default_factory=list)
    port: int = 0
    device_name: str = ""
    device_model: str = ""
    device_sn: str = ""
    initialized: bool = False
    os_version: str = ""
    hash: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lan_ipv4": list(self.lan_ipv4),
            "port": self.port,
            "device_name": self.device_name,
            "device_model": self.device_model,
            "device_sn": self.device_sn,
            "initialized": self.initialized,
            "os_version": self.os_version,
            "hash": self.hash,
        }
