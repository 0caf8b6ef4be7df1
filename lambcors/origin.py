"""
Origin の表現と照合

Origin ヘッダーの解析、正規化、ホワイトリスト照合を提供します。
"""

import re
from dataclasses import dataclass
from typing import AbstractSet, Optional

# scheme://host[:port] のみを受け付ける（パスやクエリは不可）
_ORIGIN_RE = re.compile(
    r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*)://"
    r"(?P<host>\[[0-9A-Fa-f:.]+\]|[^/:?#\s\[\]]+)(?::(?P<port>\d+))?$"
)


@dataclass(frozen=True)
class Origin:
    """リクエスト元のオリジン"""

    scheme: str
    host: str
    port: Optional[int] = None

    def __str__(self) -> str:
        return canonicalize(self)


def canonicalize(origin: Origin) -> str:
    """正規形 scheme://host[:port] を返す

    大文字小文字や末尾文字の正規化は行いません。
    """
    if origin.port is None:
        return f"{origin.scheme}://{origin.host}"
    return f"{origin.scheme}://{origin.host}:{origin.port}"


def matches(origin: Origin, allowed: AbstractSet[str]) -> bool:
    """正規形が許可セットに完全一致するかチェック

    ポートも比較対象のため "http://example.com" は
    "http://example.com:3000" に一致しません。
    """
    return canonicalize(origin) in allowed


def parse_origin(value: Optional[str]) -> Optional[Origin]:
    """Origin ヘッダーの値を解析

    解析できない値（"null" など）の場合は None を返します。
    """
    if not value:
        return None

    match = _ORIGIN_RE.match(value.strip())
    if not match:
        return None

    port = match.group("port")
    return Origin(
        scheme=match.group("scheme"),
        host=match.group("host"),
        port=int(port) if port is not None else None,
    )
