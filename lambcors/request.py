"""
Request クラス

Lambda イベントから Request オブジェクトと、CORS 判定用の読み取り専用ビューを提供します。
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .origin import Origin, parse_origin

logger = logging.getLogger(__name__)

ORIGIN = "Origin"
ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"
ACCESS_CONTROL_REQUEST_HEADERS = "Access-Control-Request-Headers"


class Request:
    """Lambda プロキシイベントのラッパー"""

    def __init__(self, event: Dict[str, Any]) -> None:
        self.event = event

    @property
    def method(self) -> str:
        """HTTP メソッドを取得"""
        return str(self.event.get("httpMethod", "GET")).upper()

    @property
    def path(self) -> str:
        """リクエストパスを取得"""
        return str(self.event.get("path", "/"))

    @property
    def headers(self) -> Dict[str, str]:
        """リクエストヘッダーを取得"""
        headers = self.event.get("headers") or {}
        return {k: str(v) for k, v in headers.items()}

    @property
    def body(self) -> str:
        """リクエストボディを取得"""
        body = self.event.get("body")
        return "" if body is None else str(body)

    def get_header(self, name: str) -> Optional[str]:
        """ヘッダーを大文字小文字を区別せずに取得"""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


def _split_header_list(value: Optional[str]) -> Optional[Tuple[str, ...]]:
    """カンマ区切りのヘッダー値を順序を保って分割"""
    if value is None:
        return None
    items = tuple(item.strip() for item in value.split(","))
    return tuple(item for item in items if item)


@dataclass(frozen=True)
class RequestView:
    """CORS 判定に必要な項目だけを持つ読み取り専用ビュー"""

    method: str
    origin: Optional[Origin] = None
    requested_method: Optional[str] = None
    requested_headers: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_request(cls, request: Request) -> "RequestView":
        """Request からビューを作成"""
        raw_origin = request.get_header(ORIGIN)
        origin = parse_origin(raw_origin)
        if raw_origin and origin is None:
            logger.debug(f"Ignoring unparsable Origin header: {raw_origin!r}")

        requested_method = request.get_header(ACCESS_CONTROL_REQUEST_METHOD)
        if requested_method is not None:
            requested_method = requested_method.strip() or None

        return cls(
            method=request.method,
            origin=origin,
            requested_method=requested_method,
            requested_headers=_split_header_list(
                request.get_header(ACCESS_CONTROL_REQUEST_HEADERS)
            ),
        )
