"""
リクエスト分類

リクエストを Origin なし / 単純な CORS リクエスト / プリフライトに分類します。
"""

from enum import Enum

from .request import RequestView


class RequestKind(Enum):
    """CORS におけるリクエストの種類"""

    NO_ORIGIN = "no-origin"
    SIMPLE = "simple"
    PREFLIGHT = "preflight"


def classify(view: RequestView) -> RequestKind:
    """リクエストを分類

    Access-Control-Request-Method のない OPTIONS はプリフライトではなく、
    単純なリクエストとして扱います。
    """
    if view.origin is None:
        return RequestKind.NO_ORIGIN
    if view.method == "OPTIONS" and view.requested_method is not None:
        return RequestKind.PREFLIGHT
    return RequestKind.SIMPLE
