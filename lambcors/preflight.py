"""
プリフライトレスポンス

許可されたプリフライトリクエストに対する 200 レスポンスを生成します。
"""

from .policy import Allowed
from .request import RequestView
from .response import Response

ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"
ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"


def build_preflight_response(view: RequestView, decision: Allowed) -> Response:
    """プリフライトレスポンスを生成

    要求されたメソッドとヘッダーは検証せず、受け取った順序のまま返します。
    """
    headers = {
        ACCESS_CONTROL_ALLOW_ORIGIN: decision.header_value,
        ACCESS_CONTROL_ALLOW_METHODS: view.requested_method or "",
    }
    if view.requested_headers:
        headers[ACCESS_CONTROL_ALLOW_HEADERS] = ", ".join(view.requested_headers)

    return Response("", status_code=200, headers=headers)
