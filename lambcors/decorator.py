"""
レスポンスへの CORS ヘッダー付与

拒否レスポンスの生成と、下流ハンドラーの結果（成功・エラー）への
Access-Control-Allow-Origin 付与を提供します。
"""

from typing import Awaitable, Callable

from .exceptions import HandlerError
from .policy import RejectionReason
from .preflight import ACCESS_CONTROL_ALLOW_ORIGIN
from .response import Response


def rejection_response(reason: RejectionReason) -> Response:
    """400 の拒否レスポンスを生成"""
    return Response(
        f"Invalid CORS request: {reason.value}",
        status_code=400,
        headers={"Content-Type": "text/plain"},
    )


def add_allow_origin(response: Response, header_value: str) -> Response:
    """Access-Control-Allow-Origin を付与"""
    response.set_header(ACCESS_CONTROL_ALLOW_ORIGIN, header_value)
    return response


def decorate(call: Callable[[], Response], header_value: str) -> Response:
    """下流を一度だけ呼び出し、結果にヘッダーを付与

    HandlerError の場合は内包レスポンスにヘッダーを付与して同じ例外を再送出します。
    """
    try:
        response = call()
    except HandlerError as e:
        add_allow_origin(e.response, header_value)
        raise
    return add_allow_origin(response, header_value)


async def decorate_async(call: Callable[[], Awaitable[Response]], header_value: str) -> Response:
    """decorate のコルーチン版"""
    try:
        response = await call()
    except HandlerError as e:
        add_allow_origin(e.response, header_value)
        raise
    return add_allow_origin(response, header_value)
