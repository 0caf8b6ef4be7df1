"""
CORS ミドルウェア

リクエストを分類し、ポリシー判定に従ってプリフライト応答・拒否応答・
下流ハンドラー呼び出しのいずれかを行います。

使用例:
    from lambcors import CORSMiddleware, Response

    cors = CORSMiddleware.with_whitelist(["https://example.com"])

    @cors.around
    def handler(request):
        return Response("Hello, world!")
"""

import inspect
import logging
from functools import wraps
from typing import Awaitable, Callable, Iterable, Optional, Tuple, Union

from .classifier import RequestKind, classify
from .config import AllowAny, PolicyConfig, Whitelist
from .decorator import decorate, decorate_async, rejection_response
from .policy import Allowed, CorsDecision, Rejected, RejectionReason, evaluate
from .preflight import build_preflight_response
from .request import Request, RequestView
from .response import Response

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Response]
AsyncHandler = Callable[[Request], Awaitable[Response]]


class CORSMiddleware:
    """下流ハンドラーを包む CORS ミドルウェア

    保持するのは不変な設定だけなので、同じインスタンスを
    並行するリクエストで共有できます。
    """

    def __init__(self, config: PolicyConfig) -> None:
        if not isinstance(config, (Whitelist, AllowAny)):
            raise TypeError(f"Unsupported policy config: {type(config).__name__}")
        self._config = config

    @classmethod
    def with_whitelist(cls, allowed_origins: Union[str, Iterable[str]]) -> "CORSMiddleware":
        """許可するオリジンを指定して作成（文字列 1 つは単一のオリジン）"""
        if isinstance(allowed_origins, str):
            allowed_origins = [allowed_origins]
        return cls(Whitelist(frozenset(allowed_origins)))

    @classmethod
    def with_allow_any(cls, permit_missing_origin: bool = False) -> "CORSMiddleware":
        """任意のオリジンを許可して作成（Access-Control-Allow-Origin は "*"）"""
        return cls(AllowAny(permit_missing_origin=permit_missing_origin))

    @property
    def config(self) -> PolicyConfig:
        return self._config

    def _decide(self, request: Request) -> Tuple[RequestView, RequestKind, CorsDecision]:
        view = RequestView.from_request(request)
        kind = classify(view)
        decision = evaluate(view.origin, self._config)
        logger.debug(f"{request.method} {request.path}: {kind.value} -> {decision}")
        return view, kind, decision

    def _short_circuit(
        self, view: RequestView, kind: RequestKind, decision: CorsDecision
    ) -> Optional[Response]:
        """下流を呼ばずに返すレスポンスがあれば返す"""
        if isinstance(decision, Rejected):
            if decision.reason is RejectionReason.ORIGIN_NOT_ALLOWED:
                logger.warning(f"Got disallowed CORS request from {view.origin}")
            else:
                logger.info("Rejected CORS request without Origin header")
            return rejection_response(decision.reason)

        if kind is RequestKind.PREFLIGHT and isinstance(decision, Allowed):
            return build_preflight_response(view, decision)

        return None

    def handle(self, request: Request, handler: Handler) -> Response:
        """リクエストを処理"""
        view, kind, decision = self._decide(request)

        response = self._short_circuit(view, kind, decision)
        if response is not None:
            return response

        if isinstance(decision, Allowed):
            return decorate(lambda: handler(request), decision.header_value)

        # PassThrough はヘッダーを変更しない
        return handler(request)

    async def handle_async(self, request: Request, handler: AsyncHandler) -> Response:
        """コルーチンハンドラー用のリクエスト処理"""
        view, kind, decision = self._decide(request)

        response = self._short_circuit(view, kind, decision)
        if response is not None:
            return response

        if isinstance(decision, Allowed):
            return await decorate_async(lambda: handler(request), decision.header_value)

        return await handler(request)

    def around(self, handler: Callable) -> Callable:
        """ハンドラーを包んだ新しいハンドラーを返す（デコレータとしても使用可能）"""
        if inspect.iscoroutinefunction(handler):

            @wraps(handler)
            async def async_wrapper(request: Request) -> Response:
                return await self.handle_async(request, handler)

            return async_wrapper

        @wraps(handler)
        def wrapper(request: Request) -> Response:
            return self.handle(request, handler)

        return wrapper
