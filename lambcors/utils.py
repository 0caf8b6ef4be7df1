"""
ユーティリティ関数

CORS ミドルウェアで包んだ Lambda ハンドラーを作成するヘルパー関数を提供します。
"""

import asyncio
import inspect
import logging
from typing import Any, Callable, Dict, Optional, Union

from .config import PolicyConfig, policy_from_env
from .exceptions import HandlerError
from .middleware import CORSMiddleware
from .request import Request

logger = logging.getLogger(__name__)


def create_lambda_handler(
    handler: Callable,
    cors: Optional[Union[CORSMiddleware, PolicyConfig]] = None,
) -> Callable[[Dict[str, Any], Any], Dict[str, Any]]:
    """Lambda 用のハンドラーを作成

    Args:
        handler: Request を受け取り Response を返す下流ハンドラー
            （コルーチン関数の場合はイベントループで実行）
        cors: CORSMiddleware または PolicyConfig（省略時は環境変数から読み込み）

    Returns:
        Lambda ハンドラー関数
    """
    if isinstance(cors, CORSMiddleware):
        middleware = cors
    else:
        middleware = CORSMiddleware(cors if cors is not None else policy_from_env())

    is_coroutine = inspect.iscoroutinefunction(handler)

    def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
        request = Request(event)
        try:
            if is_coroutine:
                response = asyncio.run(middleware.handle_async(request, handler))
            else:
                response = middleware.handle(request, handler)
        except HandlerError as e:
            # 内包レスポンス（CORS ヘッダー付与済み）を返す
            logger.debug(f"Handler error converted to response: {e!r}")
            response = e.response
        return response.to_lambda_response()

    return lambda_handler
