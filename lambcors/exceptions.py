"""
構造化エラーハンドリング

下流ハンドラーが送出する、レスポンスを内包したエラーと設定エラーを提供します。
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .json_handler import JSONHandler
from .response import Response


class HandlerError(Exception):
    """レスポンスを内包したハンドラーエラー

    CORS ミドルウェアは ``response`` に Access-Control-Allow-Origin を
    付与したうえで、同じ例外オブジェクトを再送出します。
    """

    def __init__(self, response: Response, error: Optional[BaseException] = None) -> None:
        super().__init__(str(error) if error is not None else f"HTTP {response.status_code}")
        self.response = response
        self.error = error


@dataclass(eq=False)
class APIError(HandlerError):
    """API エラーの基底クラス"""

    message: str
    status_code: int = 500
    error_code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        """初期化後の処理"""
        if self.error_code is None:
            self.error_code = f"ERR_{self.status_code}"

        if self.details is None:
            self.details = {}

        # レスポンスは一度だけ生成し、ヘッダー付与が失われないようにする
        response = Response(
            JSONHandler.dumps(self.to_dict()),
            status_code=self.status_code,
            headers={"Content-Type": "application/json"},
        )
        super().__init__(response)
        self.args = (self.message,)

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        result: Dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
            "status_code": self.status_code,
        }

        if self.details:
            result["details"] = self.details

        return result


class CORSConfigError(ValueError):
    """CORS ポリシー設定エラー"""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value
