"""
Response クラス

Lambda プロキシ統合用のレスポンスオブジェクトを提供します。
"""

from typing import Any, Dict, Optional

from .json_handler import JSONHandler


class Response:
    """レスポンスオブジェクト"""

    def __init__(
        self, content: Any = None, status_code: int = 200, headers: Optional[Dict[str, str]] = None
    ):
        self.content = content
        self.status_code = status_code
        self.headers = dict(headers) if headers else {}

    def get_header(self, name: str) -> Optional[str]:
        """ヘッダーを大文字小文字を区別せずに取得"""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    def set_header(self, name: str, value: str) -> None:
        """ヘッダーを設定（同名ヘッダーは大文字小文字を問わず置き換え）"""
        lowered = name.lower()
        for key in [k for k in self.headers if k.lower() == lowered]:
            del self.headers[key]
        self.headers[name] = value

    @property
    def body(self) -> str:
        """シリアライズ済みのボディ"""
        if isinstance(self.content, (dict, list)):
            return JSONHandler.dumps(self.content)
        if self.content is None:
            return ""
        return str(self.content)

    def to_lambda_response(self) -> Dict[str, Any]:
        """Lambda 用のレスポンス形式に変換"""
        if isinstance(self.content, (dict, list)) and self.get_header("Content-Type") is None:
            self.headers["Content-Type"] = "application/json"

        return {"statusCode": self.status_code, "headers": dict(self.headers), "body": self.body}

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code}, headers={self.headers!r})"
