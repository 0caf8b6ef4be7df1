"""
JSON 処理ハンドラー

レスポンスボディのシリアライズを提供します。orjson がインストールされていれば使用します。
"""

import json
from typing import Any

# オプション: orjson による高速化
try:
    import orjson

    HAS_ORJSON = True
except ImportError:
    HAS_ORJSON = False


class JSONHandler:
    """JSON シリアライズの統一インターフェース"""

    @staticmethod
    def dumps(data: Any, ensure_ascii: bool = False) -> str:
        """
        最小化した JSON 文字列を返す

        Args:
            data: シリアライズするオブジェクト
            ensure_ascii: ASCII エンコーディングを強制するか

        Returns:
            str: JSON 文字列
        """
        try:
            if HAS_ORJSON and not ensure_ascii:
                return orjson.dumps(data, option=orjson.OPT_NON_STR_KEYS).decode("utf-8")
            return json.dumps(data, ensure_ascii=ensure_ascii, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            # シリアライズできない場合はエラー情報を含む辞書を返す
            error_data = {
                "error": "JSON serialization failed",
                "message": str(e),
                "type": type(data).__name__,
            }
            return json.dumps(error_data, ensure_ascii=ensure_ascii)
