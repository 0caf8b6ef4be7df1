"""
CORS ポリシー設定

ホワイトリストモードと任意オリジン許可モードの不変な設定を提供します。
設定は生成後に変更されないため、並行するリクエスト間で安全に共有できます。
"""

import os
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Mapping, Optional, Union

from .exceptions import CORSConfigError

ENV_ALLOWED_ORIGINS = "LAMBCORS_ALLOWED_ORIGINS"
ENV_PERMIT_MISSING_ORIGIN = "LAMBCORS_PERMIT_MISSING_ORIGIN"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off", "")


@dataclass(frozen=True)
class Whitelist:
    """許可オリジンを明示的に列挙するモード

    Origin ヘッダーのないリクエストは拒否されます。
    各エントリは scheme://host[:port] の正規形で指定してください。
    """

    allowed: FrozenSet[str]

    def __post_init__(self) -> None:
        # 文字列 1 つは単一のエントリとして扱う
        if isinstance(self.allowed, str):
            entries = frozenset([self.allowed])
        else:
            entries = frozenset(self.allowed)
        for entry in entries:
            if not isinstance(entry, str):
                raise CORSConfigError("Whitelist entries must be strings", value=entry)
            if not entry:
                raise CORSConfigError("Whitelist entries must not be empty", value=entry)
            if entry == "*":
                raise CORSConfigError(
                    "'*' is not a valid whitelist entry, use AllowAny instead", value=entry
                )
        object.__setattr__(self, "allowed", entries)


@dataclass(frozen=True)
class AllowAny:
    """任意のオリジンを許可するモード"""

    permit_missing_origin: bool = False


PolicyConfig = Union[Whitelist, AllowAny]


def create_policy_config(
    origins: Union[str, Iterable[str]] = "*", permit_missing_origin: bool = False
) -> PolicyConfig:
    """CORS ポリシー設定を作成するヘルパー関数

    Args:
        origins: "*" で任意オリジン許可、オリジンのリストでホワイトリスト
        permit_missing_origin: 任意オリジン許可時に Origin ヘッダーのない
            リクエストを通過させるか（ホワイトリストでは常に拒否）

    Returns:
        PolicyConfig インスタンス
    """
    if isinstance(origins, str):
        if origins == "*":
            return AllowAny(permit_missing_origin=permit_missing_origin)
        origins = [origins]

    if permit_missing_origin:
        raise CORSConfigError("permit_missing_origin is only supported with AllowAny")

    return Whitelist(frozenset(origins))


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise CORSConfigError(f"{name} must be a boolean value", value=value)


def policy_from_env(environ: Optional[Mapping[str, str]] = None) -> PolicyConfig:
    """環境変数から CORS ポリシー設定を作成

    LAMBCORS_ALLOWED_ORIGINS: カンマ区切りのオリジン一覧（デフォルト "*"）
    LAMBCORS_PERMIT_MISSING_ORIGIN: Origin ヘッダーなしを許可するか（デフォルト false）
    """
    if environ is None:
        environ = os.environ

    raw_origins = environ.get(ENV_ALLOWED_ORIGINS, "*")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    permit_missing_origin = _parse_bool(
        ENV_PERMIT_MISSING_ORIGIN, environ.get(ENV_PERMIT_MISSING_ORIGIN, "")
    )

    if not origins or origins == ["*"]:
        return AllowAny(permit_missing_origin=permit_missing_origin)

    return create_policy_config(origins, permit_missing_origin=permit_missing_origin)
