"""
CORS ポリシー判定

オリジンと設定から許可 / 拒否 / 素通しを決める純粋関数を提供します。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .config import AllowAny, PolicyConfig, Whitelist
from .origin import Origin, canonicalize, matches

ANY_ORIGIN = "*"


class RejectionReason(Enum):
    """拒否理由"""

    MISSING_ORIGIN = "Origin header missing"
    ORIGIN_NOT_ALLOWED = "Origin not allowed"


@dataclass(frozen=True)
class PassThrough:
    """CORS ヘッダーを付与せずに下流へ渡す"""


@dataclass(frozen=True)
class Allowed:
    """許可（header_value は Access-Control-Allow-Origin の値）"""

    header_value: str


@dataclass(frozen=True)
class Rejected:
    """拒否"""

    reason: RejectionReason


CorsDecision = Union[PassThrough, Allowed, Rejected]


def evaluate(origin: Optional[Origin], config: PolicyConfig) -> CorsDecision:
    """オリジンをポリシーに照らして判定"""
    if isinstance(config, Whitelist):
        if origin is None:
            return Rejected(RejectionReason.MISSING_ORIGIN)
        if matches(origin, config.allowed):
            return Allowed(canonicalize(origin))
        return Rejected(RejectionReason.ORIGIN_NOT_ALLOWED)

    if isinstance(config, AllowAny):
        if origin is None:
            if config.permit_missing_origin:
                return PassThrough()
            return Rejected(RejectionReason.MISSING_ORIGIN)
        # 任意オリジン許可では常にワイルドカードを返す
        return Allowed(ANY_ORIGIN)

    raise TypeError(f"Unsupported policy config: {type(config).__name__}")
