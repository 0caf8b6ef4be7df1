"""
lambcors

AWS Lambda 用 CORS ポリシー・ミドルウェア

使用例:
    from lambcors import CORSMiddleware, Response, create_lambda_handler

    def hello(request):
        return Response("Hello, world!")

    cors = CORSMiddleware.with_whitelist(["https://example.com"])
    lambda_handler = create_lambda_handler(hello, cors)
"""

from .origin import Origin, canonicalize, matches, parse_origin
from .config import (
    AllowAny,
    PolicyConfig,
    Whitelist,
    create_policy_config,
    policy_from_env,
)
from .request import Request, RequestView
from .response import Response
from .classifier import RequestKind, classify
from .policy import (
    Allowed,
    CorsDecision,
    PassThrough,
    Rejected,
    RejectionReason,
    evaluate,
)
from .preflight import build_preflight_response
from .decorator import add_allow_origin, decorate, rejection_response
from .middleware import CORSMiddleware
from .exceptions import APIError, CORSConfigError, HandlerError
from .utils import create_lambda_handler

__version__ = "0.1.0"

__all__ = [
    "Origin",
    "canonicalize",
    "matches",
    "parse_origin",
    "AllowAny",
    "PolicyConfig",
    "Whitelist",
    "create_policy_config",
    "policy_from_env",
    "Request",
    "RequestView",
    "Response",
    "RequestKind",
    "classify",
    "Allowed",
    "CorsDecision",
    "PassThrough",
    "Rejected",
    "RejectionReason",
    "evaluate",
    "build_preflight_response",
    "add_allow_origin",
    "decorate",
    "rejection_response",
    "CORSMiddleware",
    "APIError",
    "CORSConfigError",
    "HandlerError",
    "create_lambda_handler",
]
