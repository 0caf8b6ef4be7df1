"""
CORS ポリシー判定のテスト
"""

import pytest

from lambcors import (
    AllowAny,
    Allowed,
    Origin,
    PassThrough,
    Rejected,
    RejectionReason,
    Whitelist,
    evaluate,
    parse_origin,
)

WHITELIST = Whitelist(frozenset({"http://example.org:3000", "https://example.com"}))


class TestWhitelistMode:
    """ホワイトリストモードの判定"""

    @pytest.mark.parametrize("entry", sorted(WHITELIST.allowed))
    def test_every_entry_allowed_with_its_canonical_form(self, entry):
        assert evaluate(parse_origin(entry), WHITELIST) == Allowed(entry)

    @pytest.mark.parametrize(
        "origin",
        [
            Origin("http", "forbidden.org"),
            Origin("http", "example.org"),
            Origin("https", "example.org", 3000),
            Origin("https", "example.com", 443),
            Origin("http", "example.com"),
        ],
    )
    def test_not_in_whitelist(self, origin):
        assert evaluate(origin, WHITELIST) == Rejected(RejectionReason.ORIGIN_NOT_ALLOWED)

    def test_port_sensitivity(self):
        config = Whitelist(frozenset({"http://example.com"}))
        assert evaluate(Origin("http", "example.com", 3000), config) == Rejected(
            RejectionReason.ORIGIN_NOT_ALLOWED
        )
        config = Whitelist(frozenset({"http://example.com:3000"}))
        assert evaluate(Origin("http", "example.com"), config) == Rejected(
            RejectionReason.ORIGIN_NOT_ALLOWED
        )

    def test_missing_origin(self):
        assert evaluate(None, WHITELIST) == Rejected(RejectionReason.MISSING_ORIGIN)


class TestAllowAnyMode:
    """任意オリジン許可モードの判定"""

    @pytest.mark.parametrize(
        "origin", [Origin("http", "example.org"), Origin("https", "forbidden.org", 8443)]
    )
    def test_always_wildcard(self, origin):
        """特定のオリジンは返さず常に "*" """
        assert evaluate(origin, AllowAny()) == Allowed("*")
        assert evaluate(origin, AllowAny(permit_missing_origin=True)) == Allowed("*")

    def test_missing_origin_rejected_by_default(self):
        assert evaluate(None, AllowAny()) == Rejected(RejectionReason.MISSING_ORIGIN)

    def test_missing_origin_pass_through(self):
        assert evaluate(None, AllowAny(permit_missing_origin=True)) == PassThrough()


class TestEvaluate:
    """判定関数の性質"""

    def test_pure(self):
        """同じ入力には同じ判定"""
        origin = Origin("http", "example.org", 3000)
        assert evaluate(origin, WHITELIST) == evaluate(origin, WHITELIST)

    def test_unsupported_config(self):
        with pytest.raises(TypeError):
            evaluate(None, {"origins": "*"})

    def test_rejection_messages(self):
        assert RejectionReason.MISSING_ORIGIN.value == "Origin header missing"
        assert RejectionReason.ORIGIN_NOT_ALLOWED.value == "Origin not allowed"
