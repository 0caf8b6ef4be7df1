"""
RequestView とリクエスト分類のテスト
"""

from lambcors import Origin, Request, RequestKind, RequestView, classify


def create_test_event(method="GET", path="/", headers=None, body=None):
    """テスト用のイベントを作成"""
    return {
        "httpMethod": method,
        "path": path,
        "queryStringParameters": None,
        "headers": headers,
        "body": body,
    }


class TestRequest:
    """Request のテスト"""

    def test_properties(self):
        request = Request(create_test_event(method="post", path="/items", body="payload"))
        assert request.method == "POST"
        assert request.path == "/items"
        assert request.body == "payload"
        assert request.headers == {}

    def test_defaults(self):
        request = Request({})
        assert request.method == "GET"
        assert request.path == "/"
        assert request.body == ""

    def test_get_header(self):
        request = Request(create_test_event(headers={"X-Api-Key": "secret"}))
        assert request.get_header("x-api-key") == "secret"
        assert request.get_header("Origin") is None


class TestRequestView:
    """RequestView.from_request のテスト"""

    def test_no_headers(self):
        view = RequestView.from_request(Request(create_test_event()))
        assert view == RequestView(method="GET")

    def test_origin_case_insensitive_lookup(self):
        """API Gateway はヘッダー名の大文字小文字をそのまま渡す"""
        event = create_test_event(headers={"origin": "http://example.org:3000"})
        view = RequestView.from_request(Request(event))
        assert view.origin == Origin("http", "example.org", 3000)

    def test_unparsable_origin_treated_as_missing(self):
        event = create_test_event(headers={"Origin": "null"})
        assert RequestView.from_request(Request(event)).origin is None

    def test_preflight_fields(self):
        event = create_test_event(
            method="options",
            headers={
                "Origin": "http://example.org",
                "access-control-request-method": "PUT",
                "Access-Control-Request-Headers": "X-Custom, content-type,X-Custom",
            },
        )
        view = RequestView.from_request(Request(event))
        assert view.method == "OPTIONS"
        assert view.requested_method == "PUT"
        # 順序・大文字小文字を保持し、重複も除去しない
        assert view.requested_headers == ("X-Custom", "content-type", "X-Custom")

    def test_empty_requested_method_is_absent(self):
        event = create_test_event(
            method="OPTIONS",
            headers={"Origin": "http://example.org", "Access-Control-Request-Method": " "},
        )
        assert RequestView.from_request(Request(event)).requested_method is None

    def test_request_not_modified(self):
        """ヘッダーを読むだけでイベントは変更しない"""
        event = create_test_event(headers={"Origin": "http://example.org"}, body="payload")
        snapshot = {k: (dict(v) if isinstance(v, dict) else v) for k, v in event.items()}
        RequestView.from_request(Request(event))
        assert event == snapshot


class TestClassify:
    """classify のテスト"""

    def test_no_origin(self):
        assert classify(RequestView(method="GET")) is RequestKind.NO_ORIGIN

    def test_no_origin_preflight_shape(self):
        """Origin がなければプリフライト形式でも NO_ORIGIN"""
        view = RequestView(method="OPTIONS", requested_method="GET")
        assert classify(view) is RequestKind.NO_ORIGIN

    def test_simple(self):
        view = RequestView(method="POST", origin=Origin("http", "example.org"))
        assert classify(view) is RequestKind.SIMPLE

    def test_preflight(self):
        view = RequestView(
            method="OPTIONS", origin=Origin("http", "example.org"), requested_method="GET"
        )
        assert classify(view) is RequestKind.PREFLIGHT

    def test_options_without_request_method_is_simple(self):
        """Access-Control-Request-Method のない OPTIONS は単純なリクエスト"""
        view = RequestView(method="OPTIONS", origin=Origin("http", "example.org"))
        assert classify(view) is RequestKind.SIMPLE

    def test_request_method_on_non_options_is_simple(self):
        view = RequestView(
            method="GET", origin=Origin("http", "example.org"), requested_method="GET"
        )
        assert classify(view) is RequestKind.SIMPLE
