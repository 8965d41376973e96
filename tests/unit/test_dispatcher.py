# -*- coding: utf-8 -*-
"""
派发器单元测试（使用内存传输，不访问网络）
"""

import sys
from pathlib import Path
from urllib.parse import parse_qsl, urlsplit

# 添加src到路径
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

import pytest
import payloads
from cfapi import (
    ApiError,
    CodeforcesClient,
    Credentials,
    DecodeError,
    Dispatcher,
    InvalidParameterError,
    ResultTag,
    TransportError,
)
from cfapi.commands import BlogEntryComments, BlogEntryView, ContestStandings, UserFriends, UserInfo
from cfapi.config import ClientConfig

API_KEY = "7dd1c6a92bf0a6cb22b0e9fa9c08d1dac4948023"
API_SECRET = "acc9a26087164935d62610ed693c063463e123c2"


class FakeTransport:
    """记录请求URL并返回预设响应"""

    def __init__(self, body: bytes = b"", error: Exception = None):
        self.body = body
        self.error = error
        self.urls = []

    def get(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


class TestExecute:
    """执行流程"""

    def setup_method(self):
        self.creds = Credentials(API_KEY, API_SECRET)
        self.dispatcher = Dispatcher(clock=lambda: 1600000000, nonce_source=lambda: "123456")

    def test_view_blog_entry(self):
        transport = FakeTransport(payloads.ok(payloads.BLOG_ENTRY))
        result = self.dispatcher.execute(BlogEntryView(blog_entry_id=82347), self.creds, transport)

        assert result.tag is ResultTag.BLOG_ENTRY
        assert result.value.id == 82347
        assert len(transport.urls) == 1

    def test_request_shape(self):
        transport = FakeTransport(payloads.ok(payloads.BLOG_ENTRY))
        self.dispatcher.execute(BlogEntryView(blog_entry_id=82347), self.creds, transport)

        parts = urlsplit(transport.urls[0])
        assert parts.scheme == "https"
        assert parts.netloc == "codeforces.com"
        assert parts.path == "/api/blogEntry.view"
        query = dict(parse_qsl(parts.query))
        assert set(query) == {"blogEntryId", "apiKey", "time", "apiSig"}
        assert query["blogEntryId"] == "82347"
        assert query["time"] == "1600000000"
        assert query["apiSig"].startswith("123456")
        assert len(query["apiSig"]) == 6 + 128

    def test_round_trip_parameter_set(self):
        command = ContestStandings(contest_id=1477, from_=1, count=1, handles=("thud",), show_unofficial=False)
        transport = FakeTransport(payloads.ok(payloads.STANDINGS))
        self.dispatcher.execute(command, self.creds, transport)

        query = dict(parse_qsl(urlsplit(transport.urls[0]).query))
        expected = {"contestId": "1477", "from": "1", "count": "1", "handles": "thud", "showUnofficial": "false"}
        extra = {k: v for k, v in query.items() if k not in expected}
        assert {k: query[k] for k in expected} == expected
        assert set(extra) == {"apiKey", "time", "apiSig"}

    def test_api_error(self):
        transport = FakeTransport(payloads.failed("blogEntryId: Blog entry with id -1 not found"))
        with pytest.raises(ApiError) as exc_info:
            self.dispatcher.execute(BlogEntryComments(blog_entry_id=-1), self.creds, transport)
        assert "not found" in exc_info.value.comment

    def test_decode_error(self):
        transport = FakeTransport(payloads.ok({"id": 82347}))
        with pytest.raises(DecodeError):
            self.dispatcher.execute(BlogEntryView(blog_entry_id=82347), self.creds, transport)

    def test_transport_error_propagates(self):
        transport = FakeTransport(error=TransportError("timeout"))
        with pytest.raises(TransportError):
            self.dispatcher.execute(UserFriends(), self.creds, transport)

    def test_os_error_wrapped(self):
        transport = FakeTransport(error=ConnectionError("network unreachable"))
        with pytest.raises(TransportError) as exc_info:
            self.dispatcher.execute(UserFriends(), self.creds, transport)
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_wrapped_error_hides_signed_query(self):
        transport = FakeTransport(error=ConnectionError("cannot reach /api/user.friends?apiKey=k&apiSig=123456abc"))
        with pytest.raises(TransportError) as exc_info:
            self.dispatcher.execute(UserFriends(), self.creds, transport)
        assert "apiSig" not in str(exc_info.value)
        assert API_KEY not in str(exc_info.value)
        assert exc_info.value.details["url"] == "https://codeforces.com/api/user.friends"

    def test_not_retried(self):
        transport = FakeTransport(error=ConnectionError("down"))
        with pytest.raises(TransportError):
            self.dispatcher.execute(UserFriends(), self.creds, transport)
        assert len(transport.urls) == 1

    def test_invalid_parameter_before_network(self):
        transport = FakeTransport(payloads.ok([]))
        with pytest.raises(InvalidParameterError):
            self.dispatcher.execute(UserInfo(handles=()), self.creds, transport)
        assert transport.urls == []

    def test_execute_raw(self):
        body = payloads.ok(["tourist"])
        transport = FakeTransport(body)
        raw = self.dispatcher.execute_raw(UserFriends(only_online=True), self.creds, transport)
        assert raw == body.decode("utf-8")
        assert "onlyOnline=true" in transport.urls[0]

    def test_execute_raw_invalid_utf8(self):
        transport = FakeTransport(b"\xff\xfe\x00")
        with pytest.raises(DecodeError) as exc_info:
            self.dispatcher.execute_raw(UserFriends(), self.creds, transport)
        assert exc_info.value.field_path == "<body>"
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_build_url_does_not_send(self):
        url = self.dispatcher.build_url(BlogEntryView(blog_entry_id=82347), self.creds)
        assert url.startswith("https://codeforces.com/api/blogEntry.view?apiKey=")
        assert "&apiSig=123456" in url

    def test_fresh_time_per_call(self):
        ticks = iter([100, 200])
        dispatcher = Dispatcher(clock=lambda: next(ticks), nonce_source=lambda: "123456")
        transport = FakeTransport(payloads.ok(["tourist"]))
        dispatcher.execute(UserFriends(), self.creds, transport)
        dispatcher.execute(UserFriends(), self.creds, transport)
        assert "time=100" in transport.urls[0]
        assert "time=200" in transport.urls[1]


class TestClient:
    """便捷客户端"""

    def setup_method(self):
        self.config = ClientConfig(api_key=API_KEY, api_secret=API_SECRET)

    def test_execute_with_config_credentials(self):
        transport = FakeTransport(payloads.ok([payloads.USER]))
        client = CodeforcesClient(config=self.config, transport=transport)
        result = client.execute(UserInfo(handles=["thud"]))
        assert result.value[0].handle == "thud"
        assert f"apiKey={API_KEY}" in transport.urls[0]

    def test_missing_credentials(self):
        with pytest.raises(InvalidParameterError):
            CodeforcesClient(config=ClientConfig(), transport=FakeTransport())

    def test_custom_base_url(self):
        config = ClientConfig(api_base_url="http://localhost:8080/api", api_key="k", api_secret="s")
        client = CodeforcesClient(config=config, transport=FakeTransport())
        assert client.build_url(UserFriends()).startswith("http://localhost:8080/api/user.friends?")

    def test_context_manager(self):
        transport = FakeTransport(payloads.ok(["tourist"]))
        with CodeforcesClient(config=self.config, transport=transport) as client:
            assert client.execute_raw(UserFriends()).startswith("{")
