import json
from datetime import datetime, timezone

import pytest
import requests
import responses

from bybitconnect.client import (
    Client,
    ServerResponse,
    ServiceRequest,
    format_timestamp,
    get_current_time,
    parse_server_response,
    pretty_print,
    sign,
)
from bybitconnect.consts import (
    API_REQUEST_KEY,
    MAINNET,
    NAME,
    RECV_WINDOW_KEY,
    SIGN_TYPE_KEY,
    SIGNATURE_KEY,
    TIMESTAMP_KEY,
    VERSION,
)
from bybitconnect.errors import APIError

BASE = "https://api.example.com"
API_KEY = "placeholder"
API_SECRET = "secret"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


def make_client(**kwargs):
    return Client(api_key=API_KEY, api_secret=API_SECRET, base_url=BASE, **kwargs)


def test_parse_server_response_full():
    data = b'{"retCode":0,"retMsg":"OK","result":{"timeSecond":"1688639403"},"retExtInfo":{},"time":1688639403423}'
    res = parse_server_response(data)
    assert res.ret_code == 0
    assert res.ret_msg == "OK"
    assert res.result == {"timeSecond": "1688639403"}
    assert res.ret_ext_info == {}
    assert res.time == 1688639403423


def test_parse_server_response_missing_fields_default():
    res = parse_server_response("{}")
    assert res == ServerResponse()


def test_parse_server_response_invalid_json():
    with pytest.raises(ValueError):
        parse_server_response(b"not json")


def test_parse_server_response_rejects_array():
    with pytest.raises(ValueError):
        parse_server_response(b"[1, 2]")


def test_pretty_print_round_trip():
    res = ServerResponse(ret_code=0, ret_msg="OK", result={"a": [1, 2]}, time=5)
    text = pretty_print(res)
    assert json.loads(text) == res.to_dict()
    assert '\n "retCode": 0' in text


def test_format_timestamp_utc():
    moment = datetime(2017, 7, 3, tzinfo=timezone.utc)
    assert format_timestamp(moment) == 1499040000000


def test_format_timestamp_keeps_milliseconds():
    moment = datetime(2017, 7, 3, 0, 0, 0, 1000, tzinfo=timezone.utc)
    assert format_timestamp(moment) == 1499040000001


def test_get_current_time_is_milliseconds():
    before = datetime.now(timezone.utc)
    now = get_current_time()
    after = datetime.now(timezone.utc)
    assert format_timestamp(before) - 1 <= now <= format_timestamp(after) + 1


def test_sign_known_vector():
    assert sign("Jefe", "what do ya want for nothing?") == (
        "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
    )


def test_sign_depends_on_secret():
    first = sign("secret", "payload")
    assert len(first) == 64
    assert first == sign("secret", "payload")
    assert first != sign("token", "payload")


def test_default_base_url():
    assert Client().base_url == MAINNET


def test_prepare_unsigned_get_sorts_query():
    prepared = make_client().prepare("GET", "/v5/market/kline", {"symbol": "BTCUSDT", "category": "spot"})
    assert prepared.url == f"{BASE}/v5/market/kline?category=spot&symbol=BTCUSDT"
    assert prepared.headers == {"User-Agent": f"{NAME}/{VERSION}"}
    assert prepared.body == b""


def test_prepare_formats_booleans():
    prepared = make_client().prepare("GET", "/x", {"flag": True})
    assert prepared.url.endswith("?flag=true")


def test_prepare_without_params_has_no_query():
    prepared = make_client().prepare("GET", "/v5/market/time")
    assert prepared.url == f"{BASE}/v5/market/time"


def test_prepare_signed_get():
    client = make_client()
    prepared = client.prepare("GET", "/v5/account/fee-rate", {"symbol": "BTCUSDT", "category": "linear"}, signed=True)
    headers = prepared.headers
    assert headers[SIGN_TYPE_KEY] == "2"
    assert headers[API_REQUEST_KEY] == API_KEY
    assert headers[RECV_WINDOW_KEY] == "5000"
    payload = headers[TIMESTAMP_KEY] + API_KEY + "5000" + "category=linear&symbol=BTCUSDT"
    assert headers[SIGNATURE_KEY] == sign(API_SECRET, payload)
    assert "Content-Type" not in headers


def test_prepare_signed_post_signs_body():
    client = make_client()
    params = {"symbol": "BTCUSDT", "category": "linear", "qty": "0.001"}
    prepared = client.prepare("POST", "/v5/order/create", params, signed=True, recv_window=10000)
    assert json.loads(prepared.body) == params
    assert list(json.loads(prepared.body)) == sorted(params)
    assert b" " not in prepared.body
    headers = prepared.headers
    assert headers["Content-Type"] == "application/json"
    assert headers[RECV_WINDOW_KEY] == "10000"
    payload = headers[TIMESTAMP_KEY] + API_KEY + "10000" + prepared.body.decode()
    assert headers[SIGNATURE_KEY] == sign(API_SECRET, payload)
    assert prepared.url == f"{BASE}/v5/order/create"


def test_call_api_returns_raw_body(rsps):
    body = b'{"retCode":0,"retMsg":"OK"}'
    rsps.add(responses.GET, f"{BASE}/v5/market/time?category=spot", body=body, status=200)
    data = make_client().call_api("GET", "/v5/market/time", {"category": "spot"})
    assert data == body
    assert rsps.calls[0].request.url == f"{BASE}/v5/market/time?category=spot"


def test_call_api_sends_post_body(rsps):
    rsps.add(responses.POST, f"{BASE}/v5/account/set-margin-mode", body=b"{}", status=200)
    data = make_client().call_api(
        "POST", "/v5/account/set-margin-mode", {"setMarginMode": "PORTFOLIO_MARGIN"}, signed=True
    )
    assert data == b"{}"
    sent = rsps.calls[0].request
    assert json.loads(sent.body) == {"setMarginMode": "PORTFOLIO_MARGIN"}
    assert sent.headers[API_REQUEST_KEY] == API_KEY


def test_call_api_raises_api_error(rsps):
    rsps.add(responses.GET, f"{BASE}/v5/account/info", body=b'{"retCode":10003,"retMsg":"invalid key"}', status=401)
    with pytest.raises(APIError) as info:
        make_client().call_api("GET", "/v5/account/info", signed=True)
    assert info.value.code == 10003
    assert info.value.message == "invalid key"


def test_call_api_error_without_json_body(rsps):
    rsps.add(responses.GET, f"{BASE}/v5/account/info", body=b"bad gateway", status=502)
    with pytest.raises(APIError) as info:
        make_client().call_api("GET", "/v5/account/info")
    assert info.value.code == 0
    assert info.value.message == ""


def test_invalid_proxy_url_rejected():
    with pytest.raises(ValueError, match="invalid proxy URL"):
        Client(proxy_url="http://[::1")


def test_proxy_url_applied_to_session():
    session = requests.Session()
    client = Client(proxy_url="http://localhost:8080", session=session)
    assert client.session.proxies == {"http": "http://localhost:8080", "https": "http://localhost:8080"}


def test_service_request_validation_before_sending():
    service = ServiceRequest(make_client(), {"": "x"})
    with pytest.raises(ValueError, match="empty key"):
        service._request("GET", "/v5/account/fee-rate", validate=True)


def test_service_request_parses_response(rsps):
    rsps.add(
        responses.GET,
        f"{BASE}/v5/account/fee-rate?category=linear",
        body=b'{"retCode":0,"retMsg":"OK","result":{"list":[]},"time":7}',
        status=200,
    )
    service = ServiceRequest(make_client(), {"category": "linear"})
    res = service._request("GET", "/v5/account/fee-rate", validate=True)
    assert res.result == {"list": []}
    assert res.time == 7
    assert service.is_uta is True