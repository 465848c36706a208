"""REST client: request preparation, signing, dispatch and response decoding."""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping
from urllib.parse import urlencode, urlsplit

import requests

from .consts import (
    API_REQUEST_KEY,
    MAINNET,
    NAME,
    RECV_WINDOW_KEY,
    SIGN_TYPE_KEY,
    SIGNATURE_KEY,
    TIMESTAMP_KEY,
    VERSION,
)
from .errors import APIError
from .params import validate_params

DEFAULT_RECV_WINDOW = "5000"
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class ServerResponse:
    """The common envelope of every API reply."""

    ret_code: int = 0
    ret_msg: str = ""
    result: Any = None
    ret_ext_info: dict = field(default_factory=dict)
    time: Any = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "retCode": self.ret_code,
            "retMsg": self.ret_msg,
            "result": self.result,
            "retExtInfo": self.ret_ext_info,
            "time": self.time,
        }


@dataclass
class PreparedRequest:
    """A request ready to be sent: full URL, headers and body."""

    method: str
    url: str
    headers: dict[str, str]
    body: bytes = b""


def parse_server_response(data: bytes | str) -> ServerResponse:
    """Decode a JSON reply into a :class:`ServerResponse`."""
    document = json.loads(data)
    if not isinstance(document, dict):
        raise ValueError("server response is not a JSON object")
    return ServerResponse(
        ret_code=document.get("retCode", 0),
        ret_msg=document.get("retMsg", ""),
        result=document.get("result"),
        ret_ext_info=document.get("retExtInfo") or {},
        time=document.get("time", 0),
    )


def _to_jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def pretty_print(value: Any) -> str:
    """Render ``value`` as indented JSON; unrenderable values give an empty string."""
    try:
        return json.dumps(value, indent=" ", default=_to_jsonable, ensure_ascii=False)
    except (TypeError, ValueError):
        return ""


def format_timestamp(moment: datetime) -> int:
    """Milliseconds since the Unix epoch for ``moment``; naive times are local."""
    if moment.tzinfo is None:
        moment = moment.astimezone(timezone.utc)
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def get_current_time() -> int:
    """The current time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def sign(secret: str, payload: str) -> str:
    """Hex HMAC-SHA256 of ``payload`` keyed with ``secret``."""
    return hmac.new(secret.encode(), payload.encode(), hashlib.sha256).hexdigest()


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode_query(params: Mapping[str, Any]) -> str:
    return urlencode(sorted((key, _format_value(value)) for key, value in params.items()))


def _encode_body(params: Mapping[str, Any]) -> bytes:
    text = json.dumps(params, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _JSON_ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode()


def _api_error_from(data: bytes) -> APIError:
    try:
        document = json.loads(data)
    except ValueError:
        return APIError(0, "")
    if not isinstance(document, dict):
        return APIError(0, "")
    return APIError(int(document.get("retCode") or 0), str(document.get("retMsg") or ""))


class Client:
    """Sends signed and unsigned requests to the REST API."""

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        base_url: str = MAINNET,
        debug: bool = False,
        proxy_url: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url
        self.debug = debug
        self.proxy_url = proxy_url
        self.session = session if session is not None else requests.Session()
        self.logger = logging.getLogger(NAME)
        if proxy_url:
            try:
                urlsplit(proxy_url)
            except ValueError as exc:
                self.logger.error("Error parsing proxy URL: %s", exc)
                raise ValueError(f"invalid proxy URL: {proxy_url}") from exc
            self.session.proxies = {"http": proxy_url, "https": proxy_url}

    def _debug(self, message: str, *args: Any) -> None:
        if self.debug:
            self.logger.debug(message, *args)

    def prepare(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        signed: bool = False,
        recv_window: str | int | None = None,
    ) -> PreparedRequest:
        """Build the URL, headers and body, signing them if asked."""
        method = method.upper()
        url = f"{self.base_url}{endpoint}"
        query = ""
        body = b""
        if params is not None:
            if method == "GET":
                query = _encode_query(params)
            else:
                body = _encode_body(params)

        headers = {"User-Agent": f"{NAME}/{VERSION}"}
        if signed:
            timestamp = str(get_current_time())
            window = str(recv_window) if recv_window else DEFAULT_RECV_WINDOW
            headers[SIGN_TYPE_KEY] = "2"
            headers[API_REQUEST_KEY] = self.api_key
            headers[TIMESTAMP_KEY] = timestamp
            headers[RECV_WINDOW_KEY] = window
            if method == "POST":
                headers["Content-Type"] = "application/json"
                payload = timestamp + self.api_key + window + body.decode()
            else:
                payload = timestamp + self.api_key + window + query
            headers[SIGNATURE_KEY] = sign(self.api_secret, payload)

        if query:
            url = f"{url}?{query}"
        self._debug("full url: %s, body: %s", url, body)
        return PreparedRequest(method=method, url=url, headers=headers, body=body)

    def call_api(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        signed: bool = False,
        recv_window: str | int | None = None,
    ) -> bytes:
        """Send a request and return the raw reply body; raise APIError on 4xx/5xx."""
        prepared = self.prepare(method, endpoint, params, signed, recv_window)
        self._debug("request: %s %s", prepared.method, prepared.url)
        response = self.session.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            data=prepared.body or None,
        )
        data = response.content
        self._debug("response body: %s", data)
        self._debug("response status code: %d", response.status_code)
        if response.status_code >= 400:
            raise _api_error_from(data)
        return data


class ServiceRequest:
    """A set of parameters bound to a client, for one account mode."""

    def __init__(
        self,
        client: Client,
        params: Mapping[str, Any] | None = None,
        is_uta: bool = True,
    ) -> None:
        self.client = client
        self.params = params
        self.is_uta = is_uta

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        signed: bool = True,
        validate: bool = False,
    ) -> ServerResponse:
        if validate:
            validate_params(self.params)
        data = self.client.call_api(method, endpoint, self.params, signed=signed)
        return parse_server_response(data)