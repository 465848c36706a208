# bybitconnect

A small client for the Bybit v5 API: public and signed REST calls over
HTTP, and public or private WebSocket streams.

## Installation

```
pip install bybitconnect
```

To run the test suite:

```
pip install "bybitconnect[test]"
pytest
```

## REST requests

Create a `Client` (from `bybitconnect.client`) with your API credentials
and pick an environment. The hosts for mainnet (`MAINNET`,
`MAINNET_BACKT`), testnet (`TESTNET`) and demo (`DEMO_ENV`) live in
`bybitconnect.consts`.

```python
from bybitconnect.client import Client, pretty_print
from bybitconnect.consts import TESTNET
from bybitconnect.service import uta_service

client = Client(api_key="placeholder", api_secret="secret", base_url=TESTNET)

service = uta_service(client, {"category": "spot", "symbol": "BTCUSDT", "interval": "1"})
response = service.get_market_kline()
print(response.ret_code, response.ret_msg)
print(pretty_print(response))
```

`Client` also takes `debug=True` to log URLs, bodies and replies to the
`bybitconnect` logger, `proxy_url=` to send requests through a proxy, and
`session=` to supply your own `requests.Session`.

`uta_service(client, params)` and `classic_service(client, params)` (from
`bybitconnect.service`) return a `BybitService` that exposes every
endpoint method with the given parameters. The two differ only where the
exchange uses different endpoints: `get_transaction_log` calls
`/v5/account/transaction-log` for a unified account and
`/v5/account/contract-transaction-log` for a classic one. The endpoint
groups are also available on their own as `MarketService`,
`AccountService`, `AssetService`, `BrokerService` and `LendingService`.

Every endpoint method returns a `ServerResponse` with `ret_code`,
`ret_msg`, `result`, `ret_ext_info` and `time`; `to_dict()` gives it back
with the API's own field names.

### How requests are built

- GET parameters go into the query string, sorted by key; booleans are
  written `true` / `false`. Other methods send the parameters as a JSON
  body.
- Market endpoints (`get_server_time`, `get_market_kline`,
  `get_instrument_info`, `get_order_book_info`, `get_market_tickers`,
  `get_funding_rate_history` and the rest) are sent unsigned.
- Account, asset, broker and lending endpoints are signed: the headers
  carry the API key, a millisecond timestamp, a receive window of 5000 ms
  and an HMAC-SHA256 signature over timestamp, key, window and the query
  string (GET) or body (POST). `Client.prepare(...)` and
  `Client.call_api(...)` accept a `recv_window` for other values.
- The C2C lending methods of `LendingService` still work but emit a
  `DeprecationWarning`.

### Kline decoding

Kline replies can be turned into typed candles with the decoders in
`bybitconnect.market`:

```python
from bybitconnect.market import parse_market_kline

klines = parse_market_kline(raw_json_bytes)
print(klines.category, klines.symbol)
for candle in klines.candles:
    print(candle.start_time, candle.close_price, candle.volume)
```

`parse_market_kline` yields `KlineCandle` rows of seven fields.
`parse_mark_price_kline`, `parse_index_price_kline` and
`parse_premium_index_kline` yield five-field `PriceKlineCandle` rows. A
row that is too short raises `ValueError("invalid kline response")`.

## Errors

For many signed endpoints the parameters are checked before the request
goes out (`bybitconnect.params.validate_params`): an empty key or a value
of `None` raises `ValueError`. When the server answers with a 4xx or 5xx
status, `bybitconnect.errors.APIError` is raised carrying the exchange's
`code` and `message`; `is_api_error(error)` tells such errors, and errors
raised from them, apart from transport failures.

## WebSocket streams

```python
from bybitconnect.consts import SPOT_MAINNET
from bybitconnect.websocket import new_public_websocket


def on_message(message):
    print("Received:", message)


ws = new_public_websocket(SPOT_MAINNET, on_message)
ws.connect()
ws.send_subscription(["orderbook.1.BTCUSDT", "orderbook.1.ETHUSDT"])
```

For private and trade streams use
`new_private_websocket(url, api_key, api_secret, handler, ping_interval=20, max_alive_time="")`.
On `connect()` a private or trade URL (see `requires_authentication()`)
is authenticated automatically. Background threads read messages and
pass them to the handler, send a ping every `ping_interval` seconds, and
check every five seconds whether the link dropped, reconnecting if so.
`send_request(op, args, headers)` sends a custom operation, and
`set_message_handler` replaces the handler. Call `ws.disconnect()` to
stop the threads and close the connection. If the handler raises, the
reader for that connection stops.

## What this package does not do

It has no endpoints for placing, amending or cancelling orders, nor for
positions or leverage; it covers market data, account, asset, broker and
lending calls only. Only kline replies are decoded into typed objects;
all other results are left as the plain JSON in `ServerResponse.result`.
There is no command-line tool.