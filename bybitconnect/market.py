"""Public market-data endpoints and decoders for kline replies."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar, Union

from .client import ServerResponse, ServiceRequest

_Candle = TypeVar("_Candle")


@dataclass(frozen=True)
class KlineCandle:
    """One trading kline: prices, volume and turnover as sent by the server."""

    start_time: str
    open_price: str
    high_price: str
    low_price: str
    close_price: str
    volume: str
    turnover: str


@dataclass(frozen=True)
class PriceKlineCandle:
    """One mark, index or premium-index price kline."""

    start_time: str
    open_price: str
    high_price: str
    low_price: str
    close_price: str


@dataclass
class KlineResponse:
    """The decoded ``result`` of a kline reply."""

    category: str = ""
    symbol: str = ""
    candles: list[Union[KlineCandle, PriceKlineCandle]] = field(default_factory=list)


def _as_string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _parse_kline(
    data: bytes | str,
    width: int,
    build: Callable[..., _Candle],
) -> KlineResponse:
    document = json.loads(data)
    result = document.get("result") if isinstance(document, dict) else None
    if not isinstance(result, dict):
        result = {}
    rows = result.get("list")
    if not isinstance(rows, list):
        rows = []

    candles = []
    for row in rows:
        if not isinstance(row, list) or len(row) < width:
            raise ValueError("invalid kline response")
        candles.append(build(*(_as_string(cell) for cell in row[:width])))

    return KlineResponse(
        category=_as_string(result.get("category")),
        symbol=_as_string(result.get("symbol")),
        candles=candles,
    )


def parse_market_kline(data: bytes | str) -> KlineResponse:
    """Decode a trading kline reply; each row must have seven fields."""
    return _parse_kline(data, 7, KlineCandle)


def parse_mark_price_kline(data: bytes | str) -> KlineResponse:
    """Decode a mark-price kline reply; each row must have five fields."""
    return _parse_kline(data, 5, PriceKlineCandle)


def parse_index_price_kline(data: bytes | str) -> KlineResponse:
    """Decode an index-price kline reply; each row must have five fields."""
    return _parse_kline(data, 5, PriceKlineCandle)


def parse_premium_index_kline(data: bytes | str) -> KlineResponse:
    """Decode a premium-index kline reply; each row must have five fields."""
    return _parse_kline(data, 5, PriceKlineCandle)


class MarketService(ServiceRequest):
    """Unsigned requests for public market data."""

    def _public(self, endpoint: str) -> ServerResponse:
        return self._request("GET", endpoint, signed=False)

    def get_server_time(self) -> ServerResponse:
        return self._public("/v5/market/time")

    def get_market_kline(self) -> ServerResponse:
        return self._public("/v5/market/kline")

    def get_mark_price_kline(self) -> ServerResponse:
        return self._public("/v5/market/mark-price-kline")

    def get_index_price_kline(self) -> ServerResponse:
        return self._public("/v5/market/mark-price-kline")

    def get_premium_index_price_kline(self) -> ServerResponse:
        return self._public("/v5/market/mark-price-kline")

    def get_instrument_info(self) -> ServerResponse:
        return self._public("/v5/market/instruments-info")

    def get_order_book_info(self) -> ServerResponse:
        return self._public("/v5/market/orderbook")

    def get_market_tickers(self) -> ServerResponse:
        return self._public("/v5/market/tickers")

    def get_funding_rate_history(self) -> ServerResponse:
        return self._public("/v5/market/funding/history")

    def get_public_recent_trades(self) -> ServerResponse:
        return self._public("/v5/market/recent-trade")

    def get_open_interests(self) -> ServerResponse:
        return self._public("/v5/market/open-interest")

    def get_history_volatility(self) -> ServerResponse:
        return self._public("/v5/market/historical-volatility")

    def get_market_insurance(self) -> ServerResponse:
        return self._public("/v5/market/insurance")

    def get_market_risk_limits(self) -> ServerResponse:
        return self._public("/v5/market/risk-limit")

    def get_delivery_price(self) -> ServerResponse:
        return self._public("/v5/market/delivery-price")

    def get_long_short_ratio(self) -> ServerResponse:
        return self._public("/v5/market/account-ratio")