"""Client for the Bybit v5 API: signed and public REST endpoints, kline decoding and WebSocket streams."""

__version__ = "1.0.5"