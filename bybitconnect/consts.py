"""Endpoints, identification and header names used by the REST and stream clients."""

NAME = "bybitconnect"
VERSION = "1.0.5"

# REST hosts
MAINNET = "https://api.bybit.com"
MAINNET_BACKT = "https://api.bytick.com"
TESTNET = "https://api-testnet.bybit.com"
DEMO_ENV = "https://api-demo.bybit.com"

_STREAM_MAINNET = "wss://stream.bybit.com"
_STREAM_TESTNET = "wss://stream-testnet.bybit.com"
_STREAM_DEMO = "wss://stream-demo.bybit.com"
_PUBLIC = "/v5/public"

# Public streams, mainnet
SPOT_MAINNET = f"{_STREAM_MAINNET}{_PUBLIC}/spot"
LINEAR_MAINNET = f"{_STREAM_MAINNET}{_PUBLIC}/linear"
INVERSE_MAINNET = f"{_STREAM_MAINNET}{_PUBLIC}/inverse"
OPTION_MAINNET = f"{_STREAM_MAINNET}{_PUBLIC}/option"

# Public streams, testnet
SPOT_TESTNET = f"{_STREAM_TESTNET}{_PUBLIC}/spot"
LINEAR_TESTNET = f"{_STREAM_TESTNET}{_PUBLIC}/linear"
INVERSE_TESTNET = f"{_STREAM_TESTNET}{_PUBLIC}/inverse"
OPTION_TESTNET = f"{_STREAM_TESTNET}{_PUBLIC}/option"

# Private and trade streams
WEBSOCKET_PRIVATE_MAINNET = f"{_STREAM_MAINNET}/v5/private"
WEBSOCKET_TRADE_MAINNET = f"{_STREAM_MAINNET}/v5/trade"
WEBSOCKET_PRIVATE_TESTNET = f"{_STREAM_TESTNET}/v5/private"
WEBSOCKET_TRADE_TESTNET = f"{_STREAM_TESTNET}/v5/trade"
WEBSOCKET_PRIVATE_DEMO = f"{_STREAM_DEMO}/v5/private"
WEBSOCKET_TRADE_DEMO = f"{_STREAM_DEMO}/v5/trade"

# Superseded v3 private streams
V3_CONTRACT_PRIVATE = f"{_STREAM_MAINNET}/contract/private/v3"
V3_UNIFIED_PRIVATE = f"{_STREAM_MAINNET}/unified/private/v3"
V3_SPOT_PRIVATE = f"{_STREAM_MAINNET}/spot/private/v3"

_HEADER_PREFIX = "X-BAPI-"

# Request signing headers
TIMESTAMP_KEY = _HEADER_PREFIX + "TIMESTAMP"
SIGNATURE_KEY = _HEADER_PREFIX + "SIGN"
API_REQUEST_KEY = _HEADER_PREFIX + "API-KEY"
RECV_WINDOW_KEY = _HEADER_PREFIX + "RECV-WINDOW"
SIGN_TYPE_KEY = _HEADER_PREFIX + "SIGN-TYPE"