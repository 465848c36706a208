"""One request object exposing every REST endpoint, for either account mode."""

from __future__ import annotations

from typing import Any, Mapping

from .account import AccountService
from .asset import AssetService
from .broker import BrokerService
from .client import Client
from .lending import LendingService
from .market import MarketService


class BybitService(MarketService, AccountService, BrokerService, AssetService, LendingService):
    """All REST endpoints bound to one client and one set of parameters."""


def uta_service(client: Client, params: Mapping[str, Any] | None = None) -> BybitService:
    """Requests for a unified trading account."""
    return BybitService(client, params, is_uta=True)


def classic_service(client: Client, params: Mapping[str, Any] | None = None) -> BybitService:
    """Requests for a classic account."""
    return BybitService(client, params, is_uta=False)