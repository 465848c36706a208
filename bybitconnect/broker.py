"""Signed broker endpoints."""

from __future__ import annotations

from .client import ServerResponse, ServiceRequest


class BrokerService(ServiceRequest):
    """Broker earnings, account details and sub-member deposits."""

    def get_broker_earning(self) -> ServerResponse:
        return self._request("GET", "/v5/broker/earnings-info", validate=True)

    def get_broker_account_info(self) -> ServerResponse:
        return self._request("GET", "/v5/broker/account-info", validate=True)

    def get_all_sub_members_deposit_records(self) -> ServerResponse:
        return self._request(
            "GET", "/v5/broker/asset/query-sub-member-deposit-record", validate=True
        )