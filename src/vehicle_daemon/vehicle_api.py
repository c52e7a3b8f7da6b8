"""
HTTP client for the vehicle owner API.

Provides the "send command and refresh" primitive used by ChargeController and the
vehicle list fetch that supplies each vehicle's option-code string. Token handling is
limited to sending a configured bearer token; there is no login flow and no retry.
"""

import logging
from typing import List, Optional

import httpx

from common.models import CommandResult, VehicleInfo
from vehicle_daemon._version import VERSION
from vehicle_daemon.config import get_vehicle_api_config

logger = logging.getLogger(__name__)

_client: Optional["VehicleApiClient"] = None


class VehicleApiClient:
    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 20.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self.headers = {"User-Agent": f"options2api/{VERSION}"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"
        self._http = httpx.Client(
            base_url=base_url, headers=self.headers, timeout=timeout, transport=transport
        )

    def close(self):
        self._http.close()

    def send_and_refresh(self, command: str) -> CommandResult:
        """
        POST a command path and report the vehicle's answer.

        The vehicle answers ``{"response": {"result": bool, "reason": str}}``; HTTP and
        transport errors become a failed CommandResult carrying the error text.
        """
        try:
            resp = self._http.post(command)
            resp.raise_for_status()
            payload = resp.json().get("response") or {}
        except httpx.HTTPStatusError as e:
            logger.error(f"Command '{command}' rejected with HTTP {e.response.status_code}")
            return CommandResult(success=False, message=f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error(f"Command '{command}' failed: {e}")
            return CommandResult(success=False, message=str(e))
        except ValueError as e:
            logger.error(f"Command '{command}' returned an unreadable body: {e}")
            return CommandResult(success=False, message="invalid response body")

        return CommandResult(
            success=bool(payload.get("result", False)), message=payload.get("reason") or ""
        )

    def fetch_vehicles(self) -> List[VehicleInfo]:
        """
        List the account's vehicles with their option-code strings.

        Entries without an ``id`` are skipped.

        Raises:
            httpx.HTTPError: if the request fails.
            ValueError: if the body is not a JSON object.
        """
        resp = self._http.get("vehicles")
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, dict):
            raise ValueError("vehicle list is not a JSON object")
        entries = payload.get("response") or []
        if not isinstance(entries, list):
            raise ValueError("vehicle list response is not a JSON array")
        vehicles = []
        for entry in entries:
            if not isinstance(entry, dict) or entry.get("id") is None:
                logger.warning(f"Skipping vehicle entry without an id: {entry!r}")
                continue
            vehicles.append(
                VehicleInfo(
                    vehicle_id=str(entry.get("id")),
                    vin=entry.get("vin"),
                    display_name=entry.get("display_name"),
                    option_codes=entry.get("option_codes"),
                )
            )
        logger.info(f"Fetched {len(vehicles)} vehicles from {self.base_url}")
        return vehicles


def get_vehicle_api_client() -> VehicleApiClient:
    """Return the shared client, creating it from the environment on first use."""
    global _client
    if _client is None:
        cfg = get_vehicle_api_config()
        _client = VehicleApiClient(cfg["base_url"], cfg["token"], cfg["timeout"])
    return _client


def close_vehicle_api_client():
    global _client
    if _client is not None:
        _client.close()
        _client = None
