"""API client for the Nature Remo cloud.

This module provides the client used to interact with the Nature Remo API,
including user, device, appliance and infrared signal management.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx

from .const import (
    BASE_URL,
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    DEFAULT_API_VERSION,
    HTTP_OK_MAX,
    HTTP_OK_MIN,
    HTTP_UNAUTHORIZED,
)
from .models import (
    Appliance,
    ApplianceModelAndParam,
    Device,
    InfraredSignal,
    Signal,
    User,
)

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class RemoApiClientError(Exception):
    """Base exception for Nature Remo API client errors.

    Attributes:
        status_code: HTTP status of the failed response, or None if no
            response was received.
        body: Text of the failed response, or None.

    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RemoApiAuthError(RemoApiClientError):
    """Exception raised when the access token is rejected."""


class RemoApiConnectionError(RemoApiClientError):
    """Exception raised when no response could be received."""


def create_headers(token: str) -> dict[str, str]:
    """Create HTTP headers for Nature Remo API requests.

    Args:
        token: OAuth access token issued by home.nature.global.

    Returns:
        Dictionary containing HTTP headers for API requests.

    """
    return {
        "Authorization": f"Bearer {token}",
        "Accept": CONTENT_TYPE_JSON,
        "Content-Type": CONTENT_TYPE_FORM,
    }


def is_http_error(status: int) -> bool:
    """Check if HTTP status code indicates an error.

    Args:
        status: HTTP status code to check.

    Returns:
        True if status code is outside the 2xx range, False otherwise.

    """
    return not HTTP_OK_MIN <= status <= HTTP_OK_MAX


def is_auth_error(status: int) -> bool:
    """Check if HTTP status code indicates authentication error.

    Args:
        status: HTTP status code to check.

    Returns:
        True if status code is 401, False otherwise.

    """
    return status == HTTP_UNAUTHORIZED


def encode_form(params: dict[str, Any]) -> dict[str, str]:
    """Encode request parameters as flat form fields.

    None values are dropped, lists are comma-joined and objects are
    embedded as compact JSON.

    Args:
        params: Parameters to encode.

    Returns:
        Dictionary of form field names to string values.

    """
    return {
        key: _encode_value(value) for key, value in params.items() if value is not None
    }


def _encode_value(value: Any) -> str:
    if isinstance(value, InfraredSignal):
        value = value.to_dict()
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def validate_response(response: httpx.Response) -> Any:
    """Validate HTTP response and return parsed JSON data.

    Args:
        response: HTTP response object to validate.

    Returns:
        Parsed JSON data from response.

    Raises:
        RemoApiAuthError: If authentication error is detected.
        RemoApiClientError: If the request failed or the body is not JSON.

    """
    _validate_http_status(response)
    return _decode_json(response)


def _decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as err:
        error_msg = f"Invalid JSON response: {err}"
        raise RemoApiClientError(
            error_msg, status_code=response.status_code, body=response.text
        ) from err


def _validate_http_status(response: httpx.Response) -> None:
    if not is_http_error(response.status_code):
        return

    _LOGGER.debug(
        "%s %s failed with status %d",
        response.request.method,
        response.request.url,
        response.status_code,
    )

    if is_auth_error(response.status_code):
        auth_error = "Authentication error"
        raise RemoApiAuthError(
            auth_error, status_code=response.status_code, body=response.text
        )

    client_error = f"Request failed: {response.status_code}"
    raise RemoApiClientError(
        client_error, status_code=response.status_code, body=response.text
    )


def extract_model(data: dict[str, Any], model: type[_T]) -> _T:
    """Build a single record from API response data."""
    return model.from_dict(data)  # type: ignore[attr-defined]


def extract_list(data: list[dict[str, Any]], model: type[_T]) -> list[_T]:
    """Build a list of records from API response data."""
    return [model.from_dict(item) for item in data]  # type: ignore[attr-defined]


class RemoClient:
    """Client for the Nature Remo cloud API.

    Each method issues exactly one request and returns the decoded result.
    The base URL and headers are fixed at construction time.
    """

    def __init__(
        self,
        token: str,
        session: httpx.AsyncClient | None = None,
        *,
        version: int = DEFAULT_API_VERSION,
        base_url: str = BASE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            token: OAuth access token.
            session: HTTP client session. A new one is created, and owned
                by this client, when omitted.
            version: API version, used as the first path segment.
            base_url: API endpoint without the version segment.

        """
        self._base_url = f"{base_url.rstrip('/')}/{version}"
        self._headers = create_headers(token)
        self._owns_session = session is None
        self._session = session if session is not None else httpx.AsyncClient()

    @property
    def base_url(self) -> str:
        """Return the versioned API base URL."""
        return self._base_url

    async def aclose(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            await self._session.aclose()

    async def __aenter__(self) -> RemoClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        data = encode_form(params) if params else None
        try:
            response = await self._session.request(
                method, url, headers=self._headers, data=data
            )
        except httpx.TransportError as err:
            error_msg = f"Request to {url} failed: {err}"
            raise RemoApiConnectionError(error_msg) from err
        _validate_http_status(response)
        return response

    async def _get_json(self, path: str) -> Any:
        response = await self._request("GET", path)
        return _decode_json(response)

    async def _post_json(self, path: str, params: dict[str, Any]) -> Any:
        response = await self._request("POST", path, params)
        return _decode_json(response)

    async def _post(self, path: str, params: dict[str, Any] | None = None) -> None:
        await self._request("POST", path, params)

    # Users

    async def async_fetch_me(self) -> User:
        """Fetch the profile of the authenticated user."""
        _LOGGER.debug("Fetching user profile from Nature Remo API")
        data = await self._get_json("/users/me")
        user = extract_model(data, User)
        _LOGGER.debug("Retrieved user profile %s", user.id)
        return user

    async def async_update_me(self, nickname: str) -> User:
        """Update the nickname of the authenticated user.

        Args:
            nickname: New nickname.

        Returns:
            The updated user.

        """
        _LOGGER.debug("Updating user profile")
        data = await self._post_json("/users/me", {"nickname": nickname})
        user = extract_model(data, User)
        _LOGGER.debug("Updated user profile %s", user.id)
        return user

    # Devices

    async def async_fetch_devices(self) -> list[Device]:
        """Fetch the Remo hubs of the user with their newest sensor readings."""
        _LOGGER.debug("Fetching devices from Nature Remo API")
        data = await self._get_json("/devices")
        devices = extract_list(data, Device)
        _LOGGER.debug("Retrieved %d devices from Nature Remo API", len(devices))
        return devices

    async def async_update_device(self, device: str, name: str) -> None:
        """Rename a Remo hub."""
        _LOGGER.debug("Renaming device %s to %s", device, name)
        await self._post(f"/devices/{device}", {"name": name})
        _LOGGER.debug("Renamed device %s", device)

    async def async_delete_device(self, device: str) -> None:
        """Delete a Remo hub."""
        _LOGGER.debug("Deleting device %s", device)
        await self._post(f"/devices/{device}/delete")
        _LOGGER.debug("Deleted device %s", device)

    async def async_update_temperature_offset(
        self, device: str, offset: float
    ) -> None:
        """Update the temperature sensor offset of a Remo hub."""
        _LOGGER.debug("Setting temperature offset of device %s to %s", device, offset)
        await self._post(f"/devices/{device}/temperature_offset", {"offset": offset})
        _LOGGER.debug("Updated temperature offset of device %s", device)

    async def async_update_humidity_offset(self, device: str, offset: float) -> None:
        """Update the humidity sensor offset of a Remo hub."""
        _LOGGER.debug("Setting humidity offset of device %s to %s", device, offset)
        await self._post(f"/devices/{device}/humidity_offset", {"offset": offset})
        _LOGGER.debug("Updated humidity offset of device %s", device)

    # Appliances

    async def async_detect_appliance(
        self, message: InfraredSignal | dict[str, Any]
    ) -> list[ApplianceModelAndParam]:
        """Find the air conditioner models matching an infrared signal.

        Args:
            message: Signal captured from the appliance's remote.

        Returns:
            Candidate models with the settings the signal encodes.

        """
        _LOGGER.debug("Detecting appliance from infrared signal")
        data = await self._post_json(
            "/detectappliance", {"message": message}
        )
        candidates = extract_list(data, ApplianceModelAndParam)
        _LOGGER.debug("Detected %d candidate appliance models", len(candidates))
        return candidates

    async def async_update_aircon_settings(
        self,
        appliance: str,
        temperature: str | None = None,
        operation_mode: str | None = None,
        air_volume: str | None = None,
        air_direction: str | None = None,
        button: str | None = None,
    ) -> None:
        """Update the settings of an air conditioner.

        Only the given settings are sent; the rest are left unchanged.

        Args:
            appliance: Appliance identifier.
            temperature: Target temperature.
            operation_mode: Operation mode (cool, warm, dry, blow, auto).
            air_volume: Fan speed.
            air_direction: Louver direction.
            button: Button to press, e.g. "power-off".

        """
        params = {
            "temperature": temperature,
            "operation_mode": operation_mode,
            "air_volume": air_volume,
            "air_direction": air_direction,
            "button": button,
        }
        _LOGGER.debug("Updating aircon settings of appliance %s: %s", appliance, params)
        await self._post(f"/appliances/{appliance}/aircon_settings", params)
        _LOGGER.debug("Updated aircon settings of appliance %s", appliance)

    async def async_fetch_appliances(self) -> list[Appliance]:
        """Fetch the appliances of the user."""
        _LOGGER.debug("Fetching appliances from Nature Remo API")
        data = await self._get_json("/appliances")
        appliances = extract_list(data, Appliance)
        _LOGGER.debug("Retrieved %d appliances from Nature Remo API", len(appliances))
        return appliances

    async def async_create_appliance(
        self,
        device: str,
        nickname: str,
        image: str,
        model: str | None = None,
    ) -> Appliance:
        """Create an appliance controlled by a Remo hub.

        Args:
            device: Identifier of the controlling hub.
            nickname: Appliance name.
            image: Icon name.
            model: Appliance model identifier, if known.

        Returns:
            The created appliance.

        """
        _LOGGER.debug("Creating appliance %s on device %s", nickname, device)
        data = await self._post_json(
            "/appliances",
            {"device": device, "nickname": nickname, "image": image, "model": model},
        )
        created = extract_model(data, Appliance)
        _LOGGER.debug("Created appliance %s", created.id)
        return created

    async def async_reorder_appliances(self, appliances: list[str]) -> None:
        """Reorder the appliances of the user.

        Args:
            appliances: All appliance identifiers in the desired order.

        """
        _LOGGER.debug("Reordering %d appliances", len(appliances))
        await self._post("/appliance_orders", {"appliances": appliances})
        _LOGGER.debug("Reordered appliances")

    async def async_delete_appliance(self, appliance: str) -> None:
        """Delete an appliance."""
        _LOGGER.debug("Deleting appliance %s", appliance)
        await self._post(f"/appliances/{appliance}/delete")
        _LOGGER.debug("Deleted appliance %s", appliance)

    async def async_update_appliance(
        self, appliance: str, nickname: str, image: str
    ) -> Appliance:
        """Rename an appliance or change its icon."""
        _LOGGER.debug("Updating appliance %s", appliance)
        data = await self._post_json(
            f"/appliances/{appliance}", {"nickname": nickname, "image": image}
        )
        updated = extract_model(data, Appliance)
        _LOGGER.debug("Updated appliance %s", updated.id)
        return updated

    async def async_fetch_appliance_signals(self, appliance: str) -> list[Signal]:
        """Fetch the infrared signals stored for an appliance."""
        _LOGGER.debug("Fetching signals of appliance %s", appliance)
        data = await self._get_json(f"/appliances/{appliance}/signals")
        signals = extract_list(data, Signal)
        _LOGGER.debug(
            "Retrieved %d signals of appliance %s", len(signals), appliance
        )
        return signals

    async def async_create_appliance_signal(
        self,
        appliance: str,
        message: InfraredSignal | dict[str, Any],
        image: str,
        name: str,
    ) -> Signal:
        """Store a new infrared signal for an appliance.

        Args:
            appliance: Appliance identifier.
            message: Signal to store.
            image: Icon name.
            name: Signal name.

        Returns:
            The created signal.

        """
        _LOGGER.debug("Creating signal %s on appliance %s", name, appliance)
        data = await self._post_json(
            f"/appliances/{appliance}/signals",
            {"message": message, "image": image, "name": name},
        )
        created = extract_model(data, Signal)
        _LOGGER.debug("Created signal %s on appliance %s", created.id, appliance)
        return created

    async def async_reorder_appliance_signals(
        self, appliance: str, signals: list[str]
    ) -> None:
        """Reorder the signals of an appliance.

        Args:
            appliance: Appliance identifier.
            signals: All signal identifiers in the desired order.

        """
        _LOGGER.debug("Reordering %d signals of appliance %s", len(signals), appliance)
        await self._post(
            f"/appliances/{appliance}/signal_orders", {"signals": signals}
        )
        _LOGGER.debug("Reordered signals of appliance %s", appliance)

    # Signals

    async def async_update_signal(self, signal: str, image: str, name: str) -> None:
        """Rename a signal or change its icon."""
        _LOGGER.debug("Updating signal %s", signal)
        await self._post(f"/signals/{signal}", {"image": image, "name": name})
        _LOGGER.debug("Updated signal %s", signal)

    async def async_delete_signal(self, signal: str) -> None:
        """Delete a signal."""
        _LOGGER.debug("Deleting signal %s", signal)
        await self._post(f"/signals/{signal}/delete")
        _LOGGER.debug("Deleted signal %s", signal)

    async def async_send_signal(self, signal: str) -> None:
        """Emit a stored infrared signal."""
        _LOGGER.debug("Sending signal %s", signal)
        await self._post(f"/signals/{signal}/send")
        _LOGGER.debug("Sent signal %s", signal)
