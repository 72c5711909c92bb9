"""Async client for the Nature Remo cloud API."""

from .api import (
    RemoApiAuthError,
    RemoApiClientError,
    RemoApiConnectionError,
    RemoClient,
)
from .models import (
    AirCon,
    AirConParams,
    AirConRange,
    AirConRangeMode,
    Appliance,
    ApplianceModel,
    ApplianceModelAndParam,
    Device,
    DeviceCore,
    InfraredSignal,
    NewestEvents,
    SensorValue,
    Signal,
    User,
)

__all__ = [
    "AirCon",
    "AirConParams",
    "AirConRange",
    "AirConRangeMode",
    "Appliance",
    "ApplianceModel",
    "ApplianceModelAndParam",
    "Device",
    "DeviceCore",
    "InfraredSignal",
    "NewestEvents",
    "RemoApiAuthError",
    "RemoApiClientError",
    "RemoApiConnectionError",
    "RemoClient",
    "SensorValue",
    "Signal",
    "User",
]
