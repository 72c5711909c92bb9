"""Pytest configuration and fixtures for Nature Remo tests."""

import pytest


@pytest.fixture
def sample_user_response() -> dict:
    """Fixture providing a sample /users/me response."""
    return {"id": "test_id", "nickname": "test_nickname"}


@pytest.fixture
def sample_sensor_value() -> dict:
    """Fixture providing a sample sensor reading."""
    return {"value": 123, "created_at": "test_created_at"}


@pytest.fixture
def sample_device_core() -> dict:
    """Fixture providing a device as embedded in an appliance."""
    return {
        "id": "test_id",
        "name": "test_name",
        "temperature_offset": 123,
        "humidity_offset": 123,
        "created_at": "test_created_at",
        "updated_at": "test_updated_at",
        "firmware_version": "test_firmware_version",
    }


@pytest.fixture
def sample_device(sample_device_core: dict, sample_sensor_value: dict) -> dict:
    """Fixture providing a device with its newest sensor readings.

    Args:
        sample_device_core: Device fields fixture.
        sample_sensor_value: Sensor reading fixture.

    Returns:
        A dictionary representing one element of a /devices response.

    """
    return {
        **sample_device_core,
        "newest_events": {"te": sample_sensor_value, "hu": sample_sensor_value},
    }


@pytest.fixture
def sample_appliance_model() -> dict:
    """Fixture providing a sample appliance model."""
    return {
        "id": "test_id",
        "manufacturer": "test_manufacturer",
        "remote_name": "test_remote_name",
        "name": "test_name",
        "image": "test_image",
    }


@pytest.fixture
def sample_aircon_params() -> dict:
    """Fixture providing sample air conditioner settings."""
    return {
        "temp": "test_temp",
        "vol": "test_vol",
        "dir": "test_dir",
        "mode": "test_mode",
        "button": "test_button",
    }


@pytest.fixture
def sample_aircon() -> dict:
    """Fixture providing sample air conditioner capabilities."""
    range_mode = {"temp": ["20", "21"], "vol": ["1", "auto"], "dir": ["swing"]}
    return {
        "range": {
            "modes": {
                "cool": range_mode,
                "warm": range_mode,
                "dry": range_mode,
                "blow": range_mode,
                "auto": range_mode,
            },
            "fixedButtons": ["a", "b", "c"],
        },
        "tempUnit": "test_tempUnit",
    }


@pytest.fixture
def sample_signal() -> dict:
    """Fixture providing a sample stored signal."""
    return {"id": "test_id", "name": "test_name", "image": "test_image"}


@pytest.fixture
def sample_appliance(
    sample_device_core: dict,
    sample_appliance_model: dict,
    sample_aircon_params: dict,
    sample_aircon: dict,
    sample_signal: dict,
) -> dict:
    """Fixture providing a sample air conditioner appliance."""
    return {
        "id": "test_id",
        "device": sample_device_core,
        "model": sample_appliance_model,
        "nickname": "test_nickname",
        "image": "test_image",
        "type": "test_type",
        "settings": sample_aircon_params,
        "aircon": sample_aircon,
        "signals": [sample_signal],
    }


@pytest.fixture
def sample_appliance_model_and_param(
    sample_appliance_model: dict,
    sample_aircon_params: dict,
) -> dict:
    """Fixture providing one element of a /detectappliance response."""
    return {"model": sample_appliance_model, "params": sample_aircon_params}


@pytest.fixture
def sample_infrared_signal() -> dict:
    """Fixture providing a raw infrared signal."""
    return {"format": "test_format", "freq": 39, "data": [101, 102, 103]}
