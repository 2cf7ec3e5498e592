import json

import pytest

from core.domain.device import AgeBucket, DeviceValue
from core.domain.reference_data import ReferenceData

ZIP_TABLE = {
    "30000": 30000,
    "60000": 60000,
    "90000": 90000,
    "10001": 100000,
    "02108": 88000,
}

DEVICE_TABLE = {
    "laptop": {
        "retailPrice": 100000,
        "ageValueMultiplier": {"0-1": 0.5, "2-4": 0.25}
    },
    "unit": {
        "retailPrice": 1,
        "ageValueMultiplier": {"0-10": 1.0}
    },
    "Mobile": {
        "retailPrice": 1,
        "ageValueMultiplier": {"0-10": 1.0}
    }
}


def _device(device_type, retail_price, buckets):
    return DeviceValue(
        device_type=device_type,
        retail_price=retail_price,
        buckets=tuple(AgeBucket.from_label(label, m) for label, m in buckets.items()),
    )


@pytest.fixture
def make_device():
    """Build a DeviceValue from a {"min-max": multiplier} mapping"""
    return _device


@pytest.fixture
def reference_data():
    """Snapshot built from the sample tables above"""
    devices = {
        name.lower(): _device(name.lower(), record["retailPrice"], record["ageValueMultiplier"])
        for name, record in DEVICE_TABLE.items()
    }
    return ReferenceData(zip_power={k: float(v) for k, v in ZIP_TABLE.items()}, devices=devices)


@pytest.fixture
def data_files(tmp_path):
    """Write the sample tables to disk and return (zip_path, device_path)"""
    zip_path = tmp_path / "zip_purchasing_power.json"
    device_path = tmp_path / "device_value.json"
    zip_path.write_text(json.dumps(ZIP_TABLE), encoding="utf-8")
    device_path.write_text(json.dumps(DEVICE_TABLE), encoding="utf-8")
    return zip_path, device_path
