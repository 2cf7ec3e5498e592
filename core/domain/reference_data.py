from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional
from .device import DeviceValue

@dataclass(frozen=True)
class ReferenceData:
    """Read-only snapshot of the ZIP and device tables, built once at startup"""
    zip_power: Mapping[str, float] = field(default_factory=dict)
    devices: Mapping[str, DeviceValue] = field(default_factory=dict)

    def __post_init__(self):
        # Copy into read-only views so no caller can mutate the shared tables
        object.__setattr__(self, "zip_power", MappingProxyType(dict(self.zip_power)))
        object.__setattr__(
            self,
            "devices",
            MappingProxyType({k.lower(): v for k, v in self.devices.items()}),
        )

    def get_zip_power(self, zip_code: str) -> Optional[float]:
        return self.zip_power.get(zip_code)

    def get_device(self, device_type: str) -> Optional[DeviceValue]:
        return self.devices.get(device_type.lower())
