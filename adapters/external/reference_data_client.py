import json
import math
import logging
from pathlib import Path
from typing import Any, Dict

import pandas as pd
from pydantic import ValidationError

from core.domain.device import AgeBucket, DeviceValue
from core.domain.reference_data import ReferenceData
from core.errors import ReferenceDataError

logger = logging.getLogger(__name__)

class ReferenceDataClient:
    """Loads the ZIP purchasing power and device value tables from disk.

    Every problem with the files is raised as ReferenceDataError so the
    service refuses to start instead of failing on individual requests.
    """

    def __init__(
        self,
        zip_path: str = "data/zip_purchasing_power.json",
        device_path: str = "data/device_value.json",
    ):
        self.zip_path = Path(zip_path)
        self.device_path = Path(device_path)

    def load(self) -> ReferenceData:
        """Load and validate both tables into one immutable snapshot"""
        zip_power = self.load_zip_power()
        devices = self.load_devices()
        logger.info(f"Loaded {len(zip_power)} ZIP codes and {len(devices)} device types")
        return ReferenceData(zip_power=zip_power, devices=devices)

    def load_zip_power(self) -> Dict[str, float]:
        logger.info(f"Loading ZIP purchasing power from {self.zip_path}")
        if self.zip_path.suffix.lower() == ".csv":
            raw = self._read_zip_csv()
        else:
            raw = self._read_json(self.zip_path)
            if not isinstance(raw, dict):
                raise ReferenceDataError(f"{self.zip_path}: expected an object of ZIP code -> index")

        zip_power = {}
        for zip_code, value in raw.items():
            zip_power[str(zip_code)] = self._positive_number(value, f"ZIP code '{zip_code}'")
        return zip_power

    def load_devices(self) -> Dict[str, DeviceValue]:
        logger.info(f"Loading device values from {self.device_path}")
        raw = self._read_json(self.device_path)
        if not isinstance(raw, dict):
            raise ReferenceDataError(f"{self.device_path}: expected an object of device type -> record")

        devices: Dict[str, DeviceValue] = {}
        for device_type, record in raw.items():
            key = str(device_type).lower()
            if key in devices:
                raise ReferenceDataError(f"Device type '{device_type}' is defined more than once")
            devices[key] = self._parse_device(key, record)

            overlaps = devices[key].overlapping_labels()
            if overlaps:
                logger.warning(f"Device '{key}' has overlapping age buckets {overlaps}; first match wins")
        return devices

    def _parse_device(self, device_type: str, record: Any) -> DeviceValue:
        if not isinstance(record, dict):
            raise ReferenceDataError(f"Device '{device_type}': record must be an object")
        if "retailPrice" not in record or "ageValueMultiplier" not in record:
            raise ReferenceDataError(
                f"Device '{device_type}': retailPrice and ageValueMultiplier are required"
            )

        multipliers = record["ageValueMultiplier"]
        if not isinstance(multipliers, dict) or not multipliers:
            raise ReferenceDataError(f"Device '{device_type}': ageValueMultiplier must be a non-empty object")

        retail_price = self._positive_number(record["retailPrice"], f"Device '{device_type}' retailPrice")
        try:
            buckets = tuple(
                AgeBucket.from_label(label, self._number(value, f"Device '{device_type}' bucket '{label}'"))
                for label, value in multipliers.items()
            )
            return DeviceValue(device_type=device_type, retail_price=retail_price, buckets=buckets)
        except (ValueError, ValidationError) as e:
            raise ReferenceDataError(f"Device '{device_type}': {e}") from e

    def _read_json(self, path: Path) -> Any:
        try:
            with path.open(encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            raise ReferenceDataError(f"Reference data file not found: {path}") from None
        except json.JSONDecodeError as e:
            raise ReferenceDataError(f"{path}: invalid JSON ({e})") from e
        except UnicodeDecodeError as e:
            raise ReferenceDataError(f"{path}: not UTF-8 text ({e})") from e
        except OSError as e:
            raise ReferenceDataError(f"{path}: cannot be read ({e})") from e

    def _read_zip_csv(self) -> Dict[str, Any]:
        try:
            df = pd.read_csv(self.zip_path, dtype={"zip_code": str})
        except FileNotFoundError:
            raise ReferenceDataError(f"Reference data file not found: {self.zip_path}") from None
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise ReferenceDataError(f"{self.zip_path}: invalid CSV ({e})") from e
        except OSError as e:
            raise ReferenceDataError(f"{self.zip_path}: cannot be read ({e})") from e

        missing_columns = [c for c in ("zip_code", "purchasing_power") if c not in df.columns]
        if missing_columns:
            raise ReferenceDataError(f"{self.zip_path}: missing columns {missing_columns}")

        if df["zip_code"].isna().any():
            raise ReferenceDataError(f"{self.zip_path}: rows without a zip_code")

        zip_codes = df["zip_code"].str.strip()
        duplicated = zip_codes[zip_codes.duplicated()].tolist()
        if duplicated:
            raise ReferenceDataError(f"{self.zip_path}: duplicate ZIP codes {duplicated}")

        power = pd.to_numeric(df["purchasing_power"], errors="coerce")
        return dict(zip(zip_codes.tolist(), power.tolist()))

    def _number(self, value: Any, what: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ReferenceDataError(f"{what}: expected a number, got {value!r}")
        try:
            value = float(value)
        except OverflowError:
            raise ReferenceDataError(f"{what}: number too large") from None
        if not math.isfinite(value):
            raise ReferenceDataError(f"{what}: expected a finite number, got {value!r}")
        return value

    def _positive_number(self, value: Any, what: str) -> float:
        value = self._number(value, what)
        if value <= 0:
            raise ReferenceDataError(f"{what}: expected a positive number, got {value!r}")
        return value

def load_reference_data(zip_path: str, device_path: str) -> ReferenceData:
    """Load the reference snapshot used by the discount engine"""
    return ReferenceDataClient(zip_path=zip_path, device_path=device_path).load()
