"""
Discount scoring rules.

Four independent factors (ZIP purchasing power, age bracket, device value
and the mobile channel adjustment) are multiplied into a purchasing power
score, which is mapped inversely and linearly onto a 5-30% discount.
Everything here is pure: no I/O, no shared mutable state.
"""

import math
import logging
from typing import Any, Tuple

from core.domain.discount import DiscountQuote
from core.domain.enums import AGE_FACTORS, AgeRange, MOBILE_DEVICE_TYPE
from core.domain.reference_data import ReferenceData
from core.errors import (
    InvalidAgeRangeError,
    InvalidDeviceAgeError,
    MissingFieldError,
    UnknownDeviceTypeError,
    UnknownZipCodeError,
)

logger = logging.getLogger(__name__)

# Score calibration: MIN_PURCHASING_POWER maps to MAX_DISCOUNT and
# MAX_PURCHASING_POWER maps to MIN_DISCOUNT
MIN_PURCHASING_POWER: float = 30000
MAX_PURCHASING_POWER: float = 150000
MIN_DISCOUNT: float = 5
MAX_DISCOUNT: float = 30

MOBILE_CHANNEL_FACTOR: float = 0.9


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_device_age(device_age: Any) -> float:
    """Parse device age given as a number or numeric text"""
    if isinstance(device_age, bool):
        raise InvalidDeviceAgeError("Device age must be a valid positive number")
    try:
        age = float(device_age)
    except (TypeError, ValueError):
        raise InvalidDeviceAgeError("Device age must be a valid positive number") from None
    if not math.isfinite(age) or age < 0:
        raise InvalidDeviceAgeError("Device age must be a valid positive number")
    return age


def validate_inputs(
    age_range: Any, zip_code: Any, device_type: Any, device_age: Any
) -> Tuple[str, str, str, float]:
    """
    Check that all four fields are present and parse the device age

    Returns:
        (age_range, zip_code, device_type, parsed_device_age)
    """
    fields = (
        ("ageRange", age_range),
        ("zipCode", zip_code),
        ("deviceType", device_type),
        ("deviceAge", device_age),
    )
    for name, value in fields:
        if _is_missing(value):
            raise MissingFieldError(name)

    return str(age_range), str(zip_code), str(device_type), parse_device_age(device_age)


def get_age_factor(age_range: str) -> float:
    try:
        return AGE_FACTORS[AgeRange(age_range)]
    except ValueError:
        raise InvalidAgeRangeError(age_range) from None


def get_zip_power(zip_code: str, reference_data: ReferenceData) -> float:
    """Purchasing power index of a ZIP code, matched exactly"""
    zip_power = reference_data.get_zip_power(zip_code)
    if zip_power is None:
        raise UnknownZipCodeError(zip_code)
    return zip_power


def get_device_factor(device_type: str, device_age: float, reference_data: ReferenceData) -> float:
    """
    Current value of a device: retail price times the multiplier of the
    first age bucket containing device_age (bounds inclusive)
    """
    device = reference_data.get_device(device_type)
    if device is None:
        raise UnknownDeviceTypeError(device_type)

    bucket = device.find_bucket(device_age)
    if bucket is None:
        raise InvalidDeviceAgeError("Invalid device age")

    return device.retail_price * bucket.multiplier


def get_device_type_factor(device_type: str) -> float:
    """Channel adjustment; only mobile devices are discounted"""
    return MOBILE_CHANNEL_FACTOR if device_type.lower() == MOBILE_DEVICE_TYPE else 1.0


def calculate_purchasing_power(
    zip_power: float, age_factor: float, device_factor: float, device_type_factor: float
) -> float:
    return zip_power * age_factor * device_factor * device_type_factor


def calculate_discount(purchasing_power: float) -> float:
    """Map a purchasing power score onto [MIN_DISCOUNT, MAX_DISCOUNT]; out-of-range scores saturate"""
    span = MAX_PURCHASING_POWER - MIN_PURCHASING_POWER
    discount = MAX_DISCOUNT - ((purchasing_power - MIN_PURCHASING_POWER) / span) * (MAX_DISCOUNT - MIN_DISCOUNT)
    return max(MIN_DISCOUNT, min(discount, MAX_DISCOUNT))


class DiscountEngine:
    """Computes discounts against one reference data snapshot"""

    def __init__(self, reference_data: ReferenceData):
        self.reference_data = reference_data

    def calculate(self, age_range: Any, zip_code: Any, device_type: Any, device_age: Any) -> DiscountQuote:
        age_range, zip_code, device_type, parsed_age = validate_inputs(
            age_range, zip_code, device_type, device_age
        )

        zip_power = get_zip_power(zip_code, self.reference_data)
        age_factor = get_age_factor(age_range)
        device_factor = get_device_factor(device_type, parsed_age, self.reference_data)
        device_type_factor = get_device_type_factor(device_type)

        purchasing_power = calculate_purchasing_power(zip_power, age_factor, device_factor, device_type_factor)
        discount = calculate_discount(purchasing_power)

        logger.debug(
            f"zip={zip_code} age={age_range} device={device_type}/{parsed_age}: "
            f"score={purchasing_power:.2f} discount={discount:.2f}"
        )

        return DiscountQuote(
            discount=discount,
            purchasing_power=purchasing_power,
            age_range=age_range,
            zip_code=zip_code,
            device_type=device_type,
            device_age=parsed_age,
            age_factor=age_factor,
            zip_power=zip_power,
            device_factor=device_factor,
            device_type_factor=device_type_factor,
        )
