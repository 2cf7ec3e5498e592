"""
Error taxonomy for the discount engine.

Every request-level error carries the HTTP status class the boundary should
answer with; ReferenceDataError is raised only while loading reference data
and is fatal at startup.
"""

from core.domain.enums import AgeRange


class DiscountError(Exception):
    """Base class for errors raised while computing a discount"""

    kind: str = "DiscountError"
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldError(DiscountError):
    kind = "MissingField"

    MESSAGES = {
        "ageRange": "Age range is required",
        "zipCode": "ZIP Code is required",
        "deviceType": "Device type is required",
        "deviceAge": "Device age is required",
    }

    def __init__(self, field: str):
        super().__init__(self.MESSAGES.get(field, f"{field} is required"))
        self.field = field


class InvalidDeviceAgeError(DiscountError):
    kind = "InvalidDeviceAge"


class InvalidAgeRangeError(DiscountError):
    kind = "InvalidAgeRange"

    def __init__(self, age_range: str):
        valid = ", ".join(a.value for a in AgeRange)
        super().__init__(f"Invalid age range. Valid ranges are: {valid}")
        self.age_range = age_range


class UnknownZipCodeError(DiscountError):
    kind = "UnknownZipCode"
    status_code = 404

    def __init__(self, zip_code: str):
        super().__init__(f"ZIP Code '{zip_code}' not found")
        self.zip_code = zip_code


class UnknownDeviceTypeError(DiscountError):
    kind = "UnknownDeviceType"

    def __init__(self, device_type: str):
        super().__init__("Device type not found")
        self.device_type = device_type


class ReferenceDataError(Exception):
    """Reference data is missing or malformed"""
