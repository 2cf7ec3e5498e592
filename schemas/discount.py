"""
Pydantic schemas for the discount API

Wire names are camelCase to stay compatible with existing web and mobile clients.
"""

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt
from typing import Optional, Union

class DiscountRequest(BaseModel):
    """Raw discount request; presence of each field is checked by the engine"""
    age_range: Optional[str] = Field(None, alias="ageRange", description="18-25, 26-35, 36-45 or 46+")
    zip_code: Optional[Union[str, int]] = Field(None, alias="zipCode", description="ZIP code")
    device_type: Optional[str] = Field(None, alias="deviceType", description="Device type, e.g. laptop")
    # Strict types keep JSON booleans as bool so the engine rejects them
    device_age: Optional[Union[StrictFloat, StrictInt, StrictBool, str]] = Field(
        None, alias="deviceAge", description="Device age in years"
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "ageRange": "26-35",
                "zipCode": "10001",
                "deviceType": "mobile",
                "deviceAge": 2
            }
        }

class DiscountResponse(BaseModel):
    """Calculated discount"""
    discount: str = Field(..., description="Discount percentage, two decimals")
    purchasing_power: str = Field(..., alias="purchasingPower", description="Purchasing power score, two decimals")
    age_range: str = Field(..., alias="ageRange")
    zip_code: str = Field(..., alias="zipCode")
    device_type: str = Field(..., alias="deviceType")
    device_age: float = Field(..., alias="deviceAge")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "discount": "5.00",
                "purchasingPower": "35727986.25",
                "ageRange": "26-35",
                "zipCode": "10001",
                "deviceType": "mobile",
                "deviceAge": 2
            }
        }

class ErrorResponse(BaseModel):
    """Error response model"""
    message: str = Field(..., description="Error message")
    stack: Optional[str] = Field(None, description="Stack trace, omitted in production")

    class Config:
        json_schema_extra = {
            "example": {
                "message": "ZIP Code '99999' not found",
                "stack": None
            }
        }
