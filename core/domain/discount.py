from pydantic import BaseModel, Field
from typing import Any, Dict

class DiscountQuote(BaseModel):
    """Result of one discount calculation"""
    discount: float = Field(ge=5, le=30, description="Discount percentage")
    purchasing_power: float = Field(description="Combined purchasing power score")

    # Echoed request values
    age_range: str
    zip_code: str
    device_type: str
    device_age: float

    # Resolved factors
    age_factor: float
    zip_power: float
    device_factor: float
    device_type_factor: float

    class Config:
        frozen = True

    def to_payload(self) -> Dict[str, Any]:
        """Response body with two-decimal discount and score"""
        return {
            "discount": f"{self.discount:.2f}",
            "purchasingPower": f"{self.purchasing_power:.2f}",
            "ageRange": self.age_range,
            "zipCode": self.zip_code,
            "deviceType": self.device_type,
            "deviceAge": self.device_age,
        }
