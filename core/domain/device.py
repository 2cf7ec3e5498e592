import math
from typing import Optional
from pydantic import BaseModel, Field

class AgeBucket(BaseModel):
    """Inclusive device age interval with its value multiplier"""
    label: str = Field(description='Source label, "min-max"')
    min_age: float
    max_age: float
    multiplier: float = Field(ge=0, description="Share of retail price kept at this age")

    class Config:
        frozen = True

    @classmethod
    def from_label(cls, label: str, multiplier: float) -> "AgeBucket":
        """Parse a "min-max" label; raises ValueError when it is not two ordered numbers"""
        parts = str(label).split("-")
        if len(parts) != 2:
            raise ValueError(f"age bucket '{label}' must look like 'min-max'")
        try:
            min_age, max_age = float(parts[0]), float(parts[1])
        except ValueError:
            raise ValueError(f"age bucket '{label}' has non-numeric bounds") from None
        if not (math.isfinite(min_age) and math.isfinite(max_age)):
            raise ValueError(f"age bucket '{label}' has non-finite bounds")
        if min_age > max_age:
            raise ValueError(f"age bucket '{label}' has min greater than max")
        return cls(label=str(label), min_age=min_age, max_age=max_age, multiplier=multiplier)

    def contains(self, age: float) -> bool:
        return self.min_age <= age <= self.max_age

    def overlaps(self, other: "AgeBucket") -> bool:
        return self.min_age <= other.max_age and other.min_age <= self.max_age

class DeviceValue(BaseModel):
    """Retail price and depreciation table for one device type"""
    device_type: str
    retail_price: float = Field(gt=0)
    buckets: tuple[AgeBucket, ...] = Field(min_length=1)

    class Config:
        frozen = True

    def find_bucket(self, age: float) -> Optional[AgeBucket]:
        """First bucket, in table order, whose interval contains the age"""
        return next((b for b in self.buckets if b.contains(age)), None)

    def overlapping_labels(self) -> list[tuple[str, str]]:
        pairs = []
        for i, bucket in enumerate(self.buckets):
            for other in self.buckets[i + 1:]:
                if bucket.overlaps(other):
                    pairs.append((bucket.label, other.label))
        return pairs
