from enum import Enum

class AgeRange(str, Enum):
    """Customer age brackets accepted by the discount engine"""
    AGE_18_25 = "18-25"
    AGE_26_35 = "26-35"
    AGE_36_45 = "36-45"
    AGE_46_PLUS = "46+"

# Purchasing power multiplier per age bracket
AGE_FACTORS = {
    AgeRange.AGE_18_25: 0.70,
    AgeRange.AGE_26_35: 0.85,
    AgeRange.AGE_36_45: 1.00,
    AgeRange.AGE_46_PLUS: 0.90,
}

# Device type that receives the mobile channel adjustment
MOBILE_DEVICE_TYPE = "mobile"
