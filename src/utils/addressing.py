"""Address, coordinate and phone validation helpers."""
import math
import re
from typing import Tuple


def validate_address(address: str) -> Tuple[bool, str]:
    if not address or not address.strip():
        return False, "Address cannot be empty"

    addr = address.strip()
    if len(addr) < 5:
        return False, "Address appears too short. Please provide a landmark, street or area."

    if "," not in addr:
        return True, "Consider adding the city (e.g., 'Near ISBT, Delhi') for better accuracy"

    return True, ""


def validate_coordinates(lat: float, lon: float) -> Tuple[bool, str]:
    if isinstance(lat, bool) or isinstance(lon, bool):
        return False, "Coordinates must be numeric"
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return False, "Coordinates must be numeric"
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False, "Coordinates must be finite numbers"
    if not (-90 <= lat <= 90):
        return False, "Latitude must be between -90 and 90"
    if not (-180 <= lon <= 180):
        return False, "Longitude must be between -180 and 180"
    return True, "Valid coordinates"


def validate_phone_number(phone: str) -> Tuple[bool, str]:
    if not phone or not phone.strip():
        return True, "Phone number is optional"
    if re.search(r"[^\d\s()+\-.]", phone):
        return False, "Phone number may only contain digits, spaces, '+', '-', '.' and parentheses"
    cleaned = re.sub(r"[^\d]", "", phone)
    if 10 <= len(cleaned) <= 15:
        return True, "Valid phone number"
    return False, "Phone number must have between 10 and 15 digits"
