"""IO and small helpers: docx referral sheet, filename sanitization, and streamlit error handler."""
import io
import re
from typing import Optional

import pandas as pd
import streamlit as st
from docx import Document

from src.utils.geo import Coordinate, distance_km, format_distance


def format_phone_number(phone):
    """
    Normalise a phone number for display.

    Ten-digit local numbers become "XXX-XXX-XXXX"; numbers with a leading
    "+" keep their country code, e.g. "+91-11-23456001" -> "+91 11 2345 6001".
    Anything else is returned unchanged.
    """
    if phone is None or pd.isna(phone):
        return None

    if isinstance(phone, float):
        phone = str(int(phone))

    phone_str = str(phone).strip()
    digits = "".join(filter(str.isdigit, phone_str))

    if phone_str.startswith("+") and phone_str.count("-") >= 2:
        # "+CC-AREA-NUMBER" as stored in shelter directories
        country, area, number = phone_str[1:].split("-", 2)
        number = number.replace("-", "")
        if len(number) == 8:
            number = f"{number[:4]} {number[4:]}"
        return f"+{country} {area} {number}"
    if len(digits) == 10:
        return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"
    return phone


def _present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return not pd.isna(value)


def get_word_bytes(shelter: pd.Series, origin: Optional[Coordinate] = None) -> bytes:
    doc = Document()
    doc.add_heading("Shelter Referral", 0)
    doc.add_paragraph(f"Shelter: {shelter.get('Shelter Name', '')}")
    doc.add_paragraph(f"Address: {shelter.get('Address', '')}")

    phone = shelter.get("Phone")
    if _present(phone):
        doc.add_paragraph(f"Phone: {format_phone_number(phone)}")

    beds = shelter.get("Available Beds")
    if _present(beds):
        doc.add_paragraph(f"Available beds: {int(beds)}")

    check_in, check_out = shelter.get("Check-In Time"), shelter.get("Check-Out Time")
    if _present(check_in) and _present(check_out):
        doc.add_paragraph(f"Hours: {check_in} - {check_out}")

    amenities = shelter.get("Amenities")
    if _present(amenities):
        doc.add_paragraph(f"Amenities: {amenities}")

    distance = shelter.get("Distance (km)")
    if not _present(distance) and origin is not None:
        distance = distance_km(origin, (shelter["Latitude"], shelter["Longitude"]))
    if _present(distance):
        doc.add_paragraph(f"Distance: {format_distance(float(distance))}")

    buffer = io.BytesIO()
    doc.save(buffer)
    buffer.seek(0)
    return buffer.getvalue()


def sanitize_filename(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "", name.replace(" ", "_"))


def handle_streamlit_error(error: Exception, context: str = "operation") -> None:
    err = str(error)
    if "geocod" in err.lower():
        st.error(
            (
                "❌ **Geocoding Error**: Unable to find coordinates for the provided address. "
                "Please check the address and try again."
            )
        )
    elif "network" in err.lower() or "connection" in err.lower():
        st.error("❌ **Network Error**: Unable to connect to geocoding service. Please check your internet connection.")
    elif "unsupported file type" in err.lower():
        st.error("❌ **Data Error**: The shelter directory file format is not supported (use CSV, Excel or Parquet).")
    elif "file" in err.lower() or "not found" in err.lower():
        st.error("❌ **Data Error**: The shelter directory file is missing. Please check the configured path.")
    else:
        st.error(f"❌ **Error during {context}**: {err}")

    st.exception(error)
