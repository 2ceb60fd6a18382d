"""Shelter directory normalisation and data-quality helpers."""
from typing import Any

import pandas as pd
import streamlit as st

SHELTER_STATUSES = ("available", "limited", "full")

# Header spellings seen in directory exports mapped to canonical column names
COLUMN_ALIASES = {
    "id": "Shelter ID",
    "shelter_id": "Shelter ID",
    "name": "Shelter Name",
    "shelter_name": "Shelter Name",
    "address": "Address",
    "totalbeds": "Total Beds",
    "total_beds": "Total Beds",
    "availablebeds": "Available Beds",
    "available_beds": "Available Beds",
    "status": "Status",
    "volunteers": "Volunteers",
    "mealsavailable": "Meals Available",
    "meals_available": "Meals Available",
    "checkintime": "Check-In Time",
    "check_in_time": "Check-In Time",
    "checkouttime": "Check-Out Time",
    "check_out_time": "Check-Out Time",
    "lat": "Latitude",
    "latitude": "Latitude",
    "lng": "Longitude",
    "lon": "Longitude",
    "longitude": "Longitude",
    "amenities": "Amenities",
    "phone": "Phone",
}


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(col).strip() for col in df.columns]
    renames = {}
    for col in df.columns:
        key = col.lower().replace(" ", "_").replace("-", "_")
        canonical = COLUMN_ALIASES.get(key) or COLUMN_ALIASES.get(key.replace("_", ""))
        if canonical and canonical not in df.columns:
            renames[col] = canonical
    return df.rename(columns=renames)


def safe_numeric_conversion(value: Any, default: float = 0.0) -> float:
    try:
        if pd.isna(value):
            return default
        return float(value)
    except (ValueError, TypeError):
        return default


def derive_status(available_beds: Any, total_beds: Any, limited_threshold: float = 0.2) -> str:
    """Status from bed counts: no free beds is full, a small share free is limited."""
    available = safe_numeric_conversion(available_beds, 0.0)
    total = safe_numeric_conversion(total_beds, 0.0)
    if available <= 0:
        return "full"
    if total > 0 and available / total < limited_threshold:
        return "limited"
    return "available"


def normalize_status(df: pd.DataFrame, limited_threshold: float = 0.2) -> pd.DataFrame:
    """Lower-case known statuses and derive missing or unknown ones from bed counts.

    A known Available Beds count of zero or less always gives "full".
    """
    df = df.copy()
    if "Status" in df.columns:
        status = df["Status"].astype(str).str.strip().str.lower()
        status = status.where(status.isin(SHELTER_STATUSES), "")
    else:
        status = pd.Series("", index=df.index)

    if "Available Beds" in df.columns:
        total = df["Total Beds"] if "Total Beds" in df.columns else pd.Series(0, index=df.index)
        derived = pd.Series(
            [derive_status(a, t, limited_threshold) for a, t in zip(df["Available Beds"], total)],
            index=df.index,
            dtype=object,
        )
        status = status.mask(status == "", derived)

        # No free beds means full, whatever the directory says
        beds = pd.to_numeric(df["Available Beds"], errors="coerce")
        status = status.mask(beds.notna() & (beds <= 0), "full")

    df["Status"] = status.replace("", pd.NA)
    return df


def validate_and_clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return df

    df = df.copy()
    for col in ("Latitude", "Longitude"):
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    if "Latitude" in df.columns and "Longitude" in df.columns:
        invalid_lat = (df["Latitude"] < -90) | (df["Latitude"] > 90)
        invalid_lon = (df["Longitude"] < -180) | (df["Longitude"] > 180)
        df.loc[invalid_lat | invalid_lon, ["Latitude", "Longitude"]] = float("nan")

        missing = df["Latitude"].isna() | df["Longitude"].isna()
        if missing.any():
            st.warning(
                (
                    "⚠️ %d shelters have invalid or missing coordinates; "
                    "they will be excluded from distance ranking."
                )
                % (int(missing.sum()),)
            )

    return df


def validate_shelter_data(df: pd.DataFrame) -> tuple[bool, str]:
    if df.empty:
        return False, "❌ **Error**: No shelter data available. Please check the shelter directory file."

    issues = []
    info = []

    required_cols = ["Shelter Name", "Latitude", "Longitude"]
    missing_cols = [col for col in required_cols if col not in df.columns]
    if missing_cols:
        issues.append(f"Missing required columns: {', '.join(missing_cols)}")

    if "Latitude" in df.columns and "Longitude" in df.columns:
        missing_coords = (df["Latitude"].isna() | df["Longitude"].isna()).sum()
        if missing_coords > 0:
            issues.append(f"{missing_coords} shelters missing geographic coordinates")

    if "Status" not in df.columns and "Available Beds" not in df.columns:
        issues.append("Neither Status nor Available Beds present - cannot tell which shelters are full")

    if "Available Beds" in df.columns:
        beds = pd.to_numeric(df["Available Beds"], errors="coerce")
        invalid_beds = beds.isna().sum()
        if invalid_beds > 0:
            issues.append(f"{invalid_beds} shelters have invalid available bed counts")
        if "Total Beds" in df.columns:
            over = (beds > pd.to_numeric(df["Total Beds"], errors="coerce")).sum()
            if over > 0:
                issues.append(f"{over} shelters report more available beds than total beds")
        info.append(f"Available beds across directory: {int(beds.fillna(0).sum())}")

    if "Status" in df.columns:
        counts = df["Status"].value_counts()
        summary = ", ".join(f"{status}: {int(counts.get(status, 0))}" for status in SHELTER_STATUSES)
        info.append(f"Status breakdown - {summary}")

    info.append(f"Total shelters in directory: {len(df)}")

    message_parts = []
    if issues:
        message_parts.append("⚠️ **Data Quality Issues**: " + "; ".join(issues))
    if info:
        message_parts.append("ℹ️ **Data Summary**: " + "; ".join(info))

    is_valid = len(issues) == 0
    message = "\n\n".join(message_parts)
    return is_valid, message
