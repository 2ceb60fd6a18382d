"""Data loading package for the Night Shelter Finder."""

from .ingestion import load_shelter_directory, prepare_shelter_directory, refresh_shelter_directory
from .io_utils import detect_file_format, load_dataframe
from .sample_shelters import SAMPLE_SHELTERS, sample_shelter_frame

__all__ = [
    "load_shelter_directory",
    "prepare_shelter_directory",
    "refresh_shelter_directory",
    "detect_file_format",
    "load_dataframe",
    "SAMPLE_SHELTERS",
    "sample_shelter_frame",
]
