"""
Input loading: raw text and files to input records.
"""

from src.io.loader import extract_first_json_object, load_record, load_record_file

__all__ = [
    "extract_first_json_object",
    "load_record",
    "load_record_file",
]
