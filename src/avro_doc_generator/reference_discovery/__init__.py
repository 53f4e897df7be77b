"""Reference discovery exports."""

from .record_collector import RecordSet, collect_referenced_records
from .reference_extractor import extract_record_references

__all__ = [
    "RecordSet",
    "collect_referenced_records",
    "extract_record_references",
]
