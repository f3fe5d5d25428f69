"""Utility modules for StackIt AI."""

from .data_prep import export_to_json, prepare_export
from .formatting import format_as_html, extract_code_examples, extract_related_topics

__all__ = [
    "export_to_json",
    "prepare_export",
    "format_as_html",
    "extract_code_examples",
    "extract_related_topics",
]
