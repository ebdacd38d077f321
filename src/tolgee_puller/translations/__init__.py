"""
Translation processing stages.

This package turns an exported archive into a resource tree, checks it for
inconsistent interpolation variables and writes it as a TypeScript module:
- archive: zip buffer to virtual files
- merger: virtual files to resource tree
- icu / consistency: variable extraction and cross-language comparison
- writer: resource tree to generated module(s)
"""

from .archive import VirtualFile, extract_archive
from .consistency import (
    detect_inconsistent_variable_names,
    flatten_messages,
    report_outliers,
)
from .icu import extract_variable_names, parse_message
from .merger import merge_translations
from .validator import validate_languages
from .writer import render_resource_module, split_output_path, write_resources

__all__ = [
    "VirtualFile",
    "detect_inconsistent_variable_names",
    "extract_archive",
    "extract_variable_names",
    "flatten_messages",
    "merge_translations",
    "parse_message",
    "render_resource_module",
    "report_outliers",
    "split_output_path",
    "validate_languages",
    "write_resources",
]
