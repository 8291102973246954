"""CSV Converter - Convert between CSV and JSON."""

from .converter import CSVConverter, FieldState, csv_to_json, json_to_csv, tokenize_line

__all__ = ["CSVConverter", "FieldState", "csv_to_json", "json_to_csv", "tokenize_line"]
