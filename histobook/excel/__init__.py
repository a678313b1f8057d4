"""Workbook styling, formatting, and writing utilities."""
from .formatters import decimal_format, format_header_row, format_number_cell, format_integer_cell, auto_column_width
from .writer import WorkbookSink
