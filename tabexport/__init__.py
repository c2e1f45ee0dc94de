"""Read spreadsheet configuration tables into type descriptors and typed value trees."""

__version__ = "0.1.0"