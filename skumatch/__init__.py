"""SKU identification from package OCR text."""

__version__ = "0.1.0"
