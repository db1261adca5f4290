"""papersmith - rename scanned PDFs from their content."""

__version__ = "0.4.0"
