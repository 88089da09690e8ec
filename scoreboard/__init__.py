"""Stock score board: composite 0-100 investment scores from sheet data."""

__version__ = "1.0.0"
