"""bdf2csv: convert forensic bodyfiles to CSV."""

__version__ = "1.0.1"
