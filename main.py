"""bdf2csv: convert forensic bodyfiles to CSV."""

from bdf2csv.cli import run

if __name__ == "__main__":
    run()
