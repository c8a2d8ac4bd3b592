"""Allow running pdfspool with ``python -m pdfspool``."""

from pdfspool.cli import run

if __name__ == "__main__":
    run()
