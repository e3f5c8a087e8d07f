# app/config.py

from pathlib import Path

STATIC_DIR = Path(__file__).resolve().parent / "static"  # bundled with the package
DOWNLOAD_FILENAME = "abc.txt"

# Browser client for the demo runs on the Angular dev server
CORS_ORIGINS = ["http://localhost:4200"]

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
