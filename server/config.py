# config.py
import os
from dotenv import load_dotenv
load_dotenv()

from concurrent.futures import ThreadPoolExecutor

import logging
from logging_utils import configure_logging

configure_logging()
logger = logging.getLogger("bidpacket.config")

APP_VERSION = "1.0.0"

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "25"))
MAX_UPLOAD_BYTES = MAX_UPLOAD_MB * 1024 * 1024

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8001"))

# pypdf is blocking; extraction runs on this pool, off the event loop
PDF_WORKERS = int(os.getenv("PDF_WORKERS", str(min(8, (os.cpu_count() or 4) * 2))))
thread_pool = ThreadPoolExecutor(max_workers=PDF_WORKERS)

logger.info(
    f"Config: max_upload={MAX_UPLOAD_MB}MB, pdf_workers={PDF_WORKERS}"
)
