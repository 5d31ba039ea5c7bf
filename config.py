"""Environment-driven settings for the finance tracker."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

STORAGE_KEY = "transactions"
DEFAULT_PAGE_SIZE = 5


def get_env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def data_dir() -> str:
    """Directory holding the local JSON blobs."""
    return get_env("FINANCE_DATA_DIR", "data") or "data"


def s3_bucket() -> str | None:
    """Bucket name when transactions live on S3; None keeps them on local disk."""
    bucket = (get_env("S3_BUCKET", "") or "").strip()
    return bucket or None


def s3_prefix() -> str:
    return (get_env("S3_PREFIX", "finance_tracker") or "").strip("/")


def aws_region() -> str:
    return get_env("AWS_REGION", "us-east-1") or "us-east-1"


def page_size() -> int:
    """Rows per table page. Invalid or non-positive values fall back to the default."""
    raw = get_env("PAGE_SIZE")
    if raw is None:
        return DEFAULT_PAGE_SIZE
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_PAGE_SIZE
    return value if value > 0 else DEFAULT_PAGE_SIZE


def log_level() -> str:
    return (get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper()


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
