import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Tuple

import boto3

import config

logger = logging.getLogger(__name__)


def get_s3_client():
    return boto3.client("s3", region_name=config.aws_region())


def _local_path(key: str) -> Path:
    return Path(config.data_dir()) / f"{key}.json"


def _s3_key(key: str) -> str:
    prefix = config.s3_prefix()
    return f"{prefix}/{key}.json" if prefix else f"{key}.json"


def _as_records(transactions: Iterable[Any]) -> List[dict]:
    records = []
    for txn in transactions:
        if hasattr(txn, "model_dump"):
            records.append(txn.model_dump())
        else:
            records.append(dict(txn))
    return records


def _decode(raw: str, source: str) -> List[dict]:
    try:
        data = json.loads(raw or "[]")
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring unreadable transactions blob at %s: %s", source, exc)
        return []
    if not isinstance(data, list):
        logger.warning("Ignoring transactions blob at %s: expected a list, got %s", source, type(data).__name__)
        return []
    return data


def load_transactions(key: str = config.STORAGE_KEY) -> List[dict]:
    """
    Loads the saved transaction list from either local disk or S3.
    A missing blob is an empty list.
    """
    bucket = config.s3_bucket()
    if bucket:
        s3 = get_s3_client()
        object_key = _s3_key(key)
        try:
            obj = s3.get_object(Bucket=bucket, Key=object_key)
            raw = obj["Body"].read().decode("utf-8")
        except s3.exceptions.NoSuchKey:
            return []
        except Exception:
            logger.exception("S3 download failed for s3://%s/%s", bucket, object_key)
            return []
        transactions = _decode(raw, f"s3://{bucket}/{object_key}")
    else:
        # Local fallback
        local_path = _local_path(key)
        if not local_path.exists():
            return []
        try:
            raw = local_path.read_text(encoding="utf-8")
        except OSError:
            logger.exception("Could not read %s", local_path)
            return []
        transactions = _decode(raw, str(local_path))

    logger.info("Loaded %d transactions", len(transactions))
    return transactions


def save_transactions(transactions: Iterable[Any], key: str = config.STORAGE_KEY) -> bool:
    """
    Rewrites the whole transaction list to either local disk or S3.
    """
    records = _as_records(transactions)
    body = json.dumps(records, ensure_ascii=False, indent=2)

    bucket = config.s3_bucket()
    if bucket:
        s3 = get_s3_client()
        object_key = _s3_key(key)
        try:
            s3.put_object(
                Bucket=bucket,
                Key=object_key,
                Body=body.encode("utf-8"),
                ContentType="application/json",
            )
        except Exception:
            logger.exception("S3 upload failed for s3://%s/%s", bucket, object_key)
            return False
    else:
        local_path = _local_path(key)
        try:
            local_path.parent.mkdir(parents=True, exist_ok=True)
            local_path.write_text(body, encoding="utf-8")
        except OSError:
            logger.exception("Could not write %s", local_path)
            return False

    logger.info("Saved %d transactions", len(records))
    return True


def add_transaction(
    transactions: Iterable[Any], transaction: Any, key: str = config.STORAGE_KEY
) -> Tuple[List[dict], bool]:
    """
    Append one entry and persist the new list. The input list is left as is.
    Returns the new list and whether it was saved.
    """
    updated = _as_records(transactions) + _as_records([transaction])
    return updated, save_transactions(updated, key=key)


def delete_transaction(
    transactions: Iterable[Any], transaction_key: str, key: str = config.STORAGE_KEY
) -> Tuple[List[dict], bool]:
    """Drop every entry with the given key and persist the new list. Returns it with the save result."""
    updated = [txn for txn in _as_records(transactions) if txn.get("key") != transaction_key]
    return updated, save_transactions(updated, key=key)
