"""
Dataset loader - reads the medical JSON dataset into Documents.

The file is a JSON array of records:

    [{"disease_name": "...", "symptoms": [...], "causes": [...],
      "diagnosis": "...", "treatment": [...]}, ...]

A missing or malformed dataset is not fatal by default: the chatbot
starts with an empty knowledge base and every query falls back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from medibot.schemas import Document

logger = logging.getLogger(__name__)

_DOCUMENT_LIST = TypeAdapter(list[Document])


class DatasetLoadError(Exception):
    """Raised in strict mode when the dataset cannot be read or validated."""


def parse_documents(raw: str | bytes) -> list[Document]:
    """Validate a JSON payload into Documents. Raises DatasetLoadError."""
    try:
        return _DOCUMENT_LIST.validate_json(raw)
    except ValidationError as e:
        raise DatasetLoadError(f"Invalid medical dataset: {e}") from e


def load_documents(path: str | Path, strict: bool = False) -> list[Document]:
    """
    Load the medical dataset from a JSON file.

    Args:
        path: Location of the JSON file
        strict: Raise DatasetLoadError instead of returning an empty list

    Returns:
        Documents in file order
    """
    path = Path(path)
    try:
        documents = parse_documents(path.read_bytes())
    except (OSError, DatasetLoadError) as e:
        if strict:
            if isinstance(e, DatasetLoadError):
                raise
            raise DatasetLoadError(f"Cannot read dataset {path}: {e}") from e
        logger.error(f"Error loading medical dataset from {path}: {e}")
        return []

    logger.info(f"Loaded {len(documents)} medical documents from {path}")
    return documents


def dump_documents(documents: list[Document], path: str | Path) -> None:
    """Write documents back out in the dataset's JSON shape."""
    payload = [doc.to_dict() for doc in documents]
    Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")
