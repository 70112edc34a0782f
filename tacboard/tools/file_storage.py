"""File storage for board documents."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from tacboard.models.document import BoardDocument
from tacboard.serialization import deserialize_document, export_filename, now_iso, serialize_document
from tacboard.utils.file_utils import ensure_dir, read_text_file

logger = logging.getLogger(__name__)


def save_document(document: BoardDocument, directory: str, filename: Optional[str] = None) -> str:
    """Write ``document`` as ``<name>.tmc.json`` and return the path."""
    output_dir = ensure_dir(directory)
    path = Path(output_dir) / (filename or export_filename(document))
    stamped = document.model_copy(update={"updated_at": now_iso()})
    path.write_text(serialize_document(stamped), encoding="utf-8")
    logger.info("Saved board %r to %s", document.name, path)
    return str(path)


def load_document(path: str) -> Optional[BoardDocument]:
    try:
        text = read_text_file(path)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Failed to load document: %s", exc)
        return None
    return deserialize_document(text)


def document_exists(path: str) -> bool:
    return Path(path).is_file()


def delete_document(path: str) -> bool:
    p = Path(path)
    if not p.is_file():
        return False
    p.unlink()
    return True
