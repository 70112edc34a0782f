"""Versioned board document encoding and migration."""
from __future__ import annotations

import json
import logging
import re
import time
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as ModelValidationError

from tacboard.board import create_initial_board
from tacboard.models.document import DEFAULT_STEP_DURATION, BoardDocument, HistoryEntry, PitchConfig, TeamSettings
from tacboard.models.elements import BoardElement
from tacboard.timeline import copy_elements, create_step

logger = logging.getLogger(__name__)

DOCUMENT_VERSION = "1.0.0"
EXPORT_SUFFIX = ".tmc.json"

# Only the top-level contract is checked here; element and step shapes are
# validated by the models.
DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["version", "steps", "pitchConfig"],
    "properties": {
        "version": {"type": "string", "minLength": 1},
        "name": {"type": "string"},
        "createdAt": {"type": "string"},
        "updatedAt": {"type": "string"},
        "currentStepIndex": {"type": "integer"},
        "steps": {"type": "array", "items": {"type": "object"}},
        "pitchConfig": {"type": "object"},
        "teamSettings": {"type": "object"},
        "pitchSettings": {"type": "object"},
    },
    "additionalProperties": True,
}

_VALIDATOR = Draft202012Validator(DOCUMENT_SCHEMA)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_document(
    name: str = "Untitled Board",
    pitch_config: Optional[PitchConfig] = None,
    team_settings: Optional[TeamSettings] = None,
    step_duration: int = DEFAULT_STEP_DURATION,
) -> BoardDocument:
    """Fresh document with a single step holding both starting lineups."""
    pitch_config = pitch_config or PitchConfig()
    team_settings = team_settings or TeamSettings()
    now = now_iso()
    initial_step = create_step(create_initial_board(pitch_config), "Initial Setup", step_duration)
    return BoardDocument(
        version=DOCUMENT_VERSION,
        name=name,
        created_at=now,
        updated_at=now,
        current_step_index=0,
        steps=(initial_step,),
        pitch_config=pitch_config,
        team_settings=team_settings,
    )


def document_to_dict(document: BoardDocument) -> Dict[str, Any]:
    return document.model_dump(mode="json", by_alias=True, exclude_none=True)


def serialize_document(document: BoardDocument) -> str:
    return json.dumps(document_to_dict(document), indent=2)


def validate_document_payload(payload: Any) -> BoardDocument:
    """Check the top-level contract, then build the model.

    Raises ValueError for anything that is not a loadable document.
    """
    try:
        _VALIDATOR.validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Document validation failed: {exc.message}") from exc
    try:
        return BoardDocument.model_validate(payload)
    except ModelValidationError as exc:
        raise ValueError(f"Document validation failed: {exc.error_count()} error(s)") from exc


def deserialize_document(text: str) -> Optional[BoardDocument]:
    """Decode and migrate a document; ``None`` marks an unreadable one."""
    try:
        payload = json.loads(text)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.error("Failed to parse document: %s", exc)
        return None
    try:
        document = validate_document_payload(payload)
    except ValueError as exc:
        logger.error("Invalid document format: %s", exc)
        return None
    return migrate_document(document)


def migrate_document(document: BoardDocument) -> BoardDocument:
    """Bring an older document up to DOCUMENT_VERSION.

    Missing optional sections get current defaults. Re-running it on its own
    output only refreshes ``updatedAt``.
    """
    if document.version != DOCUMENT_VERSION:
        logger.info("Migrating document %r from version %s to %s", document.name, document.version, DOCUMENT_VERSION)
    last_index = max(len(document.steps) - 1, 0)
    now = now_iso()
    return document.model_copy(update={
        "version": DOCUMENT_VERSION,
        "created_at": document.created_at or now,
        "updated_at": now,
        "team_settings": document.team_settings or TeamSettings(),
        "current_step_index": min(max(document.current_step_index, 0), last_index),
    })


def export_filename(document: BoardDocument) -> str:
    return re.sub(r"\s+", "-", document.name) + EXPORT_SUFFIX


def create_snapshot(elements: Iterable[BoardElement], selected_ids: Iterable[str]) -> HistoryEntry:
    """Deep copy of the board plus selection, stamped in epoch milliseconds."""
    return HistoryEntry(
        elements=copy_elements(elements),
        selected_ids=tuple(selected_ids),
        timestamp=int(time.time() * 1000),
    )
