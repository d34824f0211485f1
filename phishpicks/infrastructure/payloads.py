"""Validation of JSON payloads at the system boundary.

Stored predictions, processed setlists and raw Phish.net setlist rows arrive
as loosely-typed JSON. They are validated here with Pydantic and converted to
domain entities before reaching the scoring engine. Any structural problem is
reported as ``InvalidInputError``.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from phishpicks.application.models import StoredPrediction
from phishpicks.config import get_logger
from phishpicks.domain.entities import (
    ActualSongEntry,
    PredictedSetlist,
    PredictedSlot,
    ProcessedSetlist,
    SongRef,
)
from phishpicks.domain.errors import InvalidInputError
from phishpicks.domain.scoring import normalize_setlist

logger = get_logger(__name__)


# ============================================================================
# PREDICTIONS
# ============================================================================


class SongRefPayload(BaseModel):
    """A picked song as stored with a prediction."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    name: str = Field(min_length=1)
    slug: str | None = None
    times_played: int | None = None

    def to_domain(self) -> SongRef:
        return SongRef(
            id=self.id,
            name=self.name,
            slug=self.slug,
            times_played=self.times_played,
        )


class PredictedSlotPayload(BaseModel):
    """One predicted slot. Position defaults to the slot's index."""

    model_config = ConfigDict(extra="ignore")

    position: int | None = Field(default=None, ge=0)
    song: SongRefPayload | None = None


def _slots_to_domain(slots: list[PredictedSlotPayload | None]) -> list[PredictedSlot]:
    result = []
    for index, slot in enumerate(slots):
        if slot is None:
            result.append(PredictedSlot(position=index))
            continue
        result.append(
            PredictedSlot(
                position=index if slot.position is None else slot.position,
                song=slot.song.to_domain() if slot.song else None,
            )
        )
    return result


class PredictedSetlistPayload(BaseModel):
    """A prediction's setlist. All three sets are required, possibly empty."""

    model_config = ConfigDict(extra="ignore")

    set1: list[PredictedSlotPayload | None]
    set2: list[PredictedSlotPayload | None]
    encore: list[PredictedSlotPayload | None]

    def to_domain(self) -> PredictedSetlist:
        return PredictedSetlist(
            set1=_slots_to_domain(self.set1),
            set2=_slots_to_domain(self.set2),
            encore=_slots_to_domain(self.encore),
        )


class StoredPredictionPayload(BaseModel):
    """A persisted prediction record as exported by the storage layer."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    user_id: int | str
    # Validated per record by parse_prediction
    setlist: Any = None
    score: int | None = None
    user_name: str = ""


# ============================================================================
# ACTUAL SETLISTS
# ============================================================================


class ActualSongPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    position: int = Field(ge=0)


class ProcessedSetlistPayload(BaseModel):
    """An already normalized setlist with 0-based positions."""

    model_config = ConfigDict(extra="ignore")

    set1: list[ActualSongPayload]
    set2: list[ActualSongPayload]
    encore: list[ActualSongPayload]

    def to_domain(self) -> ProcessedSetlist:
        return ProcessedSetlist(
            set1=[ActualSongEntry(name=s.name, position=s.position) for s in self.set1],
            set2=[ActualSongEntry(name=s.name, position=s.position) for s in self.set2],
            encore=[
                ActualSongEntry(name=s.name, position=s.position) for s in self.encore
            ],
        )


class RawSetlistRow(BaseModel):
    """One row of a Phish.net ``/setlists`` response. Extra fields are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    song: str
    set_label: str = Field(alias="set")
    position: int | str

    @field_validator("set_label", mode="before")
    @classmethod
    def coerce_set_label(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    def as_row(self) -> dict[str, Any]:
        return {"song": self.song, "set": self.set_label, "position": self.position}


# ============================================================================
# PARSERS
# ============================================================================


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']} ({error.error_count()} error(s))"


def parse_prediction(data: Any) -> PredictedSetlist:
    """Validate a stored prediction setlist and convert it to the domain entity."""
    if data is None:
        raise InvalidInputError("Prediction is required")
    try:
        return PredictedSetlistPayload.model_validate(data).to_domain()
    except ValidationError as e:
        raise InvalidInputError(f"Invalid prediction: {_describe(e)}") from e


def parse_actual_setlist(data: Any) -> ProcessedSetlist:
    """Validate an already processed setlist and convert it to the domain entity."""
    if data is None:
        raise InvalidInputError("Actual setlist is required")
    try:
        return ProcessedSetlistPayload.model_validate(data).to_domain()
    except ValidationError as e:
        raise InvalidInputError(f"Invalid actual setlist: {_describe(e)}") from e
    except ValueError as e:
        # Duplicate positions rejected by the domain entity
        raise InvalidInputError(f"Invalid actual setlist: {e}") from e


def parse_raw_setlist(data: Any) -> list[dict[str, Any]]:
    """Extract usable rows from a Phish.net setlist response.

    Accepts either the bare list of rows or the API envelope
    ``{"error": false, "data": [...]}``. Rows that fail validation are skipped.
    """
    if isinstance(data, dict):
        if data.get("error"):
            message = data.get("error_message") or "upstream reported an error"
            raise InvalidInputError(f"Setlist API error: {message}")
        data = data.get("data")

    if not isinstance(data, list):
        raise InvalidInputError(
            f"Raw setlist must be a list of rows, got {type(data).__name__}"
        )

    rows = []
    for item in data:
        try:
            rows.append(RawSetlistRow.model_validate(item).as_row())
        except ValidationError as e:
            logger.warning(f"Skipping malformed setlist row: {_describe(e)}")
            continue

    logger.debug(f"Parsed {len(rows)} of {len(data)} raw setlist rows")
    return rows


def normalize_raw_setlist(data: Any) -> ProcessedSetlist:
    """Validate a raw Phish.net response and normalize it in one step."""
    return normalize_setlist(parse_raw_setlist(data))


def parse_stored_predictions(data: Any) -> list[StoredPrediction]:
    """Parse exported prediction records for a show.

    A record whose setlist is malformed is kept with ``setlist=None`` and an
    ``error`` message so batch scoring can report it without stopping.
    """
    if isinstance(data, dict):
        data = data.get("predictions")
    if not isinstance(data, list):
        raise InvalidInputError("Stored predictions must be a list of records")

    predictions = []
    for index, item in enumerate(data):
        try:
            record = StoredPredictionPayload.model_validate(item)
        except ValidationError as e:
            raise InvalidInputError(
                f"Invalid prediction record at index {index}: {_describe(e)}"
            ) from e

        setlist: PredictedSetlist | None = None
        error: str | None = None
        try:
            setlist = parse_prediction(record.setlist)
        except InvalidInputError as e:
            logger.warning(f"Prediction {record.id} has an invalid setlist: {e}")
            error = str(e)

        predictions.append(
            StoredPrediction(
                prediction_id=record.id,
                user_id=record.user_id,
                setlist=setlist,
                previous_score=record.score,
                user_name=record.user_name,
                error=error,
            )
        )
    return predictions


def read_json_file(path: Path) -> Any:
    """Load a JSON document, reporting unreadable files as invalid input."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"{path} is not valid JSON: {e}") from e
