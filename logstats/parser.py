"""JSON record decoder: all-or-nothing decode of a log array into a LogCollection."""

from __future__ import annotations

import json
import logging

import jsonschema
from jsonschema.exceptions import best_match

from logstats.errors import DecodeError, FormatError
from logstats.models import LogCollection, LogRecord, Timestamp

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("service", "level", "operation", "message", "transaction_id")

LOG_ARRAY_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            **{name: {"type": ["string", "null"]} for name in TEXT_FIELDS},
            "timestamp": {"type": ["string", "null"]},
        },
    },
}

_validator = jsonschema.Draft202012Validator(LOG_ARRAY_SCHEMA)


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant {name}")


def load_json(content: bytes | str):
    """Decode ``content`` into a Python object.

    Raises:
        DecodeError: If the bytes cannot be decoded or the JSON is malformed.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"input is not valid UTF-8: {exc}") from exc

    try:
        return json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(f"malformed JSON: {exc}") from exc


def validate_structure(document) -> None:
    """Check that ``document`` is an array of objects with string fields.

    Raises:
        DecodeError: Naming the JSON path of the most relevant violation.
    """
    error = best_match(_validator.iter_errors(document))
    if error is not None:
        raise DecodeError(f"invalid log array at {error.json_path}: {error.message}")


def decode_record(obj: dict) -> LogRecord:
    """Build a LogRecord from one JSON object.

    Unknown keys are ignored. Absent or null text fields become "", an absent
    timestamp becomes Timestamp.zero(), and any other timestamp must parse.
    """
    fields = {name: obj.get(name) or "" for name in TEXT_FIELDS}
    if "timestamp" in obj:
        timestamp = Timestamp.parse(obj["timestamp"])
    else:
        timestamp = Timestamp.zero()
    return LogRecord(timestamp=timestamp, **fields)


def parse_records(content: bytes | str) -> LogCollection:
    """Decode a JSON array of log objects into a LogCollection.

    The decode is atomic: the first failure aborts it and no partial
    collection is returned.

    Raises:
        DecodeError: If the input is not a well-formed JSON array of objects.
        FormatError: If any record's timestamp does not match the layout.
    """
    document = load_json(content)
    validate_structure(document)

    records = []
    for index, obj in enumerate(document):
        try:
            records.append(decode_record(obj))
        except FormatError as exc:
            raise FormatError(f"record {index}: {exc}") from exc

    logger.debug("Decoded %d log records", len(records))
    return LogCollection(records)
