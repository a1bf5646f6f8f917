import logging
from typing import List, Optional

from pydantic import ValidationError

from cDash.models import ContainerRecord


def decode_record(line: str) -> Optional[ContainerRecord]:
    """
    Decodes a single JSON line into a ContainerRecord.

    :param line: One line of `ps --format "{{json .}}"` output
    :return: The decoded record, or None if the line does not match the schema
    """
    line = line.strip()
    if not line:
        return None
    try:
        return ContainerRecord.model_validate_json(line)
    except ValidationError as e:
        logging.debug(f"Decoder - Dropping malformed record ({e.error_count()} errors): {line[:80]}")
        return None


def decode_records(text: str) -> List[ContainerRecord]:
    """
    Decodes every line of `text`, keeping source order and skipping lines that fail to decode.
    """
    records = []
    for line in text.splitlines():
        record = decode_record(line)
        if record is not None:
            records.append(record)
    return records
