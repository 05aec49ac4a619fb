"""Plain-text rendering and export of person records.

Why it lives in adapters:
- Consoles and files are infrastructure details.
- The core only knows `PersonRecord` and `PersonHandle`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Union

from core.domain.models import PersonRecord
from core.interfaces.sink import TextSink
from core.logging_config import get_logger
from core.services.lifecycle import PersonHandle

logger = get_logger(__name__)

SEPARATOR = "-" * 80

Printable = Union[PersonRecord, PersonHandle]


def _as_record(person: Printable) -> PersonRecord:
    if isinstance(person, PersonHandle):
        return person.record
    return person


def render_person_text(person: Printable) -> str:
    """Render the delimiter-bordered block for one record."""

    record = _as_record(person)
    lines = [
        SEPARATOR,
        f"Name: {record.name}",
        f"Age: {record.age}",
        f"Address: {record.address}",
        f"Occupation: {record.occupation}",
        f"Gender: {record.gender_label()}",
        SEPARATOR,
        "",
    ]
    return "\n".join(lines) + "\n"


def print_person(person: Printable, sink: TextSink | None = None) -> None:
    """Write the block for `person` to `sink` (standard output by default)."""

    if sink is None:
        sink = sys.stdout
    sink.write(render_person_text(person))


def export_persons_text(*, persons: Iterable[Printable], output_path: Path) -> Path:
    """Write every block to `output_path`, truncating it first.

    Blocks are rendered before the file is opened, so a released handle fails
    without touching an existing file.
    """

    blocks = [render_person_text(p) for p in persons]

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="\n") as fh:
        for block in blocks:
            fh.write(block)

    logger.info("export.written", path=str(output_path), records=len(blocks))
    return output_path
