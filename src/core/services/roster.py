"""Demo roster orchestration.

This module holds the "construct, print, destroy" flow so the CLI only deals
with options, exit codes and presentation. Tests drive it directly with
in-memory sinks.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from adapters.text_exporter import export_persons_text, print_person
from core.domain.errors import ConstructionError
from core.domain.models import Gender, PersonRecord
from core.interfaces.sink import TextSink
from core.logging_config import get_logger
from core.services.lifecycle import PersonHandle, new_person

logger = get_logger(__name__)


@dataclass(frozen=True)
class PersonFields:
    """Field set used to build one demo record."""

    name: str
    age: int
    address: str
    occupation: str
    gender: Gender = Gender.UNSPECIFIED

    def as_kwargs(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "age": self.age,
            "address": self.address,
            "occupation": self.occupation,
            "gender": self.gender,
        }


@dataclass
class DemoResult:
    """Outcome of `run_demo`."""

    records: list[PersonRecord] = field(default_factory=list)
    output_path: Path | None = None
    handle: PersonHandle | None = None


def demo_people() -> tuple[PersonFields, PersonFields, PersonFields]:
    """The three demo people, in print order. The last one is built dynamically."""

    return (
        PersonFields("Erik Pihl", 31, "Lärdomsgatan 3", "Teacher", Gender.MALE),
        PersonFields("Donald Duck", 88, "1313 Webfoot Street", "Comical Character", Gender.MALE),
        PersonFields("Bruce Wayne", 40, "Wayne Manor", "Batman", Gender.MALE),
    )


def run_demo(
    *,
    output_path: Path,
    console_sink: TextSink | None = None,
    echo_console: bool = True,
    allocate: Callable[..., PersonHandle | None] | None = None,
) -> DemoResult:
    """Build the demo roster, print it, write it to `output_path`, then release.

    Raises `ConstructionError` before any output when the dynamic record
    cannot be built.
    """

    if console_sink is None:
        console_sink = sys.stdout
    if allocate is None:
        allocate = new_person

    first, second, third = demo_people()
    p1 = PersonRecord(**first.as_kwargs())
    p2 = PersonRecord(**second.as_kwargs())
    p3 = allocate(**third.as_kwargs())
    if p3 is None:
        raise ConstructionError(f"could not construct record for {third.name!r}")

    with p3:
        if echo_console:
            for person in (p1, p2, p3):
                print_person(person, console_sink)

        export_persons_text(persons=(p1, p2, p3), output_path=output_path)
        records = [p1, p2, p3.record]

    console_sink.write(f"My name is {p1.name}!\n")
    console_sink.write(f"I am {p1.age} years old!\n")

    logger.info("demo.finished", records=len(records), path=str(output_path))
    return DemoResult(records=records, output_path=output_path, handle=p3)
