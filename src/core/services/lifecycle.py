"""Dynamic construction and owned handles.

A `PersonHandle` owns one `PersonRecord`. Releasing it drops the record, and
every later use raises `HandleReleasedError` instead of reading stale data.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, Callable

from core.domain.errors import HandleReleasedError
from core.domain.models import Gender, PersonRecord
from core.logging_config import get_logger

logger = get_logger(__name__)

RecordFactory = Callable[..., PersonRecord]


class PersonHandle:
    """Owned reference to a dynamically constructed record."""

    __slots__ = ("_record",)

    def __init__(self, record: PersonRecord) -> None:
        self._record: PersonRecord | None = record

    def _live(self, operation: str) -> PersonRecord:
        if self._record is None:
            raise HandleReleasedError(operation)
        return self._record

    @property
    def released(self) -> bool:
        return self._record is None

    @property
    def record(self) -> PersonRecord:
        return self._live("read record")

    @property
    def name(self) -> str:
        return self._live("read name").name

    @property
    def age(self) -> int:
        return self._live("read age").age

    @property
    def address(self) -> str:
        return self._live("read address").address

    @property
    def occupation(self) -> str:
        return self._live("read occupation").occupation

    @property
    def gender(self) -> Gender:
        return self._live("read gender").gender

    def gender_label(self) -> str:
        return self._live("read gender").gender_label()

    def release(self) -> None:
        """Drop the owned record. A second call raises `HandleReleasedError`."""

        record = self._live("release")
        self._record = None
        logger.debug("person.released", name=record.name)

    def __enter__(self) -> "PersonHandle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.released:
            self.release()

    def __repr__(self) -> str:
        if self._record is None:
            return "PersonHandle(<released>)"
        return f"PersonHandle({self._record!r})"


def new_person(
    name: str,
    age: int,
    address: str,
    occupation: str,
    gender: Any = Gender.UNSPECIFIED,
    *,
    factory: RecordFactory = PersonRecord,
) -> PersonHandle | None:
    """Build a record and wrap it in an owned handle.

    Returns `None` when allocation fails; callers must check before use.
    """

    try:
        record = factory(
            name=name,
            age=age,
            address=address,
            occupation=occupation,
            gender=gender,
        )
    except MemoryError:
        logger.warning("person.allocation_failed", name=name)
        return None

    logger.debug("person.created", name=record.name)
    return PersonHandle(record)
