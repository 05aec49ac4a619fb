import pytest

from core.domain.errors import HandleReleasedError, PersonRecordsError
from core.domain.models import Gender, PersonRecord
from core.services.lifecycle import PersonHandle, new_person


def _bruce():
    return new_person("Bruce Wayne", 40, "Wayne Manor", "Batman", Gender.MALE)


def test_new_person_returns_live_handle():
    handle = _bruce()
    assert isinstance(handle, PersonHandle)
    assert not handle.released
    assert handle.name == "Bruce Wayne"
    assert handle.age == 40
    assert handle.address == "Wayne Manor"
    assert handle.occupation == "Batman"
    assert handle.gender is Gender.MALE
    assert handle.gender_label() == "Male"
    assert isinstance(handle.record, PersonRecord)


def test_new_person_returns_none_on_allocation_failure():
    def failing_factory(**kwargs):
        raise MemoryError

    assert new_person("A", 1, "B", "C", factory=failing_factory) is None


def test_new_person_propagates_other_errors():
    def broken_factory(**kwargs):
        raise TypeError("bad field")

    with pytest.raises(TypeError):
        new_person("A", 1, "B", "C", factory=broken_factory)


def test_use_after_release_fails_loudly():
    handle = _bruce()
    handle.release()
    assert handle.released

    for read in (
        lambda h: h.name,
        lambda h: h.age,
        lambda h: h.address,
        lambda h: h.occupation,
        lambda h: h.gender,
        lambda h: h.gender_label(),
        lambda h: h.record,
    ):
        with pytest.raises(HandleReleasedError):
            read(handle)


def test_double_release_is_an_error():
    handle = _bruce()
    handle.release()
    with pytest.raises(HandleReleasedError) as excinfo:
        handle.release()
    assert excinfo.value.operation == "release"
    assert isinstance(excinfo.value, PersonRecordsError)


def test_context_manager_releases_on_exit():
    with _bruce() as handle:
        assert handle.name == "Bruce Wayne"
    assert handle.released


def test_context_manager_tolerates_manual_release():
    with _bruce() as handle:
        handle.release()
    assert handle.released


def test_repr_reports_release():
    handle = _bruce()
    assert "Bruce Wayne" in repr(handle)
    handle.release()
    assert repr(handle) == "PersonHandle(<released>)"
