import pytest
from pydantic import ValidationError

from core.domain.models import Gender, PersonRecord


def test_person_creation(erik):
    assert erik.name == "Erik Pihl"
    assert erik.age == 31
    assert erik.address == "Lärdomsgatan 3"
    assert erik.occupation == "Teacher"
    assert erik.gender is Gender.MALE
    assert erik.gender_label() == "Male"


def test_person_is_immutable(erik):
    with pytest.raises(ValidationError):
        erik.name = "Someone Else"
    with pytest.raises(ValidationError):
        erik.age = 32
    assert erik.name == "Erik Pihl"


def test_no_range_validation():
    person = PersonRecord(name="", age=-5, address="", occupation="")
    assert person.age == -5
    assert person.name == ""
    assert person.gender is Gender.UNSPECIFIED


@pytest.mark.parametrize(
    "gender, label",
    [
        (Gender.MALE, "Male"),
        (Gender.FEMALE, "Female"),
        (Gender.OTHER, "Other"),
        (Gender.UNSPECIFIED, "Unspecified"),
    ],
)
def test_gender_labels(gender, label):
    assert gender.label() == label


@pytest.mark.parametrize(
    "value, expected",
    [
        ("male", Gender.MALE),
        ("  Female ", Gender.FEMALE),
        ("OTHER", Gender.OTHER),
        (0, Gender.MALE),
        (1, Gender.FEMALE),
        (2, Gender.OTHER),
        (3, Gender.UNSPECIFIED),
        (42, Gender.UNSPECIFIED),
        (-1, Gender.UNSPECIFIED),
        (True, Gender.UNSPECIFIED),
        ("robot", Gender.UNSPECIFIED),
        (None, Gender.UNSPECIFIED),
        (3.5, Gender.UNSPECIFIED),
    ],
)
def test_gender_coerce_is_total(value, expected):
    assert Gender.coerce(value) is expected


def test_unknown_gender_is_stored_as_unspecified():
    person = PersonRecord(name="X", age=1, address="A", occupation="O", gender="robot")
    assert person.gender is Gender.UNSPECIFIED
    assert person.gender_label() == "Unspecified"


@pytest.mark.parametrize("age", [True, 31.0, "31"])
def test_age_must_be_an_int(age):
    with pytest.raises(ValidationError):
        PersonRecord(name="X", age=age, address="A", occupation="O")
