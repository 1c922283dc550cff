import pytest

from portfolio.domain.exceptions import ValidationError
from portfolio.domain.fields import (
    Field,
    ImagePair,
    PatchSchema,
    as_int,
    as_optional_string,
    as_string_list,
    bounded_number,
    check_image_pair,
    one_of,
)

SCHEMA = PatchSchema(
    label="Thing",
    fields=(
        Field("title", "title"),
        Field("note", "note", as_optional_string),
        Field("order", "order", as_int),
    ),
    image=ImagePair(),
    required=("title",),
    defaults={"note": "n/a"},
)


def test_parse_keeps_only_declared_fields():
    values = SCHEMA.parse({"title": "A", "bogus": 1, "order": "2"})

    assert values == {"title": "A", "order": 2}


def test_parse_rejects_empty_patch():
    with pytest.raises(ValidationError, match="No valid fields"):
        SCHEMA.parse({"bogus": True})


def test_parse_create_reports_missing_fields_and_applies_defaults():
    with pytest.raises(ValidationError, match=r"Missing required fields \(title\)"):
        SCHEMA.parse_create({"note": "x"})

    assert SCHEMA.parse_create({"title": "T"}) == {"title": "T", "note": "n/a"}


def test_optional_string_stores_empty_as_null():
    assert as_optional_string("note", "") is None
    assert as_optional_string("note", 5) == "5"


def test_as_int_rejects_fractions_and_booleans():
    with pytest.raises(ValidationError):
        as_int("order", 1.5)
    with pytest.raises(ValidationError):
        as_int("order", True)


def test_string_list_collapses_duplicates():
    assert as_string_list("categoryIds", ["a", "b", "a"]) == ["a", "b"]

    with pytest.raises(ValidationError, match="must be an array of strings"):
        as_string_list("categoryIds", ["a", 1])
    with pytest.raises(ValidationError):
        as_string_list("categoryIds", "a")


def test_one_of_lists_allowed_values():
    coerce = one_of(("layout1", "layout2"))

    with pytest.raises(ValidationError, match="Allowed values are: layout1, layout2"):
        coerce("layout", "layout3")


@pytest.mark.parametrize("value", [0, 5, "4.5"])
def test_bounded_number_accepts_inclusive_range(value):
    assert bounded_number(0, 5)("rating", value) == float(value)


@pytest.mark.parametrize("value", [5.5, -1, "abc", None, float("inf")])
def test_bounded_number_rejects_outside_range(value):
    with pytest.raises(ValidationError, match="between 0 and 5"):
        bounded_number(0, 5)("rating", value)


def test_image_src_alone_is_allowed_when_entity_has_no_remote_image():
    values = {"image_src": "https://example.com/a.png"}
    check_image_pair(ImagePair(), values, current_public_id=None)

    assert values == {"image_src": "https://example.com/a.png"}


def test_image_src_alone_is_rejected_when_entity_has_remote_image():
    with pytest.raises(ValidationError):
        check_image_pair(ImagePair(), {"image_src": "https://x/b.png"}, current_public_id="old")


def test_clearing_image_src_clears_public_id():
    values = {"image_src": None}
    check_image_pair(ImagePair(), values, current_public_id="old")

    assert values == {"image_src": None, "image_public_id": None}


def test_public_id_without_src_is_rejected():
    with pytest.raises(ValidationError):
        check_image_pair(ImagePair(), {"image_public_id": "new"})
