import pytest

from realmgen.generators.helpers import (
    camel_case,
    default_helpers,
    lower_first,
    merge_helpers,
    pascal_case,
    screaming_snake_case,
    snake_case,
    upper_first,
)


def test_first_letter_case():
    assert upper_first("person") == "Person"
    assert lower_first("Person") == "person"
    assert upper_first("") == ""


@pytest.mark.parametrize(
    "value, snake, pascal, camel",
    [
        ("userName", "user_name", "UserName", "userName"),
        ("created_at", "created_at", "CreatedAt", "createdAt"),
        ("HTTPServer", "http_server", "HttpServer", "httpServer"),
        ("Dog", "dog", "Dog", "dog"),
    ],
)
def test_word_case_conversions(value, snake, pascal, camel):
    assert snake_case(value) == snake
    assert pascal_case(value) == pascal
    assert camel_case(value) == camel


def test_screaming_snake_case():
    assert screaming_snake_case("favoriteToy") == "FAVORITE_TOY"


def test_default_helper_names():
    assert sorted(default_helpers()) == [
        "camel_case",
        "lower_first",
        "pascal_case",
        "screaming_snake_case",
        "snake_case",
        "upper_first",
    ]


def test_merge_overrides_and_extends():
    helpers = merge_helpers({"upper_first": str.upper, "reverse": lambda s: s[::-1]})
    assert helpers["upper_first"]("dog") == "DOG"
    assert helpers["reverse"]("dog") == "god"
    assert helpers["snake_case"]("aB") == "a_b"


def test_merge_rejects_non_callable():
    with pytest.raises(TypeError):
        merge_helpers({"bad": "not callable"})
