from __future__ import annotations

import re

import pytest

from splitfx.naming import (
    is_identifier,
    normalize,
    pascal_case,
    slugify,
    snake_case,
    split_words,
)

IDENTIFIER = re.compile(r"[A-Z][A-Za-z0-9]*")
SLUG = re.compile(r"[a-z0-9_]+")

RAW_NAMES = [
    "my cool app",
    "MyApp",
    "MyHTTPApp",
    "myApp",
    "my-cool_app",
    "  padded   name ",
    "Café ☕",
    "123 go",
    "---",
    "HTTPServer",
    "x",
    "App2Go",
]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("My Project", "my-project"),
        ("   My    Project  ", "my-project"),
        ("Project! @ 2025", "project-2025"),
        ("Café ☕", "cafe"),
        (("alpha", "beta"), "alpha-beta"),
    ],
)
def test_slugify_basic(value, expected):
    assert slugify(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("myApp", ["my", "App"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("my cool-app", ["my", "cool", "app"]),
        ("version2Beta", ["version2", "Beta"]),
        ("!!!", []),
    ],
)
def test_split_words(value, expected):
    assert split_words(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my cool app", "MyCoolApp"),
        ("alreadyCamel", "AlreadyCamel"),
        ("HTTP server", "HttpServer"),
        ("---", "Project"),
        ("42 things", "Project42Things"),
    ],
)
def test_pascal_case(value, expected):
    assert pascal_case(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my cool app", "my_cool_app"),
        ("MyApp", "my_app"),
        ("MyHTTPApp", "my_http_app"),
        ("my-cool_app", "my_cool_app"),
        ("---", "project"),
    ],
)
def test_snake_case(value, expected):
    assert snake_case(value) == expected


def test_is_identifier():
    assert is_identifier("MyApp")
    assert is_identifier("A1")
    assert not is_identifier("myApp")
    assert not is_identifier("My App")
    assert not is_identifier("My_App")
    assert not is_identifier("")


def test_normalize_preserves_identifier_verbatim():
    assert normalize("MyHTTPApp").identifier == "MyHTTPApp"
    assert normalize("MyApp") == ("MyApp", "my_app")


def test_normalize_derives_from_free_text():
    name = normalize("my cool app")
    assert name.identifier == "MyCoolApp"
    assert name.slug == "my_cool_app"


@pytest.mark.parametrize("raw", RAW_NAMES)
def test_normalize_forms_are_canonical(raw):
    name = normalize(raw)
    assert IDENTIFIER.fullmatch(name.identifier)
    assert SLUG.fullmatch(name.slug)
    if is_identifier(raw):
        assert name.identifier == raw


@pytest.mark.parametrize("raw", ["", "   ", "\t"])
def test_normalize_rejects_blank_input(raw):
    with pytest.raises(ValueError):
        normalize(raw)
