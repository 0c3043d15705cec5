"""Unit tests for shortcode configuration normalization."""

from __future__ import annotations

from studio_pages.shortcodes.normalizer import is_supplied, missing_fields, normalize


def test_missing_and_none_fields_fall_back_to_defaults() -> None:
    """Absent keys and explicit ``None`` values both take the default."""
    result = normalize({"title": "Welcome", "subtitle": "Hi"}, {"subtitle": None})
    assert result == {"title": "Welcome", "subtitle": "Hi"}, (
        f"expected both defaults to apply, got {result!r}"
    )


def test_explicit_empty_collection_is_kept() -> None:
    """An explicit empty list means zero items, not the default items."""
    result = normalize({"steps": [{"title": "one"}]}, {"steps": []})
    assert result["steps"] == [], (
        f"expected the caller's empty list to survive, got {result['steps']!r}"
    )


def test_falsy_scalars_are_not_replaced() -> None:
    """Zero, ``False`` and the empty string count as supplied values."""
    result = normalize({"stars": 5, "side": True, "title": "x"}, {
        "stars": 0,
        "side": False,
        "title": "",
    })
    assert result == {"stars": 0, "side": False, "title": ""}, (
        f"expected falsy caller values to win, got {result!r}"
    )


def test_unknown_keys_pass_through() -> None:
    """Keys outside the declared defaults are preserved."""
    result = normalize({"title": "a"}, {"extra": 42})
    assert result["extra"] == 42, "expected undeclared keys to pass through"


def test_none_supplied_renders_all_defaults() -> None:
    """A missing configuration object is treated as empty."""
    assert normalize({"title": "a"}, None) == {"title": "a"}


def test_mutable_defaults_are_copied_per_call() -> None:
    """Mutating one normalized result must not leak into the next."""
    defaults = {"items": []}
    first = normalize(defaults, {})
    first["items"].append("leak")
    second = normalize(defaults, {})
    assert second["items"] == [], f"expected a fresh default list, got {second!r}"
    assert defaults["items"] == [], "expected the declared defaults to stay untouched"


def test_missing_fields_preserve_declaration_order() -> None:
    """Required names are reported in the order they were declared."""
    missing = missing_fields(("projects", "tabs"), {"tabs": None})
    assert missing == ["projects", "tabs"], f"unexpected missing fields {missing!r}"


def test_is_supplied_treats_none_as_absent() -> None:
    """``None`` is indistinguishable from a missing key."""
    assert not is_supplied({"a": None}, "a")
    assert is_supplied({"a": []}, "a")
