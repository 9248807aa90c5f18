# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the parsed 'Link' header value model."""

import pytest
from pydantic import ValidationError

from linkheader.model import LinkValue, Parameter


def test_parameter_value_defaults_to_empty() -> None:
    """A parameter without a value holds an empty string."""
    assert Parameter(name="noval").value == ""


def test_parameter_is_frozen() -> None:
    parameter = Parameter(name="rel", value="next")
    with pytest.raises(ValidationError):
        parameter.value = "prev"  # type: ignore[misc]


def test_link_value_parameters_default_to_empty() -> None:
    """A link value always has a parameter mapping, even when nothing was given."""
    assert LinkValue(uri_reference="http://x").parameters == {}


def test_link_value_requires_uri_reference() -> None:
    with pytest.raises(ValidationError):
        LinkValue()  # type: ignore[call-arg]


def test_link_value_is_frozen() -> None:
    link = LinkValue(uri_reference="http://x")
    with pytest.raises(ValidationError):
        link.uri_reference = "http://y"  # type: ignore[misc]


def test_case_insensitive_lookup() -> None:
    link = LinkValue(uri_reference="x", parameters={"rel": Parameter(name="Rel", value="next")})
    assert link.get("REL") == Parameter(name="Rel", value="next")
    assert link.get("rel") is link.parameters["rel"]
    assert "rEl" in link


def test_lookup_of_missing_parameter() -> None:
    link = LinkValue(uri_reference="x")
    fallback = Parameter(name="rel", value="alternate")
    assert link.get("rel") is None
    assert link.get("rel", fallback) is fallback
    assert "rel" not in link
    assert 1 not in link


def test_structural_equality() -> None:
    first = LinkValue(uri_reference="x", parameters={"a": Parameter(name="a", value="1")})
    second = LinkValue(uri_reference="x", parameters={"a": Parameter(name="a", value="1")})
    assert first == second
    assert first != LinkValue(uri_reference="x")
