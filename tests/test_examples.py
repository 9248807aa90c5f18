# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data-driven tests over the header values listed in tests/data/link_values.yaml.

The file doubles as documentation of which header values the parser accepts
or rejects.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from linkheader import LexerError, LinkValue, Parameter, parse

# ###############
# Helpers
# ###############

DATA_FILE = Path(__file__).parent / "data" / "link_values.yaml"


def _load_cases(section: str) -> list[Any]:
    data = yaml.safe_load(DATA_FILE.read_text(encoding="utf-8"))
    return [pytest.param(case, id=case["id"]) for case in data[section]]


# ###############
# Positive Examples
# ###############


@pytest.mark.parametrize("case", _load_cases("positive"))
def test_accepted_value(case: dict[str, Any]) -> None:
    expected = LinkValue(
        uri_reference=case["uri_reference"],
        parameters={key: Parameter(**parameter) for key, parameter in case["parameters"].items()},
    )
    assert parse(case["value"]) == expected


# ###############
# Negative Examples
# ###############


@pytest.mark.parametrize("case", _load_cases("negative"))
def test_rejected_value(case: dict[str, Any]) -> None:
    with pytest.raises(LexerError) as exc_info:
        parse(case["value"])
    assert case["message"] in str(exc_info.value)
