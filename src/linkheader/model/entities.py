# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Result model for a parsed HTTP 'Link' header value."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Parameter(BaseModel):
    """A single link parameter, with its name kept in the case it was written."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = ""


class LinkValue(BaseModel):
    """The parsed form of one ``link-value``.

    Attributes:
        uri_reference: The text between the angle brackets, uninterpreted.
        parameters: Parameters keyed by their lowercased name. When a name
            occurs more than once only the last occurrence is kept.
    """

    model_config = ConfigDict(frozen=True)

    uri_reference: str
    parameters: dict[str, Parameter] = _Field(default_factory=dict)

    def get(self, name: str, default: Parameter | None = None) -> Parameter | None:
        """Look up a parameter by name, ignoring case."""
        return self.parameters.get(name.lower(), default)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self.parameters
