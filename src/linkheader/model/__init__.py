# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Result model for parsed 'Link' header values."""

from linkheader.model.entities import LinkValue, Parameter

__all__ = [
    "LinkValue",
    "Parameter",
]
