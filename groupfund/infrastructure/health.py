# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text

from groupfund.infrastructure.db import ENGINE


def check_database() -> str:
    """Round-trip a trivial query; returns the dialect name on success."""
    with ENGINE.connect() as connection:
        connection.execute(text("SELECT 1"))
    return ENGINE.dialect.name


__all__ = ["check_database"]
