# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from groupfund.infrastructure.health import check_database
from groupfund.interfaces.http.dto.misc import HealthDTO
from groupfund.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        try:
            dialect = check_database()
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed: {exc}")
            return jsonify(HealthDTO(ok=False, database=f"error: {exc}").model_dump())
        return jsonify(HealthDTO(dialect=dialect).model_dump())
