from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import MSG_EXPORT_FAILED
from ..core.exceptions import NoDataError, UnsupportedFormatError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/export-attendance", methods=["GET"], endpoint="export_attendance")
    def export_attendance():
        try:
            export = container.report_exporter.export_attendance(request.args.get("format"))
        except NoDataError as e:
            return jsonify({"error": str(e)}), 404
        except UnsupportedFormatError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Attendance export failed")
            return jsonify({"error": MSG_EXPORT_FAILED}), 500

        return app.response_class(
            export.content,
            mimetype=export.mimetype,
            headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
        )
