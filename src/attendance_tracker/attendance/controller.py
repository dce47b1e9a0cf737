from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_range_bound
from ..common.http import json_error, read_json, server_error
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)

_CSV_FIELDS = [
    "date",
    "user_id",
    "user_name",
    "check_in",
    "check_out",
    "status",
    "work_hours",
    "location",
    "notes",
]


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _requested_range():
        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        if not start_s or not end_s:
            return None, None
        try:
            return parse_range_bound(start_s), parse_range_bound(end_s, end=True)
        except ValueError:
            raise ValidationError("Invalid date range")

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="check_in")
    def check_in():
        try:
            data = read_json()
            record = service.check_in(
                data.get("userId"),
                data.get("userName"),
                location=data.get("location"),
                notes=data.get("notes"),
            )
            return jsonify({"success": True, "record": service.to_view(record)})
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Check-in error")
            return server_error()

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="check_out")
    def check_out():
        try:
            data = read_json()
            record = service.check_out(data.get("userId"))
            return jsonify({"success": True, "record": service.to_view(record)})
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Check-out error")
            return server_error()

    @app.route("/api/attendance/status", methods=["GET"], endpoint="attendance_status")
    def attendance_status():
        try:
            record = service.get_today_record(request.args.get("userId"))
            return jsonify({"record": service.to_view(record) if record else None})
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Get status error")
            return server_error()

    @app.route("/api/attendance/all", methods=["GET"], endpoint="attendance_all")
    def attendance_all():
        try:
            start, end = _requested_range()
            records = service.list_records(start=start, end=end)
            return jsonify({"records": [service.to_view(r) for r in records]})
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Get all attendance error")
            return server_error()

    @app.route("/api/attendance/export.csv", methods=["GET"], endpoint="attendance_export_csv")
    def attendance_export_csv():
        try:
            start, end = _requested_range()
            records = service.list_records(start=start, end=end)

            out = io.StringIO()
            writer = csv.DictWriter(out, fieldnames=_CSV_FIELDS)
            writer.writeheader()
            for row in service.report_rows(records):
                writer.writerow(row)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Export attendance error")
            return server_error()

        if start and end:
            filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        else:
            filename = "attendance_all.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
