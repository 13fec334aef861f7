from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, faculty_actor, json_body, json_mutation, json_read, ok, resolve_faculty_id
from ..container import Container
from ..core.scoping import Actor
from .summary import AttendanceSummary


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/faculty/attendance", methods=["POST"], endpoint="faculty_attendance")
    @json_mutation("Error marking attendance")
    def faculty_attendance():
        body = json_body()
        service.record_attendance(
            student_id=body.get("studentId"),
            subject_name=body.get("subjectName"),
            attendance_date=body.get("date"),
            status=body.get("status"),
            faculty_id=resolve_faculty_id(body),
        )
        return ok()

    @app.route("/faculty/check-attendance", methods=["GET"], endpoint="faculty_check_attendance")
    @json_read(lambda: {"hasAttendance": False})
    def faculty_check_attendance():
        exists = service.attendance_exists(
            student_id=request.args.get("studentId"),
            subject_name=request.args.get("subjectName"),
            attendance_date=request.args.get("date"),
        )
        return jsonify({"hasAttendance": exists})

    @app.route("/faculty/attendance-records", methods=["GET"], endpoint="faculty_attendance_records")
    @json_read(list)
    def faculty_attendance_records():
        actor = faculty_actor()
        if actor is None:
            return jsonify([])
        rows = service.list_records(actor=actor)
        return jsonify([r.to_json() for r in rows])

    @app.route("/faculty/delete-attendance/<int:attendance_id>", methods=["DELETE"], endpoint="faculty_delete_attendance")
    @json_mutation("Error deleting attendance record")
    def faculty_delete_attendance(attendance_id: int):
        # Scoped: another faculty's id, or no faculty at all, leaves the record alone.
        actor = faculty_actor()
        if actor is not None:
            service.delete_record(actor=actor, attendance_id=attendance_id)
        return ok(message="Attendance record deleted")

    @app.route("/student/<student_id>/attendance", methods=["GET"], endpoint="student_attendance")
    @json_read(lambda: AttendanceSummary.empty().to_json())
    def student_attendance(student_id: str):
        return jsonify(service.student_summary(student_id).to_json())

    @app.route("/admin/attendance-records", methods=["GET"], endpoint="admin_attendance_records")
    @admin_required
    @json_read(list)
    def admin_attendance_records():
        rows = service.list_records(actor=Actor.admin())
        return jsonify([r.to_json() for r in rows])

    @app.route("/admin/delete-attendance/<int:attendance_id>", methods=["DELETE"], endpoint="admin_delete_attendance")
    @admin_required
    @json_mutation("Error deleting attendance record")
    def admin_delete_attendance(attendance_id: int):
        service.delete_record(actor=Actor.admin(), attendance_id=attendance_id)
        return ok(message="Attendance record deleted")

    @app.route("/admin/clear-attendance", methods=["DELETE"], endpoint="admin_clear_attendance")
    @admin_required
    @json_mutation("Error clearing attendance")
    def admin_clear_attendance():
        count = service.clear_all(actor=Actor.admin())
        return ok(message="All attendance records cleared", deleted=count)
