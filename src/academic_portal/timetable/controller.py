from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, json_mutation, json_read, ok
from ..container import Container
from ..core.scoping import Actor


def register(app: Flask, container: Container) -> None:
    service = container.timetable_service

    @app.route("/faculty/assigned-subjects", methods=["GET"], endpoint="faculty_assigned_subjects")
    @json_read(list)
    def faculty_assigned_subjects():
        subjects = service.assigned_subjects(request.args.get("facultyId"))
        return jsonify([s.to_json() for s in subjects])

    @app.route("/student/<student_id>/timetable", methods=["GET"], endpoint="student_timetable")
    @json_read(list)
    def student_timetable(student_id: str):
        return jsonify([v.to_json() for v in service.student_timetable(student_id)])

    @app.route("/admin/clear-timetable", methods=["DELETE"], endpoint="admin_clear_timetable")
    @admin_required
    @json_mutation("Error clearing timetable")
    def admin_clear_timetable():
        count = service.clear_all(actor=Actor.admin())
        return ok(message="All timetable entries cleared", deleted=count)
