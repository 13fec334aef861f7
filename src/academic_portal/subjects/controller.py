from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, json_body, json_mutation, json_read, ok
from ..container import Container
from ..core.scoping import Actor


def register(app: Flask, container: Container) -> None:
    service = container.subject_service

    @app.route("/admin/add-subject", methods=["POST"], endpoint="admin_add_subject")
    @admin_required
    @json_mutation("Subject already exists or error occurred")
    def admin_add_subject():
        body = json_body()
        subject_id = service.add_subject(
            actor=Actor.admin(),
            department=body.get("department"),
            join_year=body.get("joinYear"),
            subject_name=body.get("subjectName"),
        )
        return ok(message="Subject added successfully", id=subject_id)

    @app.route("/admin/subjects/<department>/<year>", methods=["GET"], endpoint="admin_subjects")
    @admin_required
    @json_read(list)
    def admin_subjects(department: str, year: str):
        subjects = service.list_for_cohort(department=department, join_year=year)
        return jsonify([s.to_json() for s in subjects])

    @app.route("/admin/delete-subject/<int:subject_id>", methods=["DELETE"], endpoint="admin_delete_subject")
    @admin_required
    @json_mutation("Error deleting subject")
    def admin_delete_subject(subject_id: int):
        service.delete_subject(actor=Actor.admin(), subject_id=subject_id)
        return ok(message="Subject deleted successfully")
