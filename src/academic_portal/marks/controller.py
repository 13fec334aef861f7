from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, faculty_actor, json_body, json_mutation, json_read, ok, resolve_faculty_id
from ..container import Container
from ..core.scoping import Actor


def register(app: Flask, container: Container) -> None:
    service = container.marks_service

    @app.route("/faculty/marks", methods=["POST"], endpoint="faculty_marks")
    @json_mutation("Error adding marks")
    def faculty_marks():
        body = json_body()
        service.record_marks(
            student_id=body.get("studentId"),
            subject_name=body.get("subjectName"),
            exam_type=body.get("examType"),
            marks=body.get("marks"),
            faculty_id=resolve_faculty_id(body),
        )
        return ok()

    @app.route("/faculty/marks-records", methods=["GET"], endpoint="faculty_marks_records")
    @json_read(list)
    def faculty_marks_records():
        actor = faculty_actor()
        if actor is None:
            return jsonify([])
        rows = service.list_records(actor=actor)
        return jsonify([r.to_json() for r in rows])

    @app.route("/faculty/marks-subjects", methods=["GET"], endpoint="faculty_marks_subjects")
    @json_read(list)
    def faculty_marks_subjects():
        return jsonify(list(service.subjects_for_faculty(request.args.get("facultyId"))))

    @app.route("/faculty/delete-marks/<int:marks_id>", methods=["DELETE"], endpoint="faculty_delete_marks")
    @json_mutation("Error deleting marks record")
    def faculty_delete_marks(marks_id: int):
        actor = faculty_actor()
        if actor is not None:
            service.delete_record(actor=actor, marks_id=marks_id)
        return ok(message="Marks record deleted")

    @app.route("/student/<student_id>/marks", methods=["GET"], endpoint="student_marks")
    @json_read(list)
    def student_marks(student_id: str):
        return jsonify([m.to_student_json() for m in service.student_marks(student_id)])

    @app.route("/admin/marks-records", methods=["GET"], endpoint="admin_marks_records")
    @admin_required
    @json_read(list)
    def admin_marks_records():
        rows = service.list_records(actor=Actor.admin())
        return jsonify([r.to_json() for r in rows])

    @app.route("/admin/delete-marks/<int:marks_id>", methods=["DELETE"], endpoint="admin_delete_marks")
    @admin_required
    @json_mutation("Error deleting marks record")
    def admin_delete_marks(marks_id: int):
        service.delete_record(actor=Actor.admin(), marks_id=marks_id)
        return ok(message="Marks record deleted")

    @app.route("/admin/clear-marks", methods=["DELETE"], endpoint="admin_clear_marks")
    @admin_required
    @json_mutation("Error clearing marks")
    def admin_clear_marks():
        count = service.clear_all(actor=Actor.admin())
        return ok(message="All marks cleared", deleted=count)
