from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import admin_required, json_body, json_mutation, json_read, ok
from ..container import Container
from ..core.exceptions import ValidationError
from ..core.scoping import Actor


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    @json_mutation("Server error")
    def login():
        body = json_body()
        s_user, token = container.auth_service.login(body.get("id"), body.get("password"), body.get("role"))

        session.clear()
        session["token"] = token
        session["user_id"] = s_user.user_id
        session["role"] = s_user.role.value

        return ok(
            role=s_user.role.value,
            user=s_user.to_json(),
            redirect=f"/{s_user.role.value}.html",
            token=token,
        )

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout(session.get("token"))
        session.clear()
        return ok(message="Logged out")

    @app.route("/admin/create-user", methods=["POST"], endpoint="admin_create_user")
    @admin_required
    @json_mutation("Error creating user")
    def admin_create_user():
        body = json_body()
        user = container.user_service.create_user(actor=Actor.admin(), role=body.get("role"), data=body)
        return ok(message=f"{user.role.value} created successfully")

    @app.route("/admin/bulk-create-students", methods=["POST"], endpoint="admin_bulk_create_students")
    @admin_required
    @json_mutation("Error during bulk upload")
    def admin_bulk_create_students():
        students = json_body().get("students")
        if not isinstance(students, list):
            raise ValidationError("students must be a list")

        result = container.user_service.bulk_create_students(actor=Actor.admin(), entries=students)
        return ok(
            message="Bulk upload completed",
            created=result.created,
            failed=result.failed,
            errors=result.errors,
        )

    @app.route("/admin/users/<role>", methods=["GET"], endpoint="admin_users")
    @admin_required
    @json_read(list)
    def admin_users(role: str):
        return jsonify([u.to_json() for u in container.user_service.list_by_role(role)])

    @app.route("/admin/department-years/<department>", methods=["GET"], endpoint="admin_department_years")
    @admin_required
    @json_read(list)
    def admin_department_years(department: str):
        return jsonify(list(container.user_service.department_years(department)))

    @app.route("/admin/delete-user/<user_id>", methods=["DELETE"], endpoint="admin_delete_user")
    @admin_required
    @json_mutation("Error deleting user")
    def admin_delete_user(user_id: str):
        container.user_service.delete_user(actor=Actor.admin(), user_id=user_id)
        return ok(message="User deleted successfully")

    @app.route("/faculty/students", methods=["GET"], endpoint="faculty_students")
    @json_read(list)
    def faculty_students():
        return jsonify([u.to_json() for u in container.user_service.list_students()])

    @app.route("/faculty/students/<department>/<year>", methods=["GET"], endpoint="faculty_cohort_students")
    @json_read(list)
    def faculty_cohort_students(department: str, year: str):
        # Cohort scoped, not faculty scoped.
        students = container.user_service.list_cohort_students(department=department, join_year=year)
        return jsonify([u.to_json() for u in students])
