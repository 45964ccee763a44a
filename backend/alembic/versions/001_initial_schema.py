"""Initial schema — users, participant/instructor profiles, materials,
attendance sessions and records, grades, certificates.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at(name: str = "created_at") -> sa.Column:
    return sa.Column(
        name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(),
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="participant"),
        sa.Column("full_name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("phone", sa.String(30), nullable=False),
        _created_at(),
        sa.CheckConstraint(
            "role IN ('participant', 'instructor', 'organizer')", name="ck_users_role",
        ),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "participants",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False, unique=True),
        sa.Column("birth_place", sa.String(200), nullable=False),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("elementary_school", sa.String(200), nullable=False),
        sa.Column("junior_high_school", sa.String(200), nullable=True),
        sa.Column("senior_high_school", sa.String(200), nullable=True),
        sa.Column("purpose", sa.Text, nullable=False),
        sa.Column("organization_experience", sa.Text, nullable=True),
        sa.Column("interests", sa.Text, nullable=False),
        sa.Column("talents", sa.Text, nullable=False),
        sa.Column("motto", sa.Text, nullable=True),
        _created_at(),
    )

    op.create_table(
        "instructors",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False, unique=True),
        sa.Column("specialization", sa.String(200), nullable=False),
        sa.Column("cv", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        _created_at(),
        sa.CheckConstraint("status IN ('active', 'inactive')", name="ck_instructors_status"),
    )

    op.create_table(
        "materials",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("file_path", sa.String(500), nullable=True),
        sa.Column("file_name", sa.String(300), nullable=True),
        sa.Column("file_size", sa.Integer, nullable=True),
        sa.Column("download_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("uploaded_by", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        _created_at(),
    )

    op.create_table(
        "attendance_sessions",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("instructor_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        _created_at(),
        sa.Column("closed_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "attendance_records",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "session_id", sa.Integer,
            sa.ForeignKey("attendance_sessions.id"), nullable=False,
        ),
        sa.Column("participant_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        _created_at("check_in_time"),
        sa.Column("notes", sa.Text, nullable=True),
        sa.CheckConstraint(
            "status IN ('present', 'absent', 'late')",
            name="ck_attendance_records_status",
        ),
    )
    op.create_index(
        "ix_attendance_records_session_id", "attendance_records", ["session_id"],
    )

    score_checks = [
        sa.CheckConstraint(
            f"{col} IS NULL OR ({col} >= 0 AND {col} <= 100)",
            name=f"ck_grades_{col}_range",
        )
        for col in ("assignment_score", "exam_score", "final_score")
    ]
    op.create_table(
        "grades",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("participant_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("assignment_score", sa.Integer, nullable=True),
        sa.Column("exam_score", sa.Integer, nullable=True),
        sa.Column("final_score", sa.Integer, nullable=True),
        _created_at(),
        _created_at("updated_at"),
        *score_checks,
    )
    op.create_index("ix_grades_participant_id", "grades", ["participant_id"])

    op.create_table(
        "certificates",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("participant_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("certificate_type", sa.String(50), nullable=False, server_default="completion"),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("file_path", sa.String(500), nullable=True),
        _created_at("issued_at"),
        sa.CheckConstraint(
            "status IN ('draft', 'issued', 'revoked')", name="ck_certificates_status",
        ),
    )
    op.create_index("ix_certificates_participant_id", "certificates", ["participant_id"])


def downgrade() -> None:
    op.drop_table("certificates")
    op.drop_table("grades")
    op.drop_table("attendance_records")
    op.drop_table("attendance_sessions")
    op.drop_table("materials")
    op.drop_table("instructors")
    op.drop_table("participants")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
