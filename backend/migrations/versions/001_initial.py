"""initial schema : yboard

Revision ID: 001_initial
Create Date: 19/10/2026
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = '001_initial'
down_revision = None

RELATION_STATE = ('ongoing', 'potential', 'selected')
PROMO_LEVEL = ('B1', 'B2', 'B3', 'M1', 'M2')


def upgrade() -> None:
    # ── 1. Types ENUM (créés une seule fois) ──
    enums = {
        "relationstate": RELATION_STATE,
        "promolevel": PROMO_LEVEL,
    }
    for name, values in enums.items():
        vals_str = ", ".join([f"'{v}'" for v in values])
        op.execute(f"""
            DO $$
            BEGIN
                IF NOT EXISTS (SELECT 1 FROM pg_type WHERE typname = '{name}') THEN
                    CREATE TYPE {name} AS ENUM ({vals_str});
                END IF;
            END $$;
        """)

    # ── 2. Tables ──
    # postgresql.ENUM(..., create_type=False) : types déjà créés ci-dessus

    op.create_table("users",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("firstname", sa.String, nullable=False),
        sa.Column("lastname", sa.String, nullable=False),
        sa.Column("email", sa.String, nullable=False, unique=True),
        sa.Column("hashed_password", sa.String, nullable=False),
        sa.Column("last_connected", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_users_email", "users", ["email"])

    op.create_table("user_preferences",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("key", sa.String, nullable=False),
        sa.Column("value", sa.Text, nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "key", name="uq_user_preference_key"),
    )
    op.create_index("ix_user_preferences_user_id", "user_preferences", ["user_id"])

    op.create_table("teachers",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("firstname", sa.String, nullable=False),
        sa.Column("lastname", sa.String, nullable=False),
        sa.Column("status", sa.String, nullable=True),
        sa.Column("diploma", sa.String, nullable=True),
        sa.Column("comments", sa.Text, nullable=True),
        sa.Column("rate", sa.Numeric(10, 2), nullable=True),
        sa.Column("email_perso", sa.String, nullable=True),
        sa.Column("email_ynov", sa.String, nullable=True),
        sa.Column("phone_number", sa.String, nullable=True),
        sa.Column("cv_filename", sa.String, nullable=True),
        sa.Column("cv_uploaded_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_teachers_lastname", "teachers", ["lastname"])

    op.create_table("promos",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("level", postgresql.ENUM(*PROMO_LEVEL, name="promolevel", create_type=False), nullable=False),
        sa.Column("specialty", sa.String, nullable=False),
    )
    op.create_index("ix_promos_level", "promos", ["level"])

    op.create_table("modules",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String, nullable=False),
    )
    op.create_index("ix_modules_name", "modules", ["name"])

    op.create_table("promo_modules",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("promo_id", sa.Integer, sa.ForeignKey("promos.id", ondelete="CASCADE"), nullable=False),
        sa.Column("module_id", sa.Integer, sa.ForeignKey("modules.id", ondelete="CASCADE"), nullable=False),
        sa.Column("workload", sa.Integer, nullable=False),
        sa.UniqueConstraint("promo_id", "module_id", name="uq_promo_module"),
        sa.CheckConstraint("workload > 0", name="ck_promo_module_workload_positive"),
    )
    op.create_index("ix_promo_modules_promo_id", "promo_modules", ["promo_id"])
    op.create_index("ix_promo_modules_module_id", "promo_modules", ["module_id"])

    op.create_table("relations",
        sa.Column("teacher_id", sa.Integer, sa.ForeignKey("teachers.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("promo_module_id", sa.Integer, sa.ForeignKey("promo_modules.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("state", postgresql.ENUM(*RELATION_STATE, name="relationstate", create_type=False), primary_key=True),
        sa.Column("workload", sa.Integer, nullable=False),
        sa.Column("rate", sa.Numeric(10, 2), nullable=True),
        sa.Column("interview_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("interview_comments", sa.Text, nullable=True),
        sa.Column("decision", sa.Boolean, nullable=True),
        sa.CheckConstraint("workload > 0", name="ck_relation_workload_positive"),
    )
    op.create_index("ix_relations_promo_module_id", "relations", ["promo_module_id"])


def downgrade() -> None:
    tables = [
        "relations", "promo_modules", "modules", "promos",
        "teachers", "user_preferences", "users",
    ]
    for table in tables:
        op.drop_table(table)

    for e in ("relationstate", "promolevel"):
        op.execute(f"DROP TYPE IF EXISTS {e}")
