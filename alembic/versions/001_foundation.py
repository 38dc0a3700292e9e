"""
============================================================
TARJETA CRC (Class / Responsibilities / Collaborators)
============================================================
Class: 001_foundation (Alembic Migration)

Responsibilities:
  - Crear el esquema completo desde cero: users + tasks.
  - Definir constraints (email único, role/status válidos, FK con cascade).

Collaborators:
  - PostgreSQL 14+
  - infrastructure/repositories/postgres (usa este esquema como contrato)

Policy:
  - Migración BASELINE. Downgrade NO soportado.
  - Convención de nombres:
      pk_<tabla>, uq_<tabla>_<col>, ix_<tabla>_<col>,
      ck_<tabla>_<col>, fk_<tabla>_<col>__<ref_tabla>
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_foundation"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # =========================================================
    # 1) IDENTITY (users)
    # =========================================================
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger, sa.Identity(always=False), nullable=False),
        # Email se guarda tal cual (sin lower): la unicidad es exacta.
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column(
            "role",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'User'"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("role IN ('User','Admin')", name="ck_users_role"),
    )

    # =========================================================
    # 2) TASKS
    # =========================================================
    op.create_table(
        "tasks",
        sa.Column("id", sa.BigInteger, sa.Identity(always=False), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column(
            "description",
            sa.String(1000),
            nullable=False,
            server_default=sa.text("''"),
        ),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'Pending'"),
        ),
        sa.Column("user_id", sa.BigInteger, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_tasks"),
        sa.CheckConstraint(
            "status IN ('Pending','InProgress','Completed')",
            name="ck_tasks_status",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_tasks_user_id__users",
            ondelete="CASCADE",
        ),
    )

    # Listado por owner (GET /tasks de un User).
    op.create_index("ix_tasks_user_id", "tasks", ["user_id"])


def downgrade() -> None:
    """Downgrade NO soportado para la migración fundacional."""
    raise NotImplementedError(
        "Baseline: downgrade no soportado por política. "
        "Recreá la base de datos para resetear el entorno."
    )
