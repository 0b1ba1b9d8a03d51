import os

from alembic import op
import sqlalchemy as sa

revision = "20200423_add_users"
down_revision = "20200420_create_tasks"

FK_NAME = "fk_user_id"

# every task that exists before this revision is handed to this user
DEFAULT_OWNER = os.getenv("MIGRATION_DEFAULT_OWNER", "keith")


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=100), nullable=False, unique=True),
    )

    with op.batch_alter_table("tasks") as batch:
        batch.add_column(sa.Column("user_id", sa.Integer(), nullable=True))

    conn = op.get_bind()
    owner_id = conn.execute(
        sa.text("INSERT INTO users (username) VALUES (:username) RETURNING id"),
        {"username": DEFAULT_OWNER},
    ).scalar_one()
    conn.execute(sa.text("UPDATE tasks SET user_id = :owner_id"), {"owner_id": owner_id})

    with op.batch_alter_table("tasks") as batch:
        batch.create_foreign_key(FK_NAME, "users", ["user_id"], ["id"])
        batch.alter_column("user_id", existing_type=sa.Integer(), nullable=False)
        batch.create_index("ix_tasks_user_id", ["user_id"])


def downgrade():
    with op.batch_alter_table("tasks") as batch:
        batch.drop_index("ix_tasks_user_id")
        batch.drop_constraint(FK_NAME, type_="foreignkey")
        batch.drop_column("user_id")
    op.drop_table("users")
