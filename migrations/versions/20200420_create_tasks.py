from alembic import op
import sqlalchemy as sa

revision = "20200420_create_tasks"
down_revision = None


def upgrade():
    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(), nullable=True),
        sa.Column("contact", sa.String(), nullable=True),
        sa.Column("status", sa.String(), nullable=True),
        sa.Column("due", sa.Date(), nullable=True),
    )


def downgrade():
    op.drop_table("tasks")
