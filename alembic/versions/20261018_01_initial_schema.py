"""Initial rateboard schema."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261018_01"
down_revision = None
branch_labels = None
depends_on = None


def _created_date() -> sa.Column:
    return sa.Column(
        "created_date",
        sa.DateTime(),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    )


def upgrade() -> None:
    op.create_table(
        "gold_rates",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("gold_24k_sale", sa.Float(), nullable=False),
        sa.Column("gold_24k_purchase", sa.Float(), nullable=False),
        sa.Column("gold_22k_sale", sa.Float(), nullable=False),
        sa.Column("gold_22k_purchase", sa.Float(), nullable=False),
        sa.Column("gold_18k_sale", sa.Float(), nullable=False),
        sa.Column("gold_18k_purchase", sa.Float(), nullable=False),
        sa.Column("silver_per_kg_sale", sa.Float(), nullable=False),
        sa.Column("silver_per_kg_purchase", sa.Float(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("TRUE")),
        _created_date(),
    )
    op.create_index("ix_gold_rates_is_active", "gold_rates", ["is_active"])

    op.create_table(
        "display_settings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("orientation", sa.String(length=16), nullable=False, server_default="horizontal"),
        sa.Column("background_color", sa.String(length=32), nullable=False, server_default="#FFF8E1"),
        sa.Column("text_color", sa.String(length=32), nullable=False, server_default="#212529"),
        sa.Column(
            "rate_number_font_size", sa.String(length=32), nullable=False, server_default="text-4xl"
        ),
        sa.Column("show_media", sa.Boolean(), nullable=False, server_default=sa.text("TRUE")),
        sa.Column(
            "rates_display_duration_seconds", sa.Integer(), nullable=False, server_default="15"
        ),
        sa.Column("refresh_interval", sa.Integer(), nullable=False, server_default="30"),
        _created_date(),
    )

    op.create_table(
        "media_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("file_url", sa.String(length=1024)),
        sa.Column("file_data", sa.Text()),
        sa.Column("media_type", sa.String(length=16), nullable=False),
        sa.Column("duration_seconds", sa.Integer(), nullable=False, server_default="30"),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("TRUE")),
        sa.Column("file_size", sa.Integer()),
        sa.Column("mime_type", sa.String(length=128)),
        _created_date(),
    )
    op.create_index("ix_media_items_is_active", "media_items", ["is_active"])

    op.create_table(
        "promo_images",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("image_url", sa.String(length=1024)),
        sa.Column("image_data", sa.Text()),
        sa.Column("duration_seconds", sa.Integer(), nullable=False, server_default="5"),
        sa.Column("transition_effect", sa.String(length=32), nullable=False, server_default="fade"),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("TRUE")),
        sa.Column("file_size", sa.Integer()),
        sa.Column("mime_type", sa.String(length=128)),
        _created_date(),
    )
    op.create_index("ix_promo_images_is_active", "promo_images", ["is_active"])

    op.create_table(
        "banner_settings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("banner_image_url", sa.String(length=1024)),
        sa.Column("banner_image_data", sa.Text()),
        sa.Column("banner_height", sa.Integer(), nullable=False, server_default="120"),
        sa.Column("mime_type", sa.String(length=128)),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("TRUE")),
        _created_date(),
    )


def downgrade() -> None:
    op.drop_table("banner_settings")
    op.drop_index("ix_promo_images_is_active", table_name="promo_images")
    op.drop_table("promo_images")
    op.drop_index("ix_media_items_is_active", table_name="media_items")
    op.drop_table("media_items")
    op.drop_table("display_settings")
    op.drop_index("ix_gold_rates_is_active", table_name="gold_rates")
    op.drop_table("gold_rates")
