import os
import click
from flask import current_app
from flask.cli import with_appcontext
from flask_migrate import upgrade as alembic_upgrade, stamp as alembic_stamp, migrate as alembic_migrate

from models.category import Category
from models.item import Item
from models.store import Store
from app.schemas.catalog import CreateCategoryRequest, CreateStoreRequest, CreateItemRequest
from app.services import catalog
from app.utils import transactional


def _assert_safe_for_upgrade():
    # Prevent accidental prod upgrades unless explicitly allowed
    env = (current_app.config.get("ENV") or "").lower()
    app_env = (os.getenv("APP_ENV") or "").lower()
    if app_env == "production" or env == "production":
        if (os.getenv("ALLOW_DB_MIGRATIONS") or "").lower() not in ("1", "true", "yes"):
            raise click.ClickException("Refusing to run DB migration in production without ALLOW_DB_MIGRATIONS=true")


@click.command("db-migrate-safe")
@click.option("-m", "--message", default="auto migration", help="Migration message")
@with_appcontext
def db_migrate_safe(message):
    """Generate a new migration script from current models."""
    alembic_migrate(message=message)
    click.echo("Migration script generated.")


@click.command("db-upgrade-safe")
@with_appcontext
def db_upgrade_safe():
    """Apply migrations to the configured database."""
    _assert_safe_for_upgrade()
    alembic_upgrade()
    click.echo("Database upgraded.")


@click.command("db-stamp-safe")
@click.option("--revision", default="head", help="Revision to stamp, default 'head'")
@with_appcontext
def db_stamp_safe(revision):
    """Mark the database at a given revision without running migrations."""
    _assert_safe_for_upgrade()
    alembic_stamp(revision)
    click.echo(f"Database stamped at {revision}.")


DEMO_CATALOG = {
    "category": {"name": "Electronics", "description": "Gadgets and accessories"},
    "store": {"name": "TechCo", "description": "Demo vendor", "owner_email": "owner@techco.example"},
    "items": [
        {
            "name": "Widget",
            "description": "A very useful widget.",
            "price": "29.99",
            "stock_quantity": 10,
            "images": ["https://images.example.com/widget.png"],
        },
        {
            "name": "Gizmo",
            "description": None,
            "price": "49.50",
            "stock_quantity": 0,
            "images": [],
        },
    ],
}


@click.command("seed-demo")
@with_appcontext
def seed_demo():
    """Insert the demo catalog; rows that already exist by name are left alone."""
    created = {"categories": 0, "stores": 0, "items": 0}
    with transactional("Demo seed failed"):
        category = Category.query.filter_by(name=DEMO_CATALOG["category"]["name"]).first()
        if category is None:
            category = catalog.create_category(CreateCategoryRequest(**DEMO_CATALOG["category"]))
            created["categories"] += 1
        store = Store.query.filter_by(name=DEMO_CATALOG["store"]["name"]).first()
        if store is None:
            store = catalog.create_store(CreateStoreRequest(**DEMO_CATALOG["store"]))
            created["stores"] += 1
        for row in DEMO_CATALOG["items"]:
            if Item.query.filter_by(name=row["name"], store_id=store.id).first():
                continue
            catalog.create_item(CreateItemRequest(category_id=category.id, store_id=store.id, **row))
            created["items"] += 1
    click.echo(
        f"Seeded {created['categories']} categories, {created['stores']} stores, {created['items']} items."
    )


def register_cli(app):
    app.cli.add_command(db_migrate_safe)
    app.cli.add_command(db_upgrade_safe)
    app.cli.add_command(db_stamp_safe)
    app.cli.add_command(seed_demo)
