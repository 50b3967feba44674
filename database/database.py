"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and an `init_db` helper that creates
tables and, on an empty database, seeds the ingredient catalog and a few
sample recipes.
"""

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .models import Base, Ingredient, Recipe, RecipeIngredient
from data.ingredients_dataset import INGREDIENTS_DATA, RECIPES_DATA
from core.logger import get_logger

logger = get_logger("database.database")

# Read/Write partitioning pattern
# Set WRITE_DATABASE_URL and READ_DATABASE_URL to different instances to route
# reads to a replica. For SQLite both default to the same file.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///diet.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)
SEED_DATABASE = os.getenv("SEED_DATABASE", "true").strip().lower() in ("1", "true", "yes")


def _connect_args(url: str) -> dict:
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


# Engines
write_engine = create_engine(WRITE_DATABASE_URL, connect_args=_connect_args(WRITE_DATABASE_URL))
read_engine = create_engine(READ_DATABASE_URL, connect_args=_connect_args(READ_DATABASE_URL))

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def seed_database(session) -> None:
    """Insert the built-in catalog and sample recipes into empty tables."""
    if session.query(Ingredient).count() == 0:
        session.add_all(Ingredient(**item) for item in INGREDIENTS_DATA)
        session.flush()
        logger.info("Seeded %s catalog ingredients", len(INGREDIENTS_DATA))

    if session.query(Recipe).count() == 0:
        catalog = {i.name: i for i in session.query(Ingredient).all()}
        for item in RECIPES_DATA:
            recipe = Recipe(
                name=item["name"],
                duration=item["duration"],
                description=item["description"],
                tags=item["tags"],
                deleted=False,
            )
            for position, (name, amount) in enumerate(item["ingredients"]):
                recipe.ingredients.append(
                    RecipeIngredient(ingredient_id=catalog[name].id, position=position, amount=amount)
                )
            session.add(recipe)
        logger.info("Seeded %s sample recipes", len(RECIPES_DATA))
    session.commit()


def init_db(engine=None, session_factory=None, seed: bool = SEED_DATABASE):
    """Initialize database schema and optionally seed sample data.

    Args:
        engine: Engine to create tables on; defaults to the write engine.
        session_factory: Session factory used for seeding; defaults to
            `WriteSessionLocal`.
        seed: Whether to seed empty tables.
    """
    Base.metadata.create_all(bind=engine or write_engine)
    if not seed:
        return
    session = (session_factory or WriteSessionLocal)()
    try:
        seed_database(session)
    finally:
        session.close()


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope."""
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
