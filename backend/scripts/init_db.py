"""Create (or recreate with --drop) all scheduler database tables."""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import engine, Base
import app.models  # noqa: F401 - registers all models


def init_db(drop: bool = False):
    if drop:
        print(f"Dropping all tables on {engine.url.render_as_string(hide_password=True)}...")
        Base.metadata.drop_all(bind=engine)
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)
    print(f"Database initialized: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args()
    init_db(drop=args.drop)
