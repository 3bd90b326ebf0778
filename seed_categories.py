"""
Create the database tables and insert the default category taxonomy.

    python seed_categories.py
"""

from app import create_app
from extensions import db
from services.category_seed import seed_default_categories


def run_seed():
    app = create_app()
    with app.app_context():
        db.create_all()
        created = seed_default_categories()
        print(f"Inserted {created} category rows")


if __name__ == "__main__":
    run_seed()
