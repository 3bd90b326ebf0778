"""
Default category taxonomy

Used by the development seed route and the ``seed_categories.py`` script.
"""

from flask import current_app

# These will be set by init_category_seed()
db = None
MainCategory = None
Subcategory = None

DEFAULT_CATEGORIES = {
    "Harassment": ["Verbal", "Online", "Workplace", "Sexual"],
    "Theft": ["Burglary", "Pickpocketing", "Vehicle theft"],
    "Vandalism": ["Graffiti", "Property damage"],
    "Assault": ["Physical", "Threats"],
    "Fraud": ["Online scam", "Identity theft", "Financial"],
    "Other": ["Unspecified"],
}


def seed_default_categories(categories=None) -> int:
    """Insert missing main categories and subcategories; returns the number of new rows"""
    categories = categories or DEFAULT_CATEGORIES
    created = 0

    for main_name, sub_names in categories.items():
        main = MainCategory.query.filter_by(name=main_name).first()
        if main is None:
            main = MainCategory(name=main_name)
            db.session.add(main)
            db.session.flush()
            created += 1

        existing = {sub.name for sub in main.subcategories}
        for sub_name in sub_names:
            if sub_name not in existing:
                db.session.add(Subcategory(main_category_id=main.id, name=sub_name))
                created += 1

    db.session.commit()
    current_app.logger.info(f"Seeded {created} category rows")
    return created


def init_category_seed(database_instance, models):
    """Initialize the category seed helpers with required dependencies"""
    global db, MainCategory, Subcategory

    db = database_instance
    MainCategory = models['MainCategory']
    Subcategory = models['Subcategory']
