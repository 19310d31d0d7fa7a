"""
Database initialization script.
"""
from moodjourney.db.session import init_db

# Import all models so SQLAlchemy can register them
from moodjourney.models import User, MoodEntry  # noqa: F401

if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")
