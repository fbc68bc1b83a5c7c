from database.goal_tracker.core.connection import engine
from database.goal_tracker.models import Base


def create_db_tables():
    Base.metadata.create_all(bind=engine)
    print("Database tables created successfully.")


if __name__ == "__main__":
    create_db_tables()
