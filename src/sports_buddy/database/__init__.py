"""
# Database Package

Persistence layer for the Sports Buddy API on top of **Motor**.

- **`manager`**: `DatabaseManager` and its `db_manager` singleton, which owns the
  one MongoDB connection per process.
"""

from sports_buddy.database.manager import DatabaseManager, db_manager

__all__ = ["DatabaseManager", "db_manager"]
