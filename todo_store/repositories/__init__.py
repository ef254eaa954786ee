"""Repository layer for database operations.

Repositories encapsulate all database queries and own the transaction for
each call. Services stay free of SQL and can mock repositories in tests.
"""

from todo_store.repositories.todo_list_repository import (
    TodoListNotFoundError,
    TodoListRepository,
)
from todo_store.repositories.utils import log_slow_query

__all__ = [
    "TodoListNotFoundError",
    "TodoListRepository",
    "log_slow_query",
]
