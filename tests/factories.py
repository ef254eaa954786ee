"""Factory Boy factories for generating test data.

Usage:
    payload = TodoListCreateFactory.build()
    payload = TodoListCreateFactory.build(title="Groceries", done=True)
"""

import factory
from faker import Faker

from todo_store.schemas import TodoListCreate

fake = Faker()


class TodoListCreateFactory(factory.Factory):
    """Factory for todo list creation payloads."""

    class Meta:
        model = TodoListCreate

    title = factory.LazyFunction(lambda: fake.sentence(nb_words=3))
    description = factory.LazyFunction(lambda: fake.text(max_nb_chars=120))
    done = False
