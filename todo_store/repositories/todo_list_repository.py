"""Todo list repository for ownership-scoped database operations.

Every read and write goes through the users_lists relation, filtered on
both the owner and the list id. A list that exists but belongs to someone
else is indistinguishable from a list that does not exist.

Each public method opens its own session_scope, so a call is one
transaction that is committed or rolled back before it returns.
"""

from typing import Any

from sqlalchemy import Select, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from todo_store.core.database import session_scope
from todo_store.models import TodoList, UsersList
from todo_store.repositories.utils import log_slow_query
from todo_store.schemas import (
    EmptyUpdateError,
    TodoListCreate,
    TodoListResponse,
    UpdateListInput,
)


class TodoListNotFoundError(Exception):
    """Raised when a list is missing or not owned by the requesting user."""

    def __init__(self, list_id: int) -> None:
        self.list_id = list_id
        super().__init__(f"Todo list {list_id} not found")


def _owned_list_ids(user_id: int, list_id: int) -> Select:
    return select(UsersList.list_id).where(
        UsersList.user_id == user_id,
        UsersList.list_id == list_id,
    )


def _build_assignments(patch: UpdateListInput) -> dict[str, Any]:
    """Collect column -> value pairs for the fields present in the patch.

    Values are bound as statement parameters by SQLAlchemy.
    """
    assignments = patch.present_fields()
    # An empty SET clause is invalid SQL
    if not assignments:
        raise EmptyUpdateError()
    return assignments


class TodoListRepository:
    """Repository for TodoList database operations."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self.session_maker = session_maker

    @log_slow_query("todo_list_create", expected=(ValueError,))
    async def create(self, user_id: int, todo_list: TodoListCreate) -> int:
        """Insert a list and its ownership link in one transaction.

        If either insert fails, both are rolled back. The id is returned
        only after the commit succeeded.
        """
        if not todo_list.title:
            raise ValueError("todo list title must not be empty")

        async with session_scope(self.session_maker) as session:
            row = TodoList(
                title=todo_list.title,
                description=todo_list.description,
                done=todo_list.done,
            )
            session.add(row)
            await session.flush()
            await self._link_owner(session, user_id, row.id)

        return row.id

    async def _link_owner(
        self, session: AsyncSession, user_id: int, list_id: int
    ) -> None:
        session.add(UsersList(user_id=user_id, list_id=list_id))
        await session.flush()

    @log_slow_query("todo_list_get_all")
    async def get_all(self, user_id: int) -> list[TodoListResponse]:
        """Get every list owned by the user. Unknown owners get an empty list."""
        stmt = (
            select(TodoList)
            .join(UsersList, TodoList.id == UsersList.list_id)
            .where(UsersList.user_id == user_id)
            .order_by(TodoList.id)
        )
        async with session_scope(self.session_maker) as session:
            result = await session.execute(stmt)
            return [
                TodoListResponse.model_validate(row) for row in result.scalars().all()
            ]

    @log_slow_query("todo_list_get_by_id", expected=(TodoListNotFoundError,))
    async def get_by_id(self, user_id: int, list_id: int) -> TodoListResponse:
        stmt = (
            select(TodoList)
            .join(UsersList, TodoList.id == UsersList.list_id)
            .where(
                UsersList.user_id == user_id,
                UsersList.list_id == list_id,
            )
        )
        async with session_scope(self.session_maker) as session:
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
            if row is None:
                raise TodoListNotFoundError(list_id)
            return TodoListResponse.model_validate(row)

    @log_slow_query("todo_list_delete")
    async def delete(self, user_id: int, list_id: int) -> None:
        """Delete a list owned by the user. Deleting nothing is not an error.

        Ownership links go with the list via ON DELETE CASCADE.
        """
        stmt = (
            delete(TodoList)
            .where(TodoList.id.in_(_owned_list_ids(user_id, list_id)))
            .execution_options(synchronize_session=False)
        )
        async with session_scope(self.session_maker) as session:
            await session.execute(stmt)

    @log_slow_query("todo_list_update", expected=(EmptyUpdateError,))
    async def update(
        self, user_id: int, list_id: int, patch: UpdateListInput
    ) -> None:
        """Apply the fields present in the patch. Absent fields are untouched.

        Updating a list the user does not own changes nothing and is not
        an error.
        """
        assignments = _build_assignments(patch)
        stmt = (
            update(TodoList)
            .where(TodoList.id.in_(_owned_list_ids(user_id, list_id)))
            .values(**assignments)
            .execution_options(synchronize_session=False)
        )
        async with session_scope(self.session_maker) as session:
            await session.execute(stmt)
