"""Todo list service.

Validates update patches before they reach storage; every other operation
passes straight through to TodoListRepository.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from todo_store.core import get_logger
from todo_store.repositories.todo_list_repository import TodoListRepository
from todo_store.schemas import TodoListCreate, TodoListResponse, UpdateListInput

logger = get_logger(__name__)


async def create_list(
    session_maker: async_sessionmaker[AsyncSession],
    user_id: int,
    todo_list: TodoListCreate,
) -> int:
    """Create a list owned by user_id and return its generated id."""
    list_id = await TodoListRepository(session_maker).create(user_id, todo_list)
    logger.info("todo_list.created", user_id=user_id, list_id=list_id)
    return list_id


async def get_all_lists(
    session_maker: async_sessionmaker[AsyncSession], user_id: int
) -> list[TodoListResponse]:
    return await TodoListRepository(session_maker).get_all(user_id)


async def get_list_by_id(
    session_maker: async_sessionmaker[AsyncSession], user_id: int, list_id: int
) -> TodoListResponse:
    """Raises TodoListNotFoundError if the list is missing or not owned."""
    return await TodoListRepository(session_maker).get_by_id(user_id, list_id)


async def delete_list(
    session_maker: async_sessionmaker[AsyncSession], user_id: int, list_id: int
) -> None:
    await TodoListRepository(session_maker).delete(user_id, list_id)


async def update_list(
    session_maker: async_sessionmaker[AsyncSession],
    user_id: int,
    list_id: int,
    patch: UpdateListInput,
) -> None:
    """Apply a partial update to a list owned by user_id.

    Raises:
        EmptyUpdateError: If the patch has no fields. Storage is not touched.
    """
    patch.validate_not_empty()
    await TodoListRepository(session_maker).update(user_id, list_id, patch)
