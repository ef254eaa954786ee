"""SQLAlchemy models for todo lists and their ownership links."""

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from todo_store.core.database import Base


class TodoList(Base):
    """A todo list. Carries no owner column; ownership lives in UsersList."""

    __tablename__ = "todo_lists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class UsersList(Base):
    """Ownership link between a user and a todo list.

    Every read and write of a TodoList is filtered through this table.
    Deleting the list cascades to its links.
    """

    __tablename__ = "users_lists"
    __table_args__ = (
        UniqueConstraint("user_id", "list_id", name="uq_users_lists_user_list"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    list_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("todo_lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
