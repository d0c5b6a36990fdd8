"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from hooklink.adapters.sqlalchemy.mappings import (
    comment_table,
    github_repo_table,
    task_table,
    user_table,
)
from hooklink.domain.errors import DuplicateUserError
from hooklink.domain.model import Comment, GithubRepo, Task, User

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyUserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: User) -> None:
        # The savepoint keeps the surrounding transaction usable when the insert
        # loses a race against a concurrent delivery for the same GitHub account.
        try:
            with self.session.begin_nested():
                self.session.add(entity)
        except IntegrityError as exc:
            if entity.github_id is None or self.get_by_github_id(entity.github_id) is None:
                raise
            raise DuplicateUserError(
                f"A user with GitHub id {entity.github_id} already exists"
            ) from exc

    def get_by_github_id(self, github_id: int) -> User | None:
        stmt = select(User).where(user_table.c.github_id == github_id)
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyGithubRepoRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: GithubRepo) -> None:
        self.session.add(entity)

    def get_by_github_id(self, github_id: int) -> GithubRepo | None:
        stmt = select(GithubRepo).where(github_repo_table.c.github_id == github_id)
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyTaskRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Task) -> None:
        self.session.add(entity)

    def find_users_by_issue(self, issue_number: int, repo_github_id: int) -> list[User]:
        stmt = (
            select(User)
            .join(task_table, task_table.c.user_id == user_table.c.id)
            .join(github_repo_table, github_repo_table.c.id == task_table.c.github_repo_id)
            .where(task_table.c.github_issue_number == issue_number)
            .where(github_repo_table.c.github_id == repo_github_id)
            .distinct()
        )
        return list(self.session.scalars(stmt))


class SqlAlchemyCommentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Comment) -> None:
        self.session.add(entity)

    def find_users_by_github_id(self, github_id: int) -> list[User]:
        stmt = (
            select(User)
            .join(comment_table, comment_table.c.user_id == user_table.c.id)
            .where(comment_table.c.github_id == github_id)
            .distinct()
        )
        return list(self.session.scalars(stmt))


if TYPE_CHECKING:
    from hooklink.domain.ports.persistence import (
        CommentRepository,
        GithubRepoRepository,
        TaskRepository,
        UserRepository,
    )

    def _check_ports(session: Session) -> None:
        _users: UserRepository = SqlAlchemyUserRepository(session)
        _repos: GithubRepoRepository = SqlAlchemyGithubRepoRepository(session)
        _tasks: TaskRepository = SqlAlchemyTaskRepository(session)
        _comments: CommentRepository = SqlAlchemyCommentRepository(session)
