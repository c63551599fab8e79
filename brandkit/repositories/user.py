"""UserRepository: accounts and login sessions."""

from datetime import datetime

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.logging import db_logger, get_logger
from brandkit.models.user import User, UserSession

logger = get_logger(__name__)


class UserRepository:
    """Repository for User and UserSession rows."""

    TABLE_NAME = "users"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self.session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.session.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def find_conflicts(self, username: str, email: str) -> list[User]:
        """Users already holding ``username`` or ``email``."""
        result = await self.session.execute(
            select(User).where(or_(User.username == username, User.email == email))
        )
        return list(result.scalars().all())

    async def create(self, username: str, password_hash: str, email: str, name: str) -> User:
        user = User(username=username, password=password_hash, email=email, name=name)
        self.session.add(user)
        try:
            await self.session.flush()
            await self.session.refresh(user)
        except SQLAlchemyError as e:
            db_logger.transaction_failure(
                e, table=self.TABLE_NAME, context=f"Registering username={username}"
            )
            raise
        logger.info("User registered", extra={"user_id": user.id})
        return user

    # Sessions

    async def create_session(
        self, session_id: str, user_id: int, expires_at: datetime
    ) -> UserSession:
        row = UserSession(id=session_id, user_id=user_id, expires_at=expires_at)
        self.session.add(row)
        await self.session.flush()
        return row

    async def get_session_with_user(
        self, session_id: str
    ) -> tuple[UserSession, User] | None:
        result = await self.session.execute(
            select(UserSession, User)
            .join(User, UserSession.user_id == User.id)
            .where(UserSession.id == session_id)
        )
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]

    async def delete_session(self, session_id: str) -> None:
        await self.session.execute(delete(UserSession).where(UserSession.id == session_id))
        await self.session.flush()
