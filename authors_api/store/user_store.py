"""Store for accounts that may log in."""

from sqlalchemy.exc import SQLAlchemyError

from authors_api.core.result import Result
from authors_api.models.user import User
from authors_api.schemas.auth import UserDraft, UserRecord
from authors_api.store.base import EntityStore


class UserStore(EntityStore[User, UserDraft, UserRecord]):
    model = User
    draft_type = UserDraft
    record_type = UserRecord
    entity_name = 'User'

    def get_by_username(self, username: str) -> Result[UserRecord]:
        db = self.session_factory()
        try:
            user = db.query(User).filter(User.username == username).first()
            if user is None:
                return Result.not_found(f'User {username!r} not found.')
            return Result.success(self._to_record(user))
        except SQLAlchemyError as exc:
            return self._store_failure('load', exc)
        finally:
            db.close()
