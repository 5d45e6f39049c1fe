"""User profile store."""

import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from journalup.core.errors import ConflictError, NotFoundError
from journalup.models import UserInfo


class UserInfoRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, user_id: uuid.UUID, **fields: Any) -> UserInfo:
        info = UserInfo(user_id=user_id, **fields)
        self.db.add(info)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("User info already exists") from e
        self.db.refresh(info)
        return info

    def find_by_user_id(self, user_id: uuid.UUID) -> UserInfo:
        info = self.db.query(UserInfo).filter(UserInfo.user_id == user_id).first()
        if info is None:
            raise NotFoundError("User info")
        return info

    def update(self, user_id: uuid.UUID, **fields: Any) -> UserInfo:
        info = self.find_by_user_id(user_id)
        for name, value in fields.items():
            setattr(info, name, value)
        self.db.commit()
        self.db.refresh(info)
        return info

    def delete(self, user_id: uuid.UUID) -> None:
        info = self.find_by_user_id(user_id)
        self.db.delete(info)
        self.db.commit()
