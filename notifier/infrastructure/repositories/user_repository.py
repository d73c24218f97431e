"""Persistence layer for user directory data."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from notifier.domain.entities import Role, User
from notifier.infrastructure.models import RoleModel, UserModel


class UserRepository:
    """Provide lookups over users and their roles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            email=user.email,
            phone=user.phone,
            full_name=user.full_name,
            is_active=user.is_active,
        )
        if user.id:
            model.id = user.id
        if user.roles:
            role_ids = [role.id for role in user.roles]
            model.roles = (
                self.session.query(RoleModel).filter(RoleModel.id.in_(role_ids)).all()
            )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_active_ids_by_role_name(self, role_name: str) -> list[str]:
        query = (
            self.session.query(UserModel.id)
            .join(UserModel.roles)
            .filter(UserModel.is_active.is_(True))
            .filter(func.lower(RoleModel.name) == role_name.lower())
        )
        return [user_id for (user_id,) in query.distinct().all()]

    def get_map_by_ids(self, user_ids: Iterable[str]) -> dict[str, User]:
        """Return users keyed by id, inactive accounts included."""

        unique_ids = {str(user_id) for user_id in user_ids if user_id}
        if not unique_ids:
            return {}
        query = self.session.query(UserModel).filter(UserModel.id.in_(unique_ids))
        return {model.id: self._to_entity(model) for model in query.all()}

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            phone=model.phone,
            full_name=model.full_name,
            is_active=bool(model.is_active),
            roles=[Role(id=role.id, name=role.name) for role in model.roles],
        )


class RoleRepository:
    """Provide access to role records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Role]:
        query = self.session.query(RoleModel).order_by(RoleModel.name.asc())
        return [Role(id=model.id, name=model.name) for model in query.all()]

    def get_or_create(self, name: str) -> Role:
        model = (
            self.session.query(RoleModel)
            .filter(func.lower(RoleModel.name) == name.lower())
            .first()
        )
        if model is None:
            model = RoleModel(name=name)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return Role(id=model.id, name=model.name)


__all__ = ["RoleRepository", "UserRepository"]
