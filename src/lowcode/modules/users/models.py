"""User database model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lowcode.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_ROLE_LENGTH
from lowcode.core.database.base import Base, IDMixin, TimestampMixin
from lowcode.core.permissions.roles import Role


class User(Base, IDMixin, TimestampMixin):
    """An account that can log in and act on models.

    Attributes:
        email: Unique, lower-cased email address
        name: Display name
        password_hash: Bcrypt-hashed password
        role: Admin, Manager or Viewer
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(MAX_ROLE_LENGTH),
        nullable=False,
        default=Role.VIEWER.value,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
