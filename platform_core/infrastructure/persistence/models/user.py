"""User ORM model."""

from datetime import date

from sqlalchemy import Boolean, Date, Enum, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from platform_core.domain.enums import UserGender, UserLanguage
from platform_core.infrastructure.persistence.database import Base
from platform_core.infrastructure.persistence.models.mixins import IdentifiedModel


class User(IdentifiedModel, Base):
    """User model. Table: app_user. Unique username and activation hash_key."""

    __tablename__ = "app_user"

    username: Mapped[str] = mapped_column(String(255), nullable=False)
    screen_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    middle_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    selected_language: Mapped[UserLanguage] = mapped_column(
        Enum(UserLanguage, name="user_language", native_enum=False),
        nullable=False,
        default=UserLanguage.ENGLISH,
    )
    gender: Mapped[UserGender | None] = mapped_column(
        Enum(UserGender, name="user_gender", native_enum=False), nullable=True
    )
    birthday: Mapped[date | None] = mapped_column(Date, nullable=True)
    registration_ip: Mapped[str | None] = mapped_column(String(45), nullable=True)
    hash_key: Mapped[str | None] = mapped_column(String(128), nullable=True)
    hashed_password: Mapped[str | None] = mapped_column(String, nullable=True)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )

    __table_args__ = (
        UniqueConstraint("username", name="uq_user_username"),
        UniqueConstraint("hash_key", name="uq_user_hash_key"),
    )
