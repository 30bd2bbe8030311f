"""Employee ORM model (back-office accounts)."""

from sqlalchemy import JSON, Boolean, String, text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.infrastructure.persistence.database import Base
from backoffice.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Employee(CuidMixin, TimestampMixin, Base):
    """Employee model. Table: employee. Email is unique and stored lowercased."""

    __tablename__ = "employee"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    firstname: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    lastname: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    # Back-office tab opened after login (e.g. "orders"); None = configured default.
    default_tab: Mapped[str | None] = mapped_column(String(128), nullable=True)
