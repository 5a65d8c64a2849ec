"""Horse model."""

import enum
from datetime import date

from sqlalchemy import Date, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import TimestampMixin


class Sex(str, enum.Enum):
    """Sex of a horse."""

    MALE = "MALE"
    FEMALE = "FEMALE"


class Horse(Base, TimestampMixin):
    """Horse table model.

    Parent references are plain foreign keys; that a mother is female and a
    father is male is checked by HorseValidator before every write.
    """

    __tablename__ = "horses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(4095), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    sex: Mapped[Sex] = mapped_column(Enum(Sex, native_enum=False, length=6), nullable=False)
    owner_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("owners.id"), nullable=True)
    image_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("images.id"), nullable=True)
    mother_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("horses.id", ondelete="SET NULL"), nullable=True
    )
    father_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("horses.id", ondelete="SET NULL"), nullable=True
    )

    def __repr__(self) -> str:
        return f"<Horse(id={self.id}, name='{self.name}', sex={self.sex.value if self.sex else None})>"
