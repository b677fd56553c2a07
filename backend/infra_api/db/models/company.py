from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infra_api.db.base import Base

class Company(Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    province: Mapped[str] = mapped_column(String(100))
    city: Mapped[str] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    number: Mapped[str | None] = mapped_column(String(100), nullable=True)

    assignments = relationship("Assignment", back_populates="company", passive_deletes=True)
