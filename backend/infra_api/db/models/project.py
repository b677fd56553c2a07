from decimal import Decimal
from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infra_api.db.base import Base
from infra_api.db.models._mixins import TimestampMixin

class Project(Base, TimestampMixin):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    budget: Mapped[Decimal] = mapped_column(Numeric(15, 2))
    status: Mapped[str] = mapped_column(String(32))  # planning|in-progress|completed|on-hold
    province: Mapped[str] = mapped_column(String(100), index=True)
    city: Mapped[str] = mapped_column(String(255))
    latitude: Mapped[Decimal] = mapped_column(Numeric())
    longitude: Mapped[Decimal] = mapped_column(Numeric())

    assignments = relationship("Assignment", back_populates="project", passive_deletes=True)
