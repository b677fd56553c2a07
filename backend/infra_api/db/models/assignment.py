from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infra_api.db.base import Base
from infra_api.db.models._mixins import CreatedAtMixin

class Assignment(Base, CreatedAtMixin):
    __tablename__ = "assignments"
    __table_args__ = (UniqueConstraint("project_id", "company_id", name="unique_project_company"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE", onupdate="CASCADE"), index=True
    )
    company_id: Mapped[int] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE", onupdate="CASCADE"), index=True
    )

    project = relationship("Project", back_populates="assignments")
    company = relationship("Company", back_populates="assignments")
