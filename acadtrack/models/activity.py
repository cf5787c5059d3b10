"""ORM model for academic activities (assignments, exams, projects)."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from acadtrack.models.base import Base


class Activity(Base):
    """
    One tracked activity owned by a user.

    title, course and date are always set; status is one of
    'Pending', 'In Progress', 'Completed'.
    """

    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    course = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)
    status = Column(String(32), nullable=False, default="Pending")
    grades = Column(String(64), nullable=False, default="")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    owner = relationship("User", back_populates="activities")
