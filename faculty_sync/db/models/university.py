from sqlalchemy import (
    Column, String, Integer, DateTime, ForeignKey,
    UniqueConstraint, Index, func
)
from sqlalchemy.orm import relationship
from faculty_sync.db.base import Base


class University(Base):
    __tablename__ = "universities"
    __table_args__ = (
        UniqueConstraint("name", name="ux_universities_name"),
    )

    university_id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(255), nullable=False)
    location = Column(String(255))
    website = Column(String(1024))

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    departments = relationship(
        "Department",
        back_populates="university",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Department(Base):
    __tablename__ = "departments"
    __table_args__ = (
        UniqueConstraint("university_id", "name", name="ux_departments_university_name"),
        Index("ix_departments_university", "university_id"),
        Index("ix_departments_name", "name"),
    )

    department_id = Column(Integer, primary_key=True, autoincrement=True)
    university_id = Column(
        Integer,
        ForeignKey("universities.university_id", ondelete="CASCADE"),
        nullable=False,
    )

    name = Column(String(255), nullable=False)
    website = Column(String(1024))

    university = relationship("University", back_populates="departments")
    faculty = relationship(
        "Faculty",
        back_populates="department",
        passive_deletes=True,
    )
