from sqlalchemy import (
    Column, String, Integer, Text, Boolean, DateTime, ForeignKey,
    UniqueConstraint, Index, func
)
from sqlalchemy.orm import relationship
from faculty_sync.db.base import Base


class Faculty(Base):
    __tablename__ = "faculty"
    __table_args__ = (
        UniqueConstraint("email", name="ux_faculty_email"),
        Index("ix_faculty_name", "last_name", "first_name"),
        Index("ix_faculty_department", "department_id"),
    )

    faculty_id = Column(Integer, primary_key=True, autoincrement=True)
    department_id = Column(
        Integer,
        ForeignKey("departments.department_id", ondelete="SET NULL"),
    )

    # identity / main fields
    first_name = Column(String(255))
    last_name = Column(String(255))
    title = Column(String(255))
    email = Column(String(255))
    profile_url = Column(String(1024))

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    department = relationship("Department", back_populates="faculty")

    research_interests = relationship(
        "FacultyResearchInterest",
        back_populates="faculty",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    publications = relationship(
        "FacultyPublication",
        back_populates="faculty",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class FacultyResearchInterest(Base):
    __tablename__ = "faculty_research_interests"
    __table_args__ = (
        UniqueConstraint("faculty_id", "name", name="ux_faculty_research_interest_name"),
        Index("ix_faculty_research_interest_faculty", "faculty_id"),
        Index("ix_faculty_research_interest_name", "name"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    faculty_id = Column(Integer, ForeignKey("faculty.faculty_id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)

    faculty = relationship("Faculty", back_populates="research_interests")


class FacultyPublication(Base):
    __tablename__ = "faculty_publications"
    __table_args__ = (
        Index("ix_faculty_publication_faculty", "faculty_id"),
        Index("ix_faculty_publication_year", "year"),
    )

    publication_id = Column(Integer, primary_key=True, autoincrement=True)

    faculty_id = Column(
        Integer,
        ForeignKey("faculty.faculty_id", ondelete="CASCADE"),
        nullable=False,
    )

    title = Column(Text, nullable=False)
    venue = Column(Text)
    year = Column(Integer)
    doi = Column(String(255))
    url = Column(String(1024))
    is_primary_author = Column(Boolean, default=False)

    faculty = relationship("Faculty", back_populates="publications")
