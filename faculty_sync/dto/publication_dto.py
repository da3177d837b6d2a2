from __future__ import annotations

from typing import Optional, Any
from pydantic import BaseModel, ConfigDict


class PublicationDTO(BaseModel):
    """
    Publication as embedded in a faculty document (and in a relational record).

    Values are not typed or coerced: a year of "2023 (in press)" stays a
    string. Keys beyond the known ones are kept and dumped back out.
    """
    model_config = ConfigDict(extra="allow")

    title: Optional[Any] = None
    venue: Optional[Any] = None
    year: Optional[Any] = None
    doi: Optional[Any] = None
    url: Optional[Any] = None
    authors: Optional[Any] = None
    is_primary_author: Optional[Any] = None


class PublicationRowDTO(BaseModel):
    """Row of the faculty_publications table. Authors have no column here."""
    model_config = ConfigDict(extra="ignore")

    title: Optional[Any] = None
    venue: Optional[Any] = None
    year: Optional[Any] = None
    doi: Optional[Any] = None
    url: Optional[Any] = None
    is_primary_author: Optional[Any] = None
