from __future__ import annotations

from typing import Any, List, Optional

from faculty_sync.dto.publication_dto import PublicationDTO


def list_or_empty(xs: Optional[List[Any]]) -> List[Any]:
    """Shallow copy of xs, or [] when xs is None."""
    if xs is None:
        return []
    return list(xs)


def normalize_research_interests(xs: Optional[List[Any]]) -> List[Any]:
    return list_or_empty(xs)


def normalize_publications(xs: Optional[List[PublicationDTO]]) -> List[PublicationDTO]:
    # deep copies so the output never shares models with the input
    return [p.model_copy(deep=True) for p in list_or_empty(xs)]
