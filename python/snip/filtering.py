"""Substring filtering shared by the picker and ``SnippetStore.search``."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from .store import Snippet


def filter_indices(snippets: Sequence["Snippet"], query: str) -> List[int]:
    """Return the indices of *snippets* whose command contains *query*.

    Matching is a case-insensitive substring test and the input order is
    preserved.  An empty query matches every snippet.
    """
    needle = query.lower()
    if not needle:
        return list(range(len(snippets)))
    return [idx for idx, snippet in enumerate(snippets) if needle in snippet.command.lower()]


def filter_snippets(snippets: Sequence["Snippet"], query: str) -> List["Snippet"]:
    return [snippets[idx] for idx in filter_indices(snippets, query)]


__all__ = ["filter_indices", "filter_snippets"]
