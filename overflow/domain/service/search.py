"""Search string parsing for question listings.

A search string mixes free-text keywords with bracketed tag filters, for
example ``"closure [javascript] [react]"``. A question matches when any
keyword appears in its title or text, or when any bracketed tag is one of
its tags. A search with neither keywords nor tags matches everything.
"""

import re
from dataclasses import dataclass, field

from overflow.domain.model.question import Question

_TAG_PATTERN = re.compile(r"\[([^\]]+)\]")
_KEYWORD_PATTERN = re.compile(r"\b\w+\b", re.ASCII)


@dataclass(frozen=True)
class SearchFilter:
    """Parsed search: keyword filters plus tag filters, combined with OR."""

    keywords: tuple[str, ...] = ()
    tags: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to filter on."""
        return not self.keywords and not self.tags

    def matches(self, question: Question) -> bool:
        """Check whether a question passes the filter.

        Keyword matching is a case-sensitive substring test against title
        and text. Tag matching is exact.
        """
        if self.is_empty:
            return True
        if any(
            keyword in question.title or keyword in question.text
            for keyword in self.keywords
        ):
            return True
        return any(name in self.tags for name in question.tag_names)


def parse_search(search: str) -> SearchFilter:
    """Split a search string into keyword and tag filters.

    Args:
        search: Raw search string from the client

    Returns:
        Parsed filter
    """
    tags = frozenset(match.group(1) for match in _TAG_PATTERN.finditer(search))
    remainder = _TAG_PATTERN.sub(" ", search)
    keywords = tuple(_KEYWORD_PATTERN.findall(remainder))
    return SearchFilter(keywords=keywords, tags=tags)


def filter_questions(questions: list[Question], search: str) -> list[Question]:
    """Apply a search string to an already ordered question list.

    Relative order is preserved. An empty search string returns the input
    unchanged.
    """
    if not search:
        return questions
    search_filter = parse_search(search)
    return [question for question in questions if search_filter.matches(question)]
