"""Unit tests for search string parsing and filtering."""

from overflow.domain.service import filter_questions, parse_search
from tests.conftest import days_ago, make_question, make_tag


class TestParseSearch:
    """Tests for parse_search."""

    def test_splits_tags_and_keywords(self):
        """Bracketed tokens become tags, the rest become keywords."""
        # Act
        result = parse_search("closure [javascript] scope [react]")

        # Assert
        assert result.tags == frozenset({"javascript", "react"})
        assert result.keywords == ("closure", "scope")

    def test_punctuation_is_not_part_of_keywords(self):
        """Keywords are runs of word characters only."""
        # Act
        result = parse_search("what's up_date?")

        # Assert
        assert result.keywords == ("what", "s", "up_date")
        assert result.tags == frozenset()

    def test_blank_search_is_empty(self):
        """Whitespace alone yields no filters."""
        assert parse_search("   ").is_empty


class TestFilterQuestions:
    """Tests for filter_questions."""

    def test_empty_search_returns_input_unchanged(self):
        """No search string means no filtering."""
        # Arrange
        questions = [make_question(title="A"), make_question(title="B")]

        # Act
        result = filter_questions(questions, "")

        # Assert
        assert result is questions

    def test_tag_only_search_keeps_tagged_questions_in_order(self):
        """Only questions carrying the tag survive, order preserved."""
        # Arrange
        js = make_tag("javascript")
        first = make_question(title="First", tags=[js], asked_at=days_ago(1))
        other = make_question(title="Other", tags=[make_tag("python")])
        second = make_question(title="Second", tags=[js], asked_at=days_ago(3))
        questions = [first, other, second]

        # Act
        result = filter_questions(questions, "[javascript]")

        # Assert
        assert [q.id for q in result] == [first.id, second.id]

    def test_keyword_matches_title_or_text_as_substring(self):
        """A keyword matches anywhere inside the title or the body."""
        # Arrange
        in_title = make_question(title="Promises explained", text="body")
        in_text = make_question(title="Async", text="about Promises chaining")
        neither = make_question(title="CSS grid", text="layout")

        # Act
        result = filter_questions([in_title, in_text, neither], "Promise")

        # Assert
        assert [q.id for q in result] == [in_title.id, in_text.id]

    def test_keyword_matching_is_case_sensitive(self):
        """Lowercase keyword does not match a capitalised word."""
        # Arrange
        question = make_question(title="Promises explained", text="body")

        # Act
        result = filter_questions([question], "promises")

        # Assert
        assert result == []

    def test_tags_and_keywords_combine_with_or(self):
        """A question passes on either a tag hit or a keyword hit."""
        # Arrange
        tagged = make_question(title="Unrelated", tags=[make_tag("react")])
        keyword = make_question(title="hooks in depth")
        neither = make_question(title="Nothing here")

        # Act
        result = filter_questions([tagged, keyword, neither], "hooks [react]")

        # Assert
        assert [q.id for q in result] == [tagged.id, keyword.id]

    def test_tag_match_is_exact(self):
        """Tag filters do not match on prefixes or case variants."""
        # Arrange
        question = make_question(title="Q", tags=[make_tag("JavaScript")])

        # Act
        result = filter_questions([question], "[javascript] [Java]")

        # Assert
        assert result == []

    def test_search_with_only_punctuation_matches_everything(self):
        """A non-empty search without filters keeps every question."""
        # Arrange
        questions = [make_question(title="A"), make_question(title="B")]

        # Act
        result = filter_questions(questions, "?!")

        # Assert
        assert result == questions
