"""Tests for MessageComposer."""

import pytest
from dataclasses import replace
from datetime import datetime, timezone

from cardrelay.domain.models import Label, SectionKind
from cardrelay.services.message_composer import (
    LINK_NOT_FOUND,
    VIEW_ON_SOURCE,
    MessageComposer,
)


@pytest.fixture
def composer() -> MessageComposer:
    return MessageComposer()


class TestCompose:
    """Tests for MessageComposer.compose."""

    def test_full_card(self, composer, sample_card):
        """Should render every section in order."""
        payload = composer.compose(sample_card, "Reminder", "Team Chat")

        assert payload.card_id == "card-5"
        assert payload.header.text == "📌 Session 5"
        assert payload.header.subtitle == "Sent to Team Chat"
        assert payload.kinds == [
            SectionKind.HEADER,
            SectionKind.CAPTION,
            SectionKind.LINK,
            SectionKind.METADATA,
            SectionKind.ACTION,
        ]

        caption, link, metadata, action = payload.sections
        assert caption.text == "🏷️ Reminder"
        assert link.text == (
            '• <b>Link Presensi Online:</b> <a href="https://meet.test/5">Join</a>'
        )
        assert link.url == "https://meet.test/5"
        assert metadata.text == "<b>Labels:</b> Urgent<br><b>Due date:</b> 01/05/2024"
        assert action.button_text == VIEW_ON_SOURCE
        assert action.url == "https://board.test/c/5"

    @pytest.mark.parametrize("caption", [None, "", "   ", "\n\t"])
    def test_caption_omitted_when_blank(self, composer, sample_card, caption):
        """Should skip the caption section for empty or whitespace captions."""
        payload = composer.compose(sample_card, caption, "Team Chat")

        assert SectionKind.CAPTION not in payload.kinds
        assert payload.sections[0].kind == SectionKind.LINK

    def test_caption_is_second_section(self, composer, sample_card):
        """Should place the caption right after the header."""
        payload = composer.compose(sample_card, "Hello", "Team Chat")

        assert payload.kinds[1] == SectionKind.CAPTION

    def test_caption_is_escaped(self, composer, sample_card):
        """Should escape markup in the caption."""
        payload = composer.compose(sample_card, "<b>hi</b> & bye", "Team Chat")

        assert payload.section(SectionKind.CAPTION).text == "🏷️ &lt;b&gt;hi&lt;/b&gt; &amp; bye"

    def test_link_not_found(self, composer, sample_card):
        """Should always include the link section, with fixed text when absent."""
        card = replace(sample_card, description="No attendance link here")

        payload = composer.compose(card, None, "Team Chat")

        link = payload.section(SectionKind.LINK)
        assert link is not None
        assert link.text == LINK_NOT_FOUND
        assert link.url is None

    def test_bracketed_link(self, composer, sample_card):
        """Should render bare bracketed urls as their own text."""
        card = replace(sample_card, description="Link Presensi: [https://x.test/a]")

        payload = composer.compose(card, None, "Team Chat")

        assert payload.section(SectionKind.LINK).text == (
            '• <b>Link Presensi Online:</b> <a href="https://x.test/a">https://x.test/a</a>'
        )

    def test_metadata_omitted_without_labels_or_due(self, composer, sample_card):
        """Should skip metadata when there are no labels and no due date."""
        card = replace(sample_card, labels=(), due_at=None)

        payload = composer.compose(card, None, "Team Chat")

        assert payload.kinds == [SectionKind.HEADER, SectionKind.LINK, SectionKind.ACTION]

    def test_metadata_labels_only(self, composer, sample_card):
        """Should join label names with commas."""
        card = replace(
            sample_card,
            labels=(Label(name="Urgent", color="red"), Label(name="Week 2", color="blue")),
            due_at=None,
        )

        payload = composer.compose(card, None, "Team Chat")

        assert payload.section(SectionKind.METADATA).text == "<b>Labels:</b> Urgent, Week 2"

    def test_metadata_due_only_completed(self, composer, sample_card):
        """Should mark completed due dates."""
        card = replace(sample_card, labels=(), due_complete=True)

        payload = composer.compose(card, None, "Team Chat")

        assert payload.section(SectionKind.METADATA).text == (
            "<b>Due date:</b> 01/05/2024 (Completed)"
        )

    def test_due_date_uses_configured_timezone(self, sample_card):
        """Should convert the due date before formatting."""
        composer = MessageComposer(timezone="Asia/Jakarta", date_format="%Y-%m-%d")
        card = replace(
            sample_card,
            labels=(),
            due_at=datetime(2024, 4, 30, 20, 0, tzinfo=timezone.utc),
        )

        payload = composer.compose(card, None, "Team Chat")

        # 20:00 UTC is 03:00 the next day in Jakarta
        assert payload.section(SectionKind.METADATA).text == "<b>Due date:</b> 2024-05-01"

    def test_custom_link_label(self, sample_card):
        """Should extract links under a configured label."""
        composer = MessageComposer(link_label="Link Zoom")
        card = replace(sample_card, description="Link Zoom: [Room](https://zoom.test/1)")

        payload = composer.compose(card, None, "Team Chat")

        assert payload.section(SectionKind.LINK).url == "https://zoom.test/1"
        assert "Link Zoom Online:" in payload.section(SectionKind.LINK).text

    def test_compose_is_deterministic(self, composer, sample_card):
        """Should produce equal payloads for equal input."""
        first = composer.compose(sample_card, "Reminder", "Team Chat")
        second = composer.compose(sample_card, "Reminder", "Team Chat")

        assert first == second
