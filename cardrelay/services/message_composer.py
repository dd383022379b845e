"""Compose chat notifications from board cards."""

from datetime import datetime
from html import escape
from typing import Optional
from zoneinfo import ZoneInfo

from ..domain.models import (
    Card,
    NotificationPayload,
    Section,
    SectionKind,
)
from .link_extractor import extract_link


PIN_MARKER = "📌"
TAG_MARKER = "🏷️"
LINK_NOT_FOUND = "Tidak ditemukan link"
VIEW_ON_SOURCE = "🔗 Lihat di Trello"
DEFAULT_LINK_LABEL = "Link Presensi"


class MessageComposer:
    """Builds the ordered sections of a card notification.

    Composition is pure: it performs no I/O and the same inputs always
    produce the same payload.
    """

    def __init__(
        self,
        *,
        link_label: str = DEFAULT_LINK_LABEL,
        timezone: str = "Asia/Jakarta",
        date_format: str = "%d/%m/%Y",
    ) -> None:
        self._link_label = link_label
        self._tz = ZoneInfo(timezone)
        self._date_format = date_format

    def compose(
        self,
        card: Card,
        caption: Optional[str],
        destination_name: str,
    ) -> NotificationPayload:
        """Build a notification payload for a card.

        Args:
            card: Card snapshot
            caption: Optional caption typed by the sender
            destination_name: Display name of the destination

        Returns:
            NotificationPayload with sections in render order
        """
        header = Section(
            kind=SectionKind.HEADER,
            text=f"{PIN_MARKER} {card.title}",
            subtitle=f"Sent to {destination_name}",
        )

        sections: list[Section] = []

        if caption and caption.strip():
            sections.append(
                Section(kind=SectionKind.CAPTION, text=f"{TAG_MARKER} {escape(caption.strip())}")
            )

        sections.append(self._link_section(card))

        metadata = self._metadata_section(card)
        if metadata:
            sections.append(metadata)

        sections.append(
            Section(
                kind=SectionKind.ACTION,
                button_text=VIEW_ON_SOURCE,
                url=card.source_url,
            )
        )

        return NotificationPayload(card_id=card.id, header=header, sections=tuple(sections))

    def format_due_date(self, due_at: datetime) -> str:
        """Format a due timestamp in the configured timezone."""
        if due_at.tzinfo is not None:
            due_at = due_at.astimezone(self._tz)
        return due_at.strftime(self._date_format)

    def _link_section(self, card: Card) -> Section:
        link = extract_link(card.description, self._link_label)
        if link is None:
            return Section(kind=SectionKind.LINK, text=LINK_NOT_FOUND)

        text = (
            f"• <b>{escape(self._link_label)} Online:</b> "
            f'<a href="{escape(link.url)}">{escape(link.text)}</a>'
        )
        return Section(kind=SectionKind.LINK, text=text, url=link.url)

    def _metadata_section(self, card: Card) -> Optional[Section]:
        lines = []

        if card.labels:
            names = ", ".join(escape(label.name) for label in card.labels)
            lines.append(f"<b>Labels:</b> {names}")

        if card.due_at:
            due_line = f"<b>Due date:</b> {self.format_due_date(card.due_at)}"
            if card.due_complete:
                due_line += " (Completed)"
            lines.append(due_line)

        if not lines:
            return None
        return Section(kind=SectionKind.METADATA, text="<br>".join(lines))
