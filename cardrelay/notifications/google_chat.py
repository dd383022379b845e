"""Google Chat delivery channel implementation."""

from typing import Optional
import logging

import httpx

from ..domain.models import NotificationPayload, Section, SectionKind
from ..domain.protocols import ChannelResponse

logger = logging.getLogger(__name__)


class GoogleChatChannel:
    """Delivers notifications to Google Chat incoming webhooks."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Google Chat channel.

        Args:
            timeout: Request timeout in seconds
            http_client: Optional HTTP client for testing
        """
        self._timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    async def post(self, delivery_url: str, payload: NotificationPayload) -> ChannelResponse:
        """Post a notification to a webhook URL.

        Args:
            delivery_url: Google Chat webhook URL
            payload: Notification to send

        Returns:
            ChannelResponse describing the outcome
        """
        message = self.build_message(payload)

        client = self._http_client or httpx.AsyncClient()
        try:
            response = await client.post(
                delivery_url,
                json=message,
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            return ChannelResponse(ok=False, status=None, message=str(e) or type(e).__name__)
        finally:
            if self._owns_client and not self._http_client:
                await client.aclose()

        logger.debug(f"Google Chat response: {response.status_code}")
        if 200 <= response.status_code < 300:
            return ChannelResponse(ok=True, status=response.status_code)
        return ChannelResponse(
            ok=False,
            status=response.status_code,
            message=response.text.strip()[:500] or response.reason_phrase,
        )

    def build_message(self, payload: NotificationPayload) -> dict:
        """Build a cardsV2 message.

        Args:
            payload: Notification to convert

        Returns:
            Google Chat message dict
        """
        return {
            "cardsV2": [
                {
                    "cardId": f"trello-card-{payload.card_id}",
                    "card": {
                        "header": {
                            "title": payload.header.text,
                            "subtitle": payload.header.subtitle or "",
                        },
                        "sections": [self._build_section(s) for s in payload.sections],
                    },
                }
            ]
        }

    def _build_section(self, section: Section) -> dict:
        if section.kind == SectionKind.ACTION:
            widget = {
                "buttonList": {
                    "buttons": [
                        {
                            "text": section.button_text or "",
                            "onClick": {"openLink": {"url": section.url or ""}},
                        }
                    ]
                }
            }
        else:
            widget = {"textParagraph": {"text": section.text}}
        return {"widgets": [widget]}
