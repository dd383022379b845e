"""Trello REST API board provider."""

from datetime import datetime
from typing import Any, Optional, Sequence
import logging

import httpx

from ..domain.errors import BoardProviderError
from ..domain.models import BoardCredentials, BoardList, Card, Label

logger = logging.getLogger(__name__)

CARD_FIELDS = "name,desc,due,dueComplete,url"
LIST_CARD_FIELDS = "name,desc,labels,due,dueComplete,url"


class TrelloBoardProvider:
    """Reads boards, lists and cards from Trello.

    Credentials are supplied on every call and sent as query parameters;
    the HTTP client itself carries no authentication state.
    """

    def __init__(
        self,
        *,
        base_url: str = "https://api.trello.com/1",
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Trello provider.

        Args:
            base_url: Trello API base URL
            timeout: Request timeout in seconds
            http_client: Optional HTTP client for testing
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    async def get_card(self, card_id: str, *, credentials: BoardCredentials) -> Card:
        """Get a card without its labels."""
        data = await self._get(
            f"/cards/{card_id}",
            credentials,
            params={"fields": CARD_FIELDS},
        )
        return self._parse_card(data, card_id=card_id)

    async def get_card_labels(
        self, card_id: str, *, credentials: BoardCredentials
    ) -> Sequence[Label]:
        """Get a card's labels."""
        data = await self._get(f"/cards/{card_id}/labels", credentials)
        return [self._parse_label(item) for item in data or []]

    async def get_board(self, board_id: str, *, credentials: BoardCredentials) -> dict:
        """Get raw board metadata."""
        return await self._get(f"/boards/{board_id}", credentials)

    async def get_board_lists(
        self, board_id: str, *, credentials: BoardCredentials
    ) -> Sequence[BoardList]:
        """Get a board's lists with their open cards."""
        data = await self._get(
            f"/boards/{board_id}/lists",
            credentials,
            params={"cards": "open", "card_fields": LIST_CARD_FIELDS},
        )
        return [
            BoardList(
                id=item.get("id", ""),
                name=item.get("name", ""),
                cards=tuple(self._parse_card(c) for c in item.get("cards", [])),
            )
            for item in data or []
        ]

    async def _get(
        self,
        path: str,
        credentials: BoardCredentials,
        params: Optional[dict[str, str]] = None,
    ) -> Any:
        query = dict(params or {})
        query.update(credentials.as_params())

        client = self._http_client or httpx.AsyncClient()
        try:
            response = await client.get(
                f"{self._base_url}{path}",
                params=query,
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            logger.warning(f"Trello request {path} failed: {type(e).__name__}")
            raise BoardProviderError(None, str(e) or type(e).__name__) from e
        finally:
            if self._owns_client and not self._http_client:
                await client.aclose()

        if response.status_code >= 400:
            raise BoardProviderError(response.status_code, self._error_message(response))

        try:
            return response.json()
        except ValueError as e:
            raise BoardProviderError(response.status_code, "Invalid JSON from Trello") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        text = response.text.strip()
        if text:
            return text[:500]
        return response.reason_phrase or f"HTTP {response.status_code}"

    @staticmethod
    def _parse_label(item: dict) -> Label:
        return Label(name=item.get("name") or "", color=item.get("color"))

    def _parse_card(self, data: dict, card_id: Optional[str] = None) -> Card:
        due_at = None
        if data.get("due"):
            try:
                due_at = datetime.fromisoformat(data["due"].replace("Z", "+00:00"))
            except ValueError:
                logger.warning(f"Unparseable due date on card {data.get('id')}: {data['due']}")

        return Card(
            id=data.get("id") or card_id or "",
            title=data.get("name", ""),
            description=data.get("desc") or "",
            labels=tuple(self._parse_label(item) for item in data.get("labels") or []),
            due_at=due_at,
            due_complete=bool(data.get("dueComplete")),
            source_url=data.get("url", ""),
        )
