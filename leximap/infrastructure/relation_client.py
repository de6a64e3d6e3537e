"""Relation Client — best-effort synonym/antonym lookup against a Datamuse-style service.

Invariants:
    - fetch() NEVER raises: non-2xx status, network error, timeout, and
      malformed payload all degrade to []
    - Request is GET <base_url>?<rel>=<word>, word percent-encoded by httpx
    - Every outbound call carries the configured timeout
    - No retries

Design Decisions:
    - Single shared httpx.AsyncClient (connection reuse), owned by the lifespan
    - Absorbed failures logged at WARNING with relation + word, never surfaced
"""

import logging

import httpx

from leximap.core.domain_types import RelationKind
from leximap.core.relation_words import parse_relation_words

logger = logging.getLogger(__name__)


class RelationClient:
    """Fetches relation words for one (word, relation kind) pair."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        timeout_seconds: float = 5.0,
    ):
        self.client = client
        self.base_url = base_url
        self.timeout = httpx.Timeout(timeout_seconds)

    async def fetch(self, word: str, kind: RelationKind) -> list[str]:
        log_extra = {"word": word, "relation": kind.value}
        try:
            response = await self.client.get(
                self.base_url,
                params={kind.value: word},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.warning(
                f"Relation fetch failed: {type(e).__name__}", extra=log_extra,
            )
            return []

        if not response.is_success:
            logger.warning(
                "Relation service returned non-OK status",
                extra={**log_extra, "status_code": response.status_code},
            )
            return []

        try:
            return parse_relation_words(response.json())
        except ValueError as e:
            logger.warning(f"Relation payload undecodable: {e}", extra=log_extra)
            return []
