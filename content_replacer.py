"""Fill placeholders in the cloned presentation with one batch update."""

import json
import logging
from typing import Any, Dict, List

from config import (
    IMAGE_PLACEHOLDER,
    PRODUCT_DESCRIPTION_PLACEHOLDER,
    PRODUCT_NAME_PLACEHOLDER,
    DeckConfig,
)
from slides_requests import (
    EditRequest,
    ReplaceShapesWithImageRequest,
    ReplaceTextRequest,
    build_batch_body,
)

logger = logging.getLogger(__name__)


class ContentReplacer:
    def __init__(self, slides_service, config: DeckConfig):
        self.slides_service = slides_service
        self.config = config

    def build_requests(self, image_url: str) -> List[EditRequest]:
        """
        The fixed replacement batch, in application order:
        product name text, product description text, image placeholder shape.
        """
        return [
            ReplaceTextRequest(PRODUCT_NAME_PLACEHOLDER, self.config.product_name),
            ReplaceTextRequest(PRODUCT_DESCRIPTION_PLACEHOLDER, self.config.product_description),
            ReplaceShapesWithImageRequest(IMAGE_PLACEHOLDER, image_url),
        ]

    def replace_content(self, presentation_id: str, image_url: str) -> Dict[str, Any]:
        requests = self.build_requests(image_url)
        return self.batch_update(presentation_id, requests)

    def batch_update(self, presentation_id: str, requests: List[EditRequest]) -> Dict[str, Any]:
        body = build_batch_body(requests)
        logger.debug(f"📋 Batch update for {presentation_id}: {json.dumps(body, default=str)[:500]}")

        response = self.slides_service.presentations().batchUpdate(
            presentationId=presentation_id,
            body=body,
        ).execute()

        self._log_batch_replies(requests, response)
        return response

    def _log_batch_replies(self, requests: List[EditRequest], response: Dict[str, Any]) -> None:
        """Correlate requests to replies by order and report how many placeholders matched."""
        replies = response.get('replies', [])
        if len(replies) != len(requests):
            logger.warning(f"⚠️ Expected {len(requests)} replies but got {len(replies)}")

        for request, reply in zip(requests, replies):
            if isinstance(request, ReplaceTextRequest):
                token = request.placeholder
                changed = reply.get('replaceAllText', {}).get('occurrencesChanged', 0)
            else:
                token = request.shape_text
                changed = reply.get('replaceAllShapesWithImage', {}).get('occurrencesChanged', 0)

            if changed:
                logger.debug(f"   {token}: {changed} occurrences changed")
            else:
                logger.warning(f"⚠️ Placeholder {token} not found in presentation")
