import logging

import httpx

from student_api.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_KEYWORD = "nothing"


class RemoteFunctionService:
    """Forwards a keyword to the remote serverless function."""

    def __init__(self, client: httpx.AsyncClient, url: str):
        self.client = client
        self.url = url

    async def say(self, keyword: str = DEFAULT_KEYWORD) -> httpx.Response:
        keyword = keyword or DEFAULT_KEYWORD
        try:
            response = await self.client.get(self.url, params={"keyword": keyword})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Remote function call failed: {e}")
            raise UpstreamError() from e
        return response
