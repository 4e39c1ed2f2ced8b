"""LibreTranslate translator (optional, self-hosted or public instance)."""

import httpx

from vtvnews.http_client import request_json
from vtvnews.translation.base import RemoteTranslator, nested_text


class LibreTranslator(RemoteTranslator):
    name = "libretranslate"
    max_chars = 1000

    def __init__(
        self,
        url: str,
        api_key: str = "",
        target_language: str = "vi",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(url, target_language=target_language, timeout=timeout, transport=transport)
        self.api_key = api_key

    async def _request(self, text: str) -> str:
        body = {"q": text, "source": "auto", "target": self.target_language, "format": "text"}
        if self.api_key:
            body["api_key"] = self.api_key
        payload = await request_json(
            self.name,
            "POST",
            self.url,
            json_body=body,
            timeout=self.timeout,
            transport=self.transport,
        )
        return nested_text(payload, self.name, "translatedText")
