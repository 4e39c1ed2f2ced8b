"""Google Translate (public gtx endpoint) translator, primary."""

from vtvnews.exceptions import MalformedResponseError
from vtvnews.http_client import request_json
from vtvnews.translation.base import RemoteTranslator

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class GoogleTranslator(RemoteTranslator):
    name = "google"
    max_chars = 1000

    async def _request(self, text: str) -> str:
        payload = await request_json(
            self.name,
            "GET",
            self.url,
            params={"client": "gtx", "sl": "auto", "tl": self.target_language, "dt": "t", "q": text},
            headers={"User-Agent": BROWSER_USER_AGENT},
            timeout=self.timeout,
            transport=self.transport,
        )
        # [[["translated", "source", ...], ...], ...]
        if not isinstance(payload, list) or not payload or not isinstance(payload[0], list):
            raise MalformedResponseError(self.name, "unexpected response layout")
        parts = []
        for segment in payload[0]:
            if isinstance(segment, list) and segment and isinstance(segment[0], str):
                parts.append(segment[0])
        return "".join(parts)
