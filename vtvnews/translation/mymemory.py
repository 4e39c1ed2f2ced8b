"""MyMemory translator, secondary."""

from vtvnews.exceptions import MalformedResponseError
from vtvnews.http_client import request_json
from vtvnews.translation.base import RemoteTranslator, nested_text


class MyMemoryTranslator(RemoteTranslator):
    name = "mymemory"
    max_chars = 500

    async def _request(self, text: str) -> str:
        payload = await request_json(
            self.name,
            "GET",
            self.url,
            params={"q": text, "langpair": f"auto|{self.target_language}"},
            timeout=self.timeout,
            transport=self.transport,
        )
        # Quota and language errors arrive with HTTP 200 and the message as "translation"
        status = payload.get("responseStatus", 200) if isinstance(payload, dict) else 200
        if str(status) != "200":
            detail = payload.get("responseDetails") or "unknown error"
            raise MalformedResponseError(self.name, f"responseStatus {status}: {detail}")
        return nested_text(payload, self.name, "responseData", "translatedText")
