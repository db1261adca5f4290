"""LLM adapter using the OpenAI Responses API."""

import logging
from datetime import date
from typing import Any
from urllib.parse import urlparse

import httpx

from ...config import DEFAULT_BASE_URL, DEFAULT_MODEL, DEFAULT_TIMEOUT
from ...domain.errors import InferenceError
from ...domain.models import EncodedDocument, ExtractionResult
from ...domain.naming import DEFAULT_FALLBACK_DATE, DEFAULT_FALLBACK_LABEL
from ...ports.llm import LLMPort
from .parsing import parse_extraction
from .prompts import JSON_SCHEMA, SYSTEM_PROMPT, filename_context

logger = logging.getLogger(__name__)


class OpenAIResponsesAdapter(LLMPort):
    """LLM implementation posting PDFs to a ``/responses`` endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        fallback_date: date = DEFAULT_FALLBACK_DATE,
        fallback_label: str = DEFAULT_FALLBACK_LABEL,
        client: httpx.Client | None = None,
    ) -> None:
        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"Invalid base_url scheme: {parsed.scheme}")
        self._api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.fallback_date = fallback_date
        self.fallback_label = fallback_label
        self.client = client or httpx.Client(timeout=timeout)

    def analyze(self, document: EncodedDocument) -> ExtractionResult:
        logger.info(f"Analyzing {document.filename} with {self.model}")

        try:
            response = self.client.post(
                f"{self.base_url}/responses",
                json=self.build_request(document),
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
        except httpx.HTTPError as e:
            raise InferenceError(f"Request failed: {e}") from e

        if response.is_error:
            raise InferenceError(
                f"HTTP {response.status_code}: {_error_message(response)}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise InferenceError(f"Response is not JSON: {response.text[:200]!r}") from e

        text = self._output_text(body)
        logger.debug(f"Model output for {document.filename}: {text[:500]}")
        return parse_extraction(text, self.fallback_date, self.fallback_label)

    def build_request(self, document: EncodedDocument) -> dict[str, Any]:
        return {
            "model": self.model,
            "instructions": SYSTEM_PROMPT,
            "input": [
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "input_text",
                            "text": filename_context(document.filename),
                        },
                        {
                            "type": "input_file",
                            "filename": document.filename,
                            "file_data": document.data_url,
                        },
                    ],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "document_naming",
                    "schema": JSON_SCHEMA,
                    "strict": True,
                }
            },
            "temperature": 0,
        }

    def _output_text(self, body: Any) -> str:
        """Concatenate the ``output_text`` parts of the response."""
        if not isinstance(body, dict):
            raise InferenceError("Response body is not a JSON object")

        parts: list[str] = []
        refusals: list[str] = []
        for item in body.get("output") or []:
            if not isinstance(item, dict) or item.get("type") != "message":
                continue
            for part in item.get("content") or []:
                if not isinstance(part, dict):
                    continue
                if part.get("type") == "output_text":
                    parts.append(str(part.get("text", "")))
                elif part.get("type") == "refusal":
                    refusals.append(str(part.get("refusal", "")))

        if parts:
            return "".join(parts)
        if refusals:
            raise InferenceError(f"Model refused: {refusals[0][:200]}")
        status = body.get("status", "unknown")
        raise InferenceError(f"No output text in response (status: {status})")

    def close(self) -> None:
        logger.debug("Closing HTTP client")
        self.client.close()


def _error_message(response: httpx.Response) -> str:
    try:
        error = response.json().get("error") or {}
        message = error.get("message") if isinstance(error, dict) else str(error)
    except (ValueError, AttributeError):
        message = None
    return message or response.reason_phrase or "request failed"
