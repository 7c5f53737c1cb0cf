"""Request replacement file content from an Ollama-compatible service."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

import httpx

from lintloop.constants.defaults import (
    CODE_LANGUAGE_DEFAULT,
    MODEL_DEFAULT,
    OLLAMA_URL_DEFAULT,
    STREAM_DEFAULT,
)
from lintloop.constants.limits import ERROR_BODY_EXCERPT_MAX
from lintloop.constants.timeouts import PATCH_REQUEST_TIMEOUT
from lintloop.constants.values import GENERATE_ENDPOINT
from lintloop.errors import PatchGenerationError
from lintloop.pipeline.text_extract import extract_code_block

logger = logging.getLogger(__name__)


class PatchGenerator(Protocol):
    """Produces corrected file content for a failing file."""

    async def generate(self, path: Path, content: str, lint_output: str) -> str:
        """Return the full replacement content.

        Raises:
            PatchGenerationError: the service could not produce content.
        """
        ...


def build_fix_prompt(
    path: Path | str,
    lint_output: str,
    content: str,
    language: str = CODE_LANGUAGE_DEFAULT,
) -> str:
    return (
        f"Fix the following lint errors in the {language} file {path}.\n\n"
        f"Lint errors:\n{lint_output}\n\n"
        f"Current file content:\n```{language}\n{content}\n```\n\n"
        f"Return the complete corrected file inside a single ```{language} "
        "code block. Do not include explanations."
    )


class OllamaPatchGenerator:
    """POSTs a fix prompt to ``{base_url}/api/generate``.

    With ``stream`` off the body is one JSON object. With ``stream`` on it is
    newline-delimited JSON whose ``response`` fragments are joined before the
    code block is extracted.
    """

    def __init__(
        self,
        base_url: str = OLLAMA_URL_DEFAULT,
        model: str = MODEL_DEFAULT,
        *,
        language: str = CODE_LANGUAGE_DEFAULT,
        stream: bool = STREAM_DEFAULT,
        timeout: float = PATCH_REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = base_url.rstrip("/") + GENERATE_ENDPOINT
        self._model = model
        self._language = language
        self._stream = stream
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def _payload(self, prompt: str) -> dict[str, Any]:
        return {"model": self._model, "prompt": prompt, "stream": self._stream}

    async def generate(self, path: Path, content: str, lint_output: str) -> str:
        prompt = build_fix_prompt(path, lint_output, content, self._language)
        payload = self._payload(prompt)
        logger.debug("Requesting patch for %s from %s", path, self._url)
        try:
            async with self._client() as client:
                if self._stream:
                    text = await self._generate_streaming(client, payload)
                else:
                    text = await self._generate_once(client, payload)
        except httpx.HTTPError as exc:
            raise PatchGenerationError(f"request failed: {exc}") from exc
        return extract_code_block(text, self._language)

    async def _generate_once(self, client: httpx.AsyncClient, payload: dict[str, Any]) -> str:
        response = await client.post(self._url, json=payload)
        if response.status_code != httpx.codes.OK:
            raise PatchGenerationError(_status_message(response.status_code, response.text))
        try:
            body = response.json()
        except ValueError as exc:
            raise PatchGenerationError(f"decode response: {exc}") from exc
        return _response_field(body)

    async def _generate_streaming(
        self, client: httpx.AsyncClient, payload: dict[str, Any]
    ) -> str:
        fragments: list[str] = []
        async with client.stream("POST", self._url, json=payload) as response:
            if response.status_code != httpx.codes.OK:
                body = (await response.aread()).decode("utf-8", errors="replace")
                raise PatchGenerationError(_status_message(response.status_code, body))
            async for line in response.aiter_lines():
                if not line.strip():
                    continue
                try:
                    chunk = json.loads(line)
                except ValueError as exc:
                    raise PatchGenerationError(f"decode stream chunk: {exc}") from exc
                fragments.append(_response_field(chunk))
                if chunk.get("done"):
                    break
        return "".join(fragments)


def _response_field(body: Any) -> str:
    if not isinstance(body, dict):
        raise PatchGenerationError("decode response: expected a JSON object")
    if "error" in body and "response" not in body:
        raise PatchGenerationError(f"service error: {body['error']}")
    value = body.get("response", "")
    if not isinstance(value, str):
        raise PatchGenerationError("decode response: 'response' is not a string")
    return value


def _status_message(status_code: int, body: str) -> str:
    excerpt = body.strip()[:ERROR_BODY_EXCERPT_MAX]
    return f"API error {status_code}: {excerpt}"


__all__ = [
    "OllamaPatchGenerator",
    "PatchGenerator",
    "build_fix_prompt",
]
