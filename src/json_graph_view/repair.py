"""RepairClient: turns invalid document text into a suggested fix via a chat model.

The editor offers a repair when the document does not parse. The broken text
is sent to an OpenAI-compatible chat completion endpoint together with a
system prompt that asks for a JSON reply of the form
``{"fixedJson": "...", "explanation": "..."}``. ``parse_repair_reply`` accepts
the reply only if the suggested text itself parses; anything else is a
``RepairError``.

``openai`` and ``tenacity`` come from the ``repair`` extra and are imported
when a client is constructed, not when this module is imported::

    pip install json-graph-view[repair]

Credentials come from the environment (``OPENAI_API_KEY``). Requests that hit
a rate limit are retried by tenacity with jittered backoff; other API errors
propagate to the caller.

Example::

    client = RepairClient()
    result = client.repair('{"a": 1,}')
    result.fixed_json     # '{"a": 1}'
    result.explanation    # 'Removed the trailing comma.'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from json_graph_view.errors import RepairError
from json_graph_view.values import loads

__all__ = ["SYSTEM_PROMPT", "RepairClient", "RepairResult", "parse_repair_reply"]

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a JSON repair assistant. Given invalid JSON, fix it and return a "
    'valid JSON object with two fields: "fixedJson" (the corrected JSON as a '
    'string) and "explanation" (a brief explanation of what was fixed). '
    "Return ONLY valid JSON, no markdown."
)

DEFAULT_EXPLANATION = "Fixed"

_FENCE = re.compile(r"```json\s*|\s*```")


@dataclass(frozen=True, slots=True)
class RepairResult:
    """A repaired document.

    Attributes:
        fixed_json:  Replacement document text; always valid JSON.
        explanation: Short description of what was changed.
    """

    fixed_json: str
    explanation: str


def parse_repair_reply(content: str) -> RepairResult:
    """Extract a RepairResult from the model's reply text.

    Markdown code fences are stripped. The reply must be a JSON object with a
    ``fixedJson`` (or ``fixed_json``) string that itself parses as JSON.

    Raises:
        RepairError: If the reply is not JSON, lacks the fixed text, or the
            fixed text is still invalid.
    """
    cleaned = _FENCE.sub("", content).strip()
    try:
        reply = loads(cleaned)
    except ValueError as exc:
        msg = "Repair reply is not valid JSON"
        raise RepairError(msg) from exc
    if not isinstance(reply, dict):
        msg = "Repair reply is not a JSON object"
        raise RepairError(msg)

    fixed = reply.get("fixedJson") or reply.get("fixed_json")
    if not isinstance(fixed, str) or not fixed:
        msg = "Repair reply has no fixedJson field"
        raise RepairError(msg)
    try:
        loads(fixed)
    except ValueError as exc:
        msg = "Repaired JSON is still invalid"
        raise RepairError(msg) from exc

    explanation = reply.get("explanation")
    if not isinstance(explanation, str) or not explanation:
        explanation = DEFAULT_EXPLANATION
    return RepairResult(fixed_json=fixed, explanation=explanation)


class RepairClient:
    """Asks a chat model to repair invalid JSON text.

    One request per ``repair`` call, at temperature 0, with no conversation
    history.

    Args:
        model:    Chat model identifier. Defaults to ``"gpt-4o-mini"``.
        base_url: Endpoint of an OpenAI-compatible API. When None the SDK
                  default (or ``OPENAI_BASE_URL``) is used.

    Raises:
        ImportError: If ``openai`` or ``tenacity`` is not installed. The
            message includes the install command.
    """

    def __init__(self, model: str = "gpt-4o-mini", base_url: str | None = None) -> None:
        try:
            from openai import OpenAI, RateLimitError
            from tenacity import (
                before_sleep_log,
                retry,
                retry_if_exception_type,
                stop_after_attempt,
                wait_random_exponential,
            )
        except ImportError as exc:
            raise ImportError(
                "openai and tenacity are required for RepairClient. "
                "Install with: pip install json-graph-view[repair]"
            ) from exc

        self._model = model
        # max_retries=0: tenacity is the sole retry controller.
        self._client: Any = OpenAI(base_url=base_url, max_retries=0)

        _retry = retry(
            retry=retry_if_exception_type(RateLimitError),
            wait=wait_random_exponential(min=1, max=60),
            stop=stop_after_attempt(6),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        self._call_api = _retry(self._raw_call)

    def __repr__(self) -> str:
        """Show the model only; credentials stay out of the repr."""
        return f"RepairClient(model={self._model!r})"

    def repair(self, text: str) -> RepairResult:
        """Ask the model to fix ``text`` and return the validated result.

        Raises:
            RepairError: If the reply cannot be used as a fix.
        """
        content = self._call_api(text)
        if not content:
            msg = "Repair reply is empty"
            raise RepairError(msg)
        return parse_repair_reply(content)

    def _raw_call(self, text: str) -> str:
        """Make the raw chat completion call; retried by tenacity via ``_call_api``."""
        response = self._client.chat.completions.create(
            model=self._model,
            temperature=0,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"Fix this JSON:\n{text}"},
            ],
        )
        return response.choices[0].message.content or ""  # type: ignore[no-any-return]
