"""Rewrite an article toward a target word count with Claude.

A failed request is never retried here: the SDK's own retries are switched
off and every transport, status or empty-response failure is raised as
OracleError so the fit loop can stop on the first one.
"""

from __future__ import annotations

import time

import anthropic

from newsfit.config import CLAUDE_MAX_TOKENS, CLAUDE_MODEL, CLAUDE_TIMEOUT
from newsfit.errors import OracleError
from newsfit.pipeline.prompts import build_adjust_prompt


def create_client(api_key: str, timeout: float = CLAUDE_TIMEOUT) -> anthropic.Anthropic:
    """Anthropic client with a per-request timeout and no automatic retries."""
    return anthropic.Anthropic(api_key=api_key, timeout=timeout, max_retries=0)


def count_words(text: str) -> int:
    return len(text.split())


def adjust_length(
    client: anthropic.Anthropic,
    content: str,
    current_words: int,
    target_words: int,
    needs_condensing: bool,
    model: str = CLAUDE_MODEL,
    max_tokens: int = CLAUDE_MAX_TOKENS,
) -> str:
    """Ask Claude to condense or expand ``content`` to about ``target_words``.

    Returns the rewritten text, stripped. The text is returned as-is even if
    it misses the target.

    Raises:
        OracleError: connection failure, timeout, non-2xx status, a
            malformed response, or a response without text.
    """
    prompt = build_adjust_prompt(content, current_words, target_words, needs_condensing)
    direction = "Condensing" if needs_condensing else "Expanding"

    print(f"  -> {direction} {current_words} -> {target_words} words ({model})...")
    start = time.time()

    try:
        message = client.messages.create(
            model=model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
    except anthropic.APIStatusError as e:
        raise OracleError(f"API request failed: {e.status_code} - {e.message}") from e
    except anthropic.APITimeoutError as e:
        raise OracleError("API request timed out") from e
    except anthropic.APIConnectionError as e:
        raise OracleError(f"API request failed: {e.message}") from e
    except anthropic.APIError as e:
        # malformed response bodies and any other SDK error
        raise OracleError(f"API request failed: {e.message}") from e

    content_blocks = getattr(message, "content", None) or []
    text = getattr(content_blocks[0], "text", None) if content_blocks else None
    if not text or not text.strip():
        raise OracleError("Invalid response from Claude API")

    adjusted = text.strip()
    elapsed = time.time() - start
    usage = getattr(message, "usage", None)
    if usage is not None:
        print(
            f"  OK Rewrote to {count_words(adjusted)} words in {elapsed:.1f}s "
            f"({usage.input_tokens} in / {usage.output_tokens} out)"
        )
    else:
        print(f"  OK Rewrote to {count_words(adjusted)} words in {elapsed:.1f}s")

    return adjusted
