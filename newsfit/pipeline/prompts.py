"""Build the condense/expand prompts for the Claude rewrite step."""


# ── Requirement blocks ────────────────────────────────────────────────────

CONDENSE_REQUIREMENTS = """1. Preserve the opening paragraph exactly
2. Maintain all key facts and quotes
3. End with a complete, natural-sounding sentence
4. Preserve journalistic tone and quality
5. The final paragraph must feel like a proper conclusion"""

EXPAND_REQUIREMENTS = """1. Preserve the opening paragraph exactly
2. Add relevant context or elaboration
3. Do not fabricate facts or quotes
4. Maintain journalistic tone and quality
5. New content should integrate naturally"""


# ── Prompt ────────────────────────────────────────────────────────────────


def build_adjust_prompt(
    content: str,
    current_words: int,
    target_words: int,
    needs_condensing: bool,
) -> str:
    """Return the user prompt asking Claude to shorten or lengthen the article.

    Args:
        content: Current article body.
        current_words: Word count of ``content``.
        target_words: Word count the article should end up near.
        needs_condensing: True when the text overflows its columns.
    """
    difference = abs(current_words - target_words)

    if needs_condensing:
        situation = "is slightly too long to fit its layout"
        change = f"reduce by {difference} words"
        requirements = CONDENSE_REQUIREMENTS
    else:
        situation = "needs slightly more content to fill its layout"
        change = f"add {difference} words"
        requirements = EXPAND_REQUIREMENTS

    return f"""You are editing a newspaper article that {situation}.

ORIGINAL ARTICLE:
{content}

CURRENT WORD COUNT: {current_words} words
TARGET WORD COUNT: {target_words} words ({change})

REQUIREMENTS:
{requirements}

Return ONLY the adjusted article text, no explanations."""
