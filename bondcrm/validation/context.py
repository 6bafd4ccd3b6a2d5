"""Per-client transcript slicing for direction validation."""

import structlog

logger = structlog.get_logger(__name__)


def extract_activity_context(transcript: str | None, client_name: str | None) -> str:
    """Cut the transcript down to the lines that concern one client.

    A line is kept when it mentions the client (case-insensitive substring)
    or directly follows a line that does, which picks up the dealer's reply.

    Args:
        transcript: Full newline-delimited chat transcript.
        client_name: Counterparty name from the trade candidate.

    Returns:
        The selected lines in original order, or the full transcript when the
        client is unnamed or never found.
    """
    transcript = transcript or ""

    if not client_name:
        return transcript

    # Plain substring match: short names can over-select lines
    needle = client_name.lower()
    lines = transcript.split("\n")
    mentions = [needle in line.lower() for line in lines]

    relevant = [
        line
        for i, line in enumerate(lines)
        if mentions[i] or (i > 0 and mentions[i - 1])
    ]

    if not relevant:
        logger.debug("context_client_not_found_using_full_transcript", client_name=client_name)
        return transcript

    return "\n".join(relevant)
