"""Extract the markup, stylesheet, and script artifacts from a model reply.

The model is instructed to answer with a single ```json fenced object. Extraction
runs in two stages so each can be tested on its own:

- locate_json_block: find the first fenced JSON region in the raw reply
- parse_artifact_block: decode that region into an ArtifactSet
"""

import json
import re
from dataclasses import dataclass

from app.core.exceptions import BlockNotFound, ParseError

# Shortest match, so the first fenced block wins when several are present.
_JSON_BLOCK_RE = re.compile(r"```json\n(.*?)\n```", re.DOTALL)

EXCERPT_LENGTH: int = 200


@dataclass(frozen=True)
class ArtifactSet:
    """The three generated text payloads for one website."""

    markup: str = ""
    stylesheet: str = ""
    script: str = ""


def _excerpt(raw: str) -> str:
    return replace_lone_surrogates(raw[:EXCERPT_LENGTH])


def locate_json_block(raw: str) -> str:
    """Return the content of the first ```json fenced block in raw.

    Raises:
        BlockNotFound: no fenced JSON block exists in raw.
    """
    match = _JSON_BLOCK_RE.search(raw)
    if match is None:
        raise BlockNotFound(_excerpt(raw))
    return match.group(1)


def replace_lone_surrogates(text: str) -> str:
    """Replace unpaired surrogates, which JSON allows but UTF-8 cannot encode, with U+FFFD."""
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def _as_text(value: object) -> str:
    # Non-string values (true, 0, {}) are treated as absent
    if not isinstance(value, str):
        return ""
    return replace_lone_surrogates(value)


def parse_artifact_block(block: str, raw: str | None = None) -> ArtifactSet:
    """Decode a fenced block into an ArtifactSet.

    Missing, null, or non-string html/css/js values become empty strings. Unknown keys are ignored.

    Args:
        block: Content of the fenced block (without the fence markers)
        raw: Full model reply, used for the diagnostic excerpt on failure

    Raises:
        ParseError: block is not a JSON object.
    """
    try:
        parsed = json.loads(block)
    except json.JSONDecodeError as exc:
        raise ParseError(_excerpt(raw if raw is not None else block)) from exc

    if not isinstance(parsed, dict):
        raise ParseError(_excerpt(raw if raw is not None else block))

    return ArtifactSet(
        markup=_as_text(parsed.get("html")),
        stylesheet=_as_text(parsed.get("css")),
        script=_as_text(parsed.get("js")),
    )


def extract(raw: str) -> ArtifactSet:
    """Extract the ArtifactSet from a full model reply.

    Raises:
        BlockNotFound: no fenced JSON block in raw.
        ParseError: the fenced block is not a JSON object.
    """
    return parse_artifact_block(locate_json_block(raw), raw=raw)
