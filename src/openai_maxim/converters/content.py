"""Content resolution: OpenAI message content to Maxim content + attachments."""

from __future__ import annotations

import itertools
import logging
import random
import string
import time
from collections.abc import Mapping
from typing import Any

from openai_maxim.core.types import (
    DEFAULT_IMAGE_DETAIL,
    DEFAULT_IMAGE_MIME_TYPE,
    Attachment,
    ContentPart,
    PartKind,
    ResolvedContent,
)

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_id_counter = itertools.count()


def new_attachment_id() -> str:
    """
    Generate an attachment ID: image_<epoch ms>_<9 base36 chars>_<seq>.

    The trailing sequence number is process-wide, so IDs never collide
    within a process even when generated in the same millisecond.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"image_{millis}_{suffix}_{next(_id_counter)}"


def resolve_content(content: Any) -> ResolvedContent:
    """
    Resolve OpenAI message content into Maxim content.

    - str: returned unchanged
    - None: ""
    - list of parts: text parts kept, image parts kept and extracted as
      attachments, other part kinds dropped. A lone text part collapses
      to a plain string.
    - anything else: ""

    Never raises.
    """
    if isinstance(content, str):
        return ResolvedContent(content=content)

    if content is None:
        return ResolvedContent(content="")

    if not isinstance(content, (list, tuple)):
        logger.debug(f"Unsupported content type {type(content).__name__}, using ''")
        return ResolvedContent(content="")

    parts: list[ContentPart] = []
    attachments: list[Attachment] = []
    text_content = ""

    for part in content:
        if not isinstance(part, Mapping):
            logger.debug(f"Skipping non-mapping content part: {part!r:.50}")
            continue

        try:
            kind = PartKind(part.get("type"))
        except ValueError:
            # Unknown kinds (input_audio, file, ...) are dropped, not rejected
            logger.debug(f"Dropping unsupported content part: {part.get('type')}")
            continue

        match kind:
            case PartKind.TEXT:
                text = part.get("text")
                if not isinstance(text, str):
                    logger.debug(f"Non-string text payload {text!r:.50}, using ''")
                    text = ""
                text_content += text
                parts.append({"type": "text", "text": text})

            case PartKind.IMAGE_URL:
                image_url = part.get("image_url")
                if not isinstance(image_url, Mapping):
                    image_url = {}
                url = image_url.get("url", "")
                attachment = Attachment(
                    id=new_attachment_id(),
                    url=url,
                    mime_type=DEFAULT_IMAGE_MIME_TYPE,
                )
                attachments.append(attachment)
                parts.append(
                    {
                        "type": "image_url",
                        "image_url": {
                            "url": url,
                            "detail": image_url.get("detail") or DEFAULT_IMAGE_DETAIL,
                        },
                    }
                )
                logger.debug(f"Extracted image attachment {attachment.id}")

    if len(parts) == 1 and parts[0]["type"] == PartKind.TEXT.value:
        return ResolvedContent(content=text_content, attachments=attachments)

    return ResolvedContent(content=parts, attachments=attachments)
