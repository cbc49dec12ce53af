"""
AALARM sound <-> ATTACH conversion.

An AALARM names its sound inline, by MIME content-id or by URI, with the
audio format in its TYPE parameter ("WAVE", "PCM", ...). An ATTACH property
holds inline data or a URI and a full content type ("audio/wave").
Content-id references travel as "CID:" URIs.
"""

from typing import Optional

from .legacy import AudioAlarm
from .structured import Attachment


CID_PREFIX = "CID:"


def _content_type(audio_type: Optional[str]) -> Optional[str]:
    return None if audio_type is None else "audio/" + audio_type.lower()


def build_attachment(aalarm: AudioAlarm) -> Attachment:
    """
    Build the ATTACH property for an AALARM.

    Args:
        aalarm: The AALARM property

    Returns:
        An inline attachment if the alarm carries data, otherwise a URI
        attachment (a "CID:" URI for content-id references). The URI is
        None if the alarm names no sound at all.
    """
    content_type = _content_type(aalarm.type)
    if aalarm.data is not None:
        return Attachment(content_type=content_type, data=aalarm.data)

    if aalarm.content_id is not None:
        uri = CID_PREFIX + aalarm.content_id
    else:
        uri = aalarm.uri
    return Attachment(content_type=content_type, uri=uri)


def apply_attachment(attachment: Attachment, aalarm: AudioAlarm) -> AudioAlarm:
    """
    Copy an ATTACH property's sound onto an AALARM.

    The content type goes into the TYPE parameter unchanged. A "CID:" URI
    (any case) becomes a content-id.

    Args:
        attachment: The ATTACH property
        aalarm: The AALARM property to fill in

    Returns:
        The same AALARM, for chaining.
    """
    aalarm.type = attachment.content_type

    if attachment.data is not None:
        aalarm.data = attachment.data
    elif attachment.uri is not None:
        uri = attachment.uri
        if uri.upper().startswith(CID_PREFIX):
            aalarm.content_id = uri[len(CID_PREFIX):]
        else:
            aalarm.uri = uri

    return aalarm
