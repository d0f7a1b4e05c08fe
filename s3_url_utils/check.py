"""
Checks whether values are S3 URLs, and in which format
"""
import logging
from typing import Any, Optional
from urllib.parse import urlparse

from s3_url_utils.matchers import AUTO_DETECT_ORDER, MATCHERS_BY_STYLE
from s3_url_utils.s3_object import FormatTag, S3UrlFormat, resolve_format

logger = logging.getLogger(__name__)

# Characters that can never appear in a host name
FORBIDDEN_HOST_CHARACTERS = frozenset(" \t\n\r\x00<>^|\\")


def is_url(value: Any) -> bool:
    """
    Checks for generic URL syntax, regardless of the scheme.
    :param value: Anything.
    :return: True if the value is a string with a URL scheme and a well formed host.
    """
    if not isinstance(value, str):
        return False

    try:
        parsed = urlparse(value)
    except ValueError:
        # e.g. an unbalanced IPv6 bracket in the netloc
        return False

    if not parsed.scheme:
        return False

    return not any(
        char in FORBIDDEN_HOST_CHARACTERS or char.isspace() for char in parsed.netloc
    )


def is_s3_url(value: Any, url_format: Optional[FormatTag] = None) -> bool:
    """
    Checks if the given value is a valid S3 URL.
    If the format is given, the URL has to match that format.
    If the format is not given, the URL has to match any of the known formats.
    :param value: Anything.
    :param url_format: An S3UrlFormat or its string value.
    :return: True if the value is an S3 URL. Values that are not URLs are always False.
    :raises UnknownFormatError: If the value is a URL and the format is not one of the known formats.
    """
    if not is_url(value):
        return False

    resolved_format = resolve_format(url_format)

    if resolved_format is None:
        return any(matcher.test(value) for matcher in AUTO_DETECT_ORDER)

    return MATCHERS_BY_STYLE[resolved_format.style].test(value)


def detect_format(value: Any) -> Optional[S3UrlFormat]:
    """
    Works out which format an S3 URL is written in, using the same precedence as parsing.
    :param value: Anything.
    :return: The S3UrlFormat of the URL, or None if it is not an S3 URL.
    """
    if not is_url(value):
        return None

    for matcher in AUTO_DETECT_ORDER:
        fields = matcher.match(value)
        if fields is None:
            continue

        protocol = fields.get("protocol", "s3")
        url_format = S3UrlFormat(f"{protocol}-{matcher.style.value}")
        logger.debug("Detected format %s for %s", url_format.value, value)
        return url_format

    return None
