"""
Parses S3 URLs into S3 objects
"""
import logging
from typing import Any, Dict, Optional

from s3_url_utils.check import is_url
from s3_url_utils.exceptions import (
    FormatMismatchError,
    InvalidUrlError,
    NoFormatMatchError,
)
from s3_url_utils.matchers import AUTO_DETECT_ORDER, MATCHERS_BY_STYLE, Matcher
from s3_url_utils.s3_object import FormatTag, S3Object, check_field, resolve_format

logger = logging.getLogger(__name__)


def _to_s3_object(matcher: Matcher, fields: Dict[str, str]) -> S3Object:
    bucket = check_field("bucket", fields.get("bucket"))
    key = check_field("key", fields.get("key"))

    if not matcher.style.is_regional:
        return S3Object(bucket=bucket, key=key)

    region = check_field("region", fields.get("region"))
    return S3Object(bucket=bucket, key=key, region=region)


def parse_s3_url(value: Any, url_format: Optional[FormatTag] = None) -> S3Object:
    """
    Parses an S3 URL into its bucket, key and region.
    If the format is not given, it is detected: regional formats are tried first,
    then legacy formats, and the global path format last.
    :param value: The S3 URL.
    :param url_format: An S3UrlFormat or its string value.
    :return: The S3 object. The region is only set for regional formats.
    :raises InvalidUrlError: If the value is not a URL at all, whatever the format.
    :raises UnknownFormatError: If the format is not one of the known formats.
    :raises FormatMismatchError: If the URL is not in the given format.
    :raises NoFormatMatchError: If no format was given and the URL is in none of them.
    :raises InvalidFieldError: If a captured field is empty.
    """
    if not is_url(value):
        raise InvalidUrlError(f"Invalid URL: {value!r}")

    resolved_format = resolve_format(url_format)

    if resolved_format is not None:
        matcher = MATCHERS_BY_STYLE[resolved_format.style]
        fields = matcher.match(value)
        if fields is None:
            raise FormatMismatchError(resolved_format)
        return _to_s3_object(matcher, fields)

    for matcher in AUTO_DETECT_ORDER:
        fields = matcher.match(value)
        if fields is not None:
            logger.debug("Parsing %s as %s style", value, matcher.style.value)
            return _to_s3_object(matcher, fields)

    raise NoFormatMatchError("S3 URL does not match any format")
