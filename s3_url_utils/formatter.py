"""
Formats S3 objects as S3 URLs.

Regions are always written in dot style, ``s3.<region>.amazonaws.com``.
The deprecated dash style ``s3-<region>.amazonaws.com`` is accepted by the parser
but never produced here.
"""
from typing import Any, Callable, Dict, Mapping, Optional, Union

from s3_url_utils.matchers import AWS_DOMAIN
from s3_url_utils.parser import parse_s3_url
from s3_url_utils.s3_object import (
    DEFAULT_FORMAT,
    FormatTag,
    S3Object,
    S3UrlProtocol,
    S3UrlStyle,
    check_field,
    resolve_format,
)

S3ObjectLike = Union[S3Object, Mapping[str, Any]]


def _get(s3_object: S3ObjectLike, field: str) -> Any:
    if isinstance(s3_object, Mapping):
        return s3_object.get(field)
    return getattr(s3_object, field, None)


def _bucket_and_key(s3_object: S3ObjectLike):
    bucket = check_field("bucket", _get(s3_object, "bucket"))
    key = check_field("key", _get(s3_object, "key"))
    return bucket, key


def _region(s3_object: S3ObjectLike) -> str:
    return check_field("region", _get(s3_object, "region"))


def _format_global_path(s3_object: S3ObjectLike, _: S3UrlProtocol) -> str:
    bucket, key = _bucket_and_key(s3_object)
    return f"s3://{bucket}/{key}"


def _format_legacy_path(s3_object: S3ObjectLike, protocol: S3UrlProtocol) -> str:
    bucket, key = _bucket_and_key(s3_object)
    return f"{protocol.value}://s3.{AWS_DOMAIN}/{bucket}/{key}"


def _format_legacy_virtual_host(
    s3_object: S3ObjectLike, protocol: S3UrlProtocol
) -> str:
    bucket, key = _bucket_and_key(s3_object)
    return f"{protocol.value}://{bucket}.s3.{AWS_DOMAIN}/{key}"


def _format_region_path(s3_object: S3ObjectLike, protocol: S3UrlProtocol) -> str:
    bucket, key = _bucket_and_key(s3_object)
    region = _region(s3_object)
    return f"{protocol.value}://s3.{region}.{AWS_DOMAIN}/{bucket}/{key}"


def _format_region_virtual_host(
    s3_object: S3ObjectLike, protocol: S3UrlProtocol
) -> str:
    bucket, key = _bucket_and_key(s3_object)
    region = _region(s3_object)
    return f"{protocol.value}://{bucket}.s3.{region}.{AWS_DOMAIN}/{key}"


FORMATTERS_BY_STYLE: Dict[S3UrlStyle, Callable[[S3ObjectLike, S3UrlProtocol], str]] = {
    S3UrlStyle.GLOBAL_PATH: _format_global_path,
    S3UrlStyle.LEGACY_PATH: _format_legacy_path,
    S3UrlStyle.LEGACY_VIRTUAL_HOST: _format_legacy_virtual_host,
    S3UrlStyle.REGION_PATH: _format_region_path,
    S3UrlStyle.REGION_VIRTUAL_HOST: _format_region_virtual_host,
}


def format_s3_url(
    s3_object: S3ObjectLike, url_format: Optional[FormatTag] = None
) -> str:
    """
    Formats an S3 object as a URL in the given format.
    If the format is not given, the global path format (s3://<bucket>/<key>) is used.
    Regional formats need the region to be set on the object.
    :param s3_object: An S3Object, or a mapping with bucket, key and optionally region.
    :param url_format: An S3UrlFormat or its string value.
    :return: The URL.
    :raises UnknownFormatError: If the format is not one of the known formats.
    :raises InvalidFieldError: If the bucket, key or a required region is blank.
    """
    resolved_format = resolve_format(url_format) or DEFAULT_FORMAT

    formatter = FORMATTERS_BY_STYLE.get(resolved_format.style)
    assert formatter is not None, f"No formatter for style {resolved_format.style}"

    return formatter(s3_object, resolved_format.protocol)


def convert_s3_url(
    value: Any, url_format: FormatTag, region: Optional[str] = None
) -> str:
    """
    Rewrites an S3 URL from whatever format it is in to the given format.
    :param value: The S3 URL, in any of the known formats.
    :param url_format: The format to convert to.
    :param region: Region to use instead of the one in the URL, e.g. when converting
    a global URL to a regional format.
    :return: The URL in the new format.
    """
    resolved_format = resolve_format(url_format)
    s3_object = parse_s3_url(value)

    if region is not None:
        s3_object = S3Object(bucket=s3_object.bucket, key=s3_object.key, region=region)

    return format_s3_url(s3_object, resolved_format)
