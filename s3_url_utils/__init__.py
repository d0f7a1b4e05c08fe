"""Recognize, parse and format S3 URLs in all of their dialects"""
from s3_url_utils.check import detect_format, is_s3_url, is_url
from s3_url_utils.exceptions import (
    FormatMismatchError,
    InvalidFieldError,
    InvalidUrlError,
    NoFormatMatchError,
    S3UrlError,
    UnknownFormatError,
)
from s3_url_utils.formatter import convert_s3_url, format_s3_url
from s3_url_utils.parser import parse_s3_url
from s3_url_utils.s3_object import S3Object, S3UrlFormat, S3UrlProtocol
from s3_url_utils.version import __version__

__all__ = [
    "FormatMismatchError",
    "InvalidFieldError",
    "InvalidUrlError",
    "NoFormatMatchError",
    "S3Object",
    "S3UrlError",
    "S3UrlFormat",
    "S3UrlProtocol",
    "UnknownFormatError",
    "convert_s3_url",
    "detect_format",
    "format_s3_url",
    "is_s3_url",
    "is_url",
    "parse_s3_url",
    "__version__",
]
