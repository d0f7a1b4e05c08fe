"""
Module for representing S3 objects and the URL formats that address them.

Amazon S3 supports path-style URLs, where the bucket is the first path segment
(``s3.<region>.amazonaws.com/<bucket>/<key>``), and virtual-hosted-style URLs,
where the bucket is a subdomain (``<bucket>.s3.<region>.amazonaws.com/<key>``).
Both come in a legacy flavour without a region and in ``s3`` and ``https``
protocols, and there is the plain ``s3://<bucket>/<key>`` form on top.

https://docs.aws.amazon.com/general/latest/gr/s3.html
https://docs.aws.amazon.com/AmazonS3/latest/userguide/VirtualHosting.html
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from s3_url_utils.exceptions import InvalidFieldError, UnknownFormatError


class S3UrlProtocol(str, Enum):
    """URI scheme an S3 URL is written with"""

    S3 = "s3"
    HTTPS = "https"


class S3UrlStyle(str, Enum):
    """Layout of an S3 URL, independent of its protocol"""

    GLOBAL_PATH = "global-path"
    LEGACY_PATH = "legacy-path"
    LEGACY_VIRTUAL_HOST = "legacy-virtual-host"
    REGION_PATH = "region-path"
    REGION_VIRTUAL_HOST = "region-virtual-host"

    @property
    def is_regional(self) -> bool:
        """True if URLs in this style carry a region"""
        return self in (S3UrlStyle.REGION_PATH, S3UrlStyle.REGION_VIRTUAL_HOST)


class S3UrlFormat(str, Enum):
    """The S3 URL formats that can be checked, parsed and formatted"""

    S3_GLOBAL_PATH = "s3-global-path"
    S3_LEGACY_PATH = "s3-legacy-path"
    S3_LEGACY_VIRTUAL_HOST = "s3-legacy-virtual-host"
    S3_REGION_PATH = "s3-region-path"
    S3_REGION_VIRTUAL_HOST = "s3-region-virtual-host"
    HTTPS_LEGACY_PATH = "https-legacy-path"
    HTTPS_LEGACY_VIRTUAL_HOST = "https-legacy-virtual-host"
    HTTPS_REGION_PATH = "https-region-path"
    HTTPS_REGION_VIRTUAL_HOST = "https-region-virtual-host"

    @property
    def style(self) -> S3UrlStyle:
        """The layout this format is written in"""
        return FORMAT_TABLE[self][0]

    @property
    def protocol(self) -> S3UrlProtocol:
        """The scheme this format is written with"""
        return FORMAT_TABLE[self][1]

    @property
    def is_regional(self) -> bool:
        """True if URLs in this format carry a region"""
        return self.style.is_regional

    def __str__(self):
        return self.value


FORMAT_TABLE: Dict[S3UrlFormat, Tuple[S3UrlStyle, S3UrlProtocol]] = {
    S3UrlFormat.S3_GLOBAL_PATH: (S3UrlStyle.GLOBAL_PATH, S3UrlProtocol.S3),
    S3UrlFormat.S3_LEGACY_PATH: (S3UrlStyle.LEGACY_PATH, S3UrlProtocol.S3),
    S3UrlFormat.S3_LEGACY_VIRTUAL_HOST: (
        S3UrlStyle.LEGACY_VIRTUAL_HOST,
        S3UrlProtocol.S3,
    ),
    S3UrlFormat.S3_REGION_PATH: (S3UrlStyle.REGION_PATH, S3UrlProtocol.S3),
    S3UrlFormat.S3_REGION_VIRTUAL_HOST: (
        S3UrlStyle.REGION_VIRTUAL_HOST,
        S3UrlProtocol.S3,
    ),
    S3UrlFormat.HTTPS_LEGACY_PATH: (S3UrlStyle.LEGACY_PATH, S3UrlProtocol.HTTPS),
    S3UrlFormat.HTTPS_LEGACY_VIRTUAL_HOST: (
        S3UrlStyle.LEGACY_VIRTUAL_HOST,
        S3UrlProtocol.HTTPS,
    ),
    S3UrlFormat.HTTPS_REGION_PATH: (S3UrlStyle.REGION_PATH, S3UrlProtocol.HTTPS),
    S3UrlFormat.HTTPS_REGION_VIRTUAL_HOST: (
        S3UrlStyle.REGION_VIRTUAL_HOST,
        S3UrlProtocol.HTTPS,
    ),
}

DEFAULT_FORMAT = S3UrlFormat.S3_GLOBAL_PATH

FormatTag = Union[S3UrlFormat, str]


def resolve_format(url_format: Optional[FormatTag]) -> Optional[S3UrlFormat]:
    """
    Turns a format tag into an S3UrlFormat.
    :param url_format: An S3UrlFormat, its string value, or None.
    :return: The matching S3UrlFormat, or None if no format was given.
    :raises UnknownFormatError: If the tag is not one of the known formats.
    """
    if url_format is None:
        return None

    try:
        return S3UrlFormat(url_format)
    except (ValueError, TypeError) as err:
        raise UnknownFormatError(url_format) from err


def check_field(field: str, value: Any) -> str:
    """
    Validates a bucket, key or region value.
    :param field: Name of the field, used in the error.
    :param value: The value to validate.
    :return: The value, unchanged.
    :raises InvalidFieldError: If the value is not a string, or is empty or whitespace-only.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidFieldError(field, value)

    return value


@dataclass(frozen=True)
class S3Object:
    """An object in S3, addressed by bucket and key and optionally by region"""

    bucket: str
    key: str
    region: Optional[str] = None

    def __post_init__(self):
        check_field("bucket", self.bucket)
        check_field("key", self.key)
        if self.region is not None:
            check_field("region", self.region)

    @property
    def url(self) -> str:
        """The object as a global path-style URL"""
        return f"s3://{self.bucket}/{self.key}"

    def to_dict(self) -> Dict[str, str]:
        """The object as a dict, leaving out the region when there is none"""
        result = {"bucket": self.bucket, "key": self.key}
        if self.region is not None:
            result["region"] = self.region
        return result

    def __str__(self):
        return self.url
