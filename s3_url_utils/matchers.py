"""
Pattern matchers for the S3 URL styles.

Matching is purely syntactic. The bucket of a path-style URL runs up to the first ``/``,
the bucket of a virtual-hosted-style URL and any region run up to the next ``.``,
and the key is everything that is left, ``/`` included.
"""
import re
from typing import Dict, Optional, Sequence

from s3_url_utils.s3_object import S3UrlStyle

AWS_DOMAIN = "amazonaws.com"

# s3://<bucket>/<key>
GLOBAL_PATH_STYLE_REGEX = re.compile(r"s3://(?P<bucket>[^/]+)/(?P<key>.+)")

# <s3|https>://s3.amazonaws.com/<bucket>/<key>
# https://docs.aws.amazon.com/AmazonS3/latest/userguide/VirtualHosting.html#VirtualHostingBackwardsCompatibility
LEGACY_PATH_STYLE_REGEX = re.compile(
    r"(?P<protocol>s3|https)://s3\.amazonaws\.com/(?P<bucket>[^/]+)/(?P<key>.+)"
)

# <s3|https>://<bucket>.s3.amazonaws.com/<key>
LEGACY_VIRTUAL_HOST_STYLE_REGEX = re.compile(
    r"(?P<protocol>s3|https)://(?P<bucket>[^.]+)\.s3\.amazonaws\.com/(?P<key>.+)"
)

# <s3|https>://s3.<region>.amazonaws.com/<bucket>/<key>
# https://docs.aws.amazon.com/AmazonS3/latest/userguide/VirtualHosting.html#path-style-access
DOT_REGION_PATH_STYLE_REGEX = re.compile(
    r"(?P<protocol>s3|https)://s3\.(?P<region>[^.]+)\.amazonaws\.com/(?P<bucket>[^/]+)/(?P<key>.+)"
)

# <s3|https>://s3-<region>.amazonaws.com/<bucket>/<key>, deprecated
DASH_REGION_PATH_STYLE_REGEX = re.compile(
    r"(?P<protocol>s3|https)://s3-(?P<region>[^.]+)\.amazonaws\.com/(?P<bucket>[^/]+)/(?P<key>.+)"
)

# <s3|https>://<bucket>.s3.<region>.amazonaws.com/<key>
# https://docs.aws.amazon.com/AmazonS3/latest/userguide/VirtualHosting.html#virtual-hosted-style-access
DOT_REGION_VIRTUAL_HOST_STYLE_REGEX = re.compile(
    r"(?P<protocol>s3|https)://(?P<bucket>[^.]+)\.s3\.(?P<region>[^.]+)\.amazonaws\.com/(?P<key>.+)"
)

# <s3|https>://<bucket>.s3-<region>.amazonaws.com/<key>, deprecated
DASH_REGION_VIRTUAL_HOST_STYLE_REGEX = re.compile(
    r"(?P<protocol>s3|https)://(?P<bucket>[^.]+)\.s3-(?P<region>[^.]+)\.amazonaws\.com/(?P<key>.+)"
)


class Matcher:
    """
    Recognizes one S3 URL style.

    A style can have more than one spelling, e.g. the dot and dash region hostnames,
    so the patterns are tried in order and the first one that matches wins.
    """

    def __init__(self, style: S3UrlStyle, patterns: Sequence[re.Pattern]):
        self.style = style
        self.patterns = tuple(patterns)

    def test(self, url: str) -> bool:
        """
        Checks the shape of a URL without validating the captured fields.
        :param url: The URL to check.
        :return: True if any of the patterns matches the whole URL.
        """
        return any(pattern.fullmatch(url) for pattern in self.patterns)

    def match(self, url: str) -> Optional[Dict[str, str]]:
        """
        Extracts the fields of a URL.
        :param url: The URL to match.
        :return: The captured fields, verbatim, or None if the URL has another shape.
        """
        for pattern in self.patterns:
            result = pattern.fullmatch(url)
            if result:
                return result.groupdict()
        return None

    def __repr__(self):
        return f"Matcher(style='{self.style.value}')"


GLOBAL_PATH = Matcher(S3UrlStyle.GLOBAL_PATH, [GLOBAL_PATH_STYLE_REGEX])
LEGACY_PATH = Matcher(S3UrlStyle.LEGACY_PATH, [LEGACY_PATH_STYLE_REGEX])
LEGACY_VIRTUAL_HOST = Matcher(
    S3UrlStyle.LEGACY_VIRTUAL_HOST, [LEGACY_VIRTUAL_HOST_STYLE_REGEX]
)
REGION_PATH = Matcher(
    S3UrlStyle.REGION_PATH,
    [DOT_REGION_PATH_STYLE_REGEX, DASH_REGION_PATH_STYLE_REGEX],
)
REGION_VIRTUAL_HOST = Matcher(
    S3UrlStyle.REGION_VIRTUAL_HOST,
    [DOT_REGION_VIRTUAL_HOST_STYLE_REGEX, DASH_REGION_VIRTUAL_HOST_STYLE_REGEX],
)

MATCHERS_BY_STYLE: Dict[S3UrlStyle, Matcher] = {
    matcher.style: matcher
    for matcher in (
        GLOBAL_PATH,
        LEGACY_PATH,
        LEGACY_VIRTUAL_HOST,
        REGION_PATH,
        REGION_VIRTUAL_HOST,
    )
}

# Global path goes last: s3://<anything>/<anything> also matches every other s3:// shape,
# and s3.amazonaws.com is a valid bucket name.
AUTO_DETECT_ORDER = (
    REGION_PATH,
    REGION_VIRTUAL_HOST,
    LEGACY_PATH,
    LEGACY_VIRTUAL_HOST,
    GLOBAL_PATH,
)


def is_global_path_style(url: str) -> bool:
    """Returns true if the URL looks like s3://<bucket>/<key>"""
    return GLOBAL_PATH.test(url)


def is_legacy_path_style(url: str) -> bool:
    """Returns true if the URL looks like <s3|https>://s3.amazonaws.com/<bucket>/<key>"""
    return LEGACY_PATH.test(url)


def is_legacy_virtual_host_style(url: str) -> bool:
    """Returns true if the URL looks like <s3|https>://<bucket>.s3.amazonaws.com/<key>"""
    return LEGACY_VIRTUAL_HOST.test(url)


def is_region_path_style(url: str) -> bool:
    """Returns true if the URL looks like <s3|https>://s3.<region>.amazonaws.com/<bucket>/<key>"""
    return REGION_PATH.test(url)


def is_region_virtual_host_style(url: str) -> bool:
    """Returns true if the URL looks like <s3|https>://<bucket>.s3.<region>.amazonaws.com/<key>"""
    return REGION_VIRTUAL_HOST.test(url)
