"""
Container for s3_url_utils exceptions
"""


class S3UrlError(ValueError):
    """Base error for values that cannot be treated as an S3 URL or S3 object"""


class InvalidUrlError(S3UrlError):
    """Error raised when a value is not a string or not a syntactically valid URL"""


class NoFormatMatchError(S3UrlError):
    """Error raised when a URL matches none of the known S3 URL formats"""


class FormatMismatchError(S3UrlError):
    """Error raised when a URL does not match the S3 URL format that was asked for"""

    def __init__(self, url_format):
        super().__init__(f"S3 URL does not match format: {url_format}")
        self.url_format = url_format


class InvalidFieldError(S3UrlError):
    """
    Error raised when the bucket, key or region of an S3 object is missing,
    empty or whitespace-only
    """

    def __init__(self, field, value):
        super().__init__(f"Invalid S3 {field}: {value!r}")
        self.field = field
        self.value = value


class UnknownFormatError(RuntimeError):
    """
    Error raised when a format tag outside of S3UrlFormat is passed in.
    This is a programming error, so it is not an S3UrlError.
    """

    def __init__(self, url_format):
        super().__init__(f"Unknown S3 URL format: {url_format!r}")
        self.url_format = url_format
