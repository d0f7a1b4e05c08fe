"""
Manage interaction with the S3 API using S3 URLs
"""
import logging
from typing import Union

from botocore.exceptions import ClientError

from mypy_boto3_s3.client import S3Client

from s3_url_utils.formatter import format_s3_url
from s3_url_utils.parser import parse_s3_url
from s3_url_utils.s3_object import (
    DEFAULT_FORMAT,
    FormatTag,
    S3Object,
    resolve_format,
)

logger = logging.getLogger(__name__)

# get_bucket_location returns no LocationConstraint for buckets in us-east-1
DEFAULT_REGION = "us-east-1"

NOT_FOUND_CODES = ("404", "NoSuchKey", "NotFound")

S3Address = Union[str, S3Object]


def to_s3_object(address: S3Address) -> S3Object:
    """
    Convenience function for accepting either a URL or an already parsed S3 object.
    :param address: An S3 URL in any of the known formats, or an S3Object.
    :return: The S3 object.
    """
    if isinstance(address, S3Object):
        return address
    return parse_s3_url(address)


class S3:
    """
    A simple class for managing interaction with the S3 API, addressing objects by URL
    """

    def __init__(self, s3: S3Client):
        # pylint: disable=invalid-name
        self.s3 = s3

    def read_file(self, url: S3Address, **kwargs) -> str:
        """
        Convenience function for reading an object out of S3.
        :param url: URL of the object.
        :param kwargs: Any additional arguments to pass to the underlying boto call.
        :return: The contents of the object, read and decoded as utf-8.
        """
        s3_object = to_s3_object(url)
        logger.debug("Reading %s", s3_object)

        response = self.s3.get_object(
            Bucket=s3_object.bucket, Key=s3_object.key, **kwargs
        )
        return response["Body"].read().decode("utf-8")

    def write_file(self, url: S3Address, body: str, **kwargs):
        """
        Convenience function for writing an object to S3.
        :param url: URL of the object.
        :param body: The contents of the object.
        :param kwargs: Any additional arguments to pass to the underlying boto call.
        """
        s3_object = to_s3_object(url)
        logger.debug("Writing %s", s3_object)

        self.s3.put_object(
            Bucket=s3_object.bucket, Key=s3_object.key, Body=body, **kwargs
        )

    def delete_file(self, url: S3Address, **kwargs):
        """
        Convenience function for deleting an object out of S3.
        :param url: URL of the object.
        :param kwargs: Any additional arguments to pass to the underlying boto call.
        """
        s3_object = to_s3_object(url)
        logger.info("Deleting %s", s3_object)

        self.s3.delete_object(Bucket=s3_object.bucket, Key=s3_object.key, **kwargs)

    def exists(self, url: S3Address) -> bool:
        """
        Convenience function for checking if an object exists.
        :param url: URL of the object.
        :return: True if the object exists, False if S3 reports it as not found.
        """
        s3_object = to_s3_object(url)

        try:
            self.s3.head_object(Bucket=s3_object.bucket, Key=s3_object.key)
        except ClientError as err:
            error_code = err.response["Error"].get("Code", "Unknown")
            if error_code in NOT_FOUND_CODES:
                return False
            raise

        return True

    def copy_file(self, source_url: S3Address, destination_url: S3Address, **kwargs):
        """
        Convenience function for copying an S3 object, possibly to another bucket.
        :param source_url: URL of the source object.
        :param destination_url: URL of the destination object.
        :param kwargs: Any additional arguments to pass to the underlying boto call.
        """
        source = to_s3_object(source_url)
        destination = to_s3_object(destination_url)
        logger.info("Copying %s to %s", source, destination)

        self.s3.copy_object(
            Bucket=destination.bucket,
            Key=destination.key,
            CopySource={"Bucket": source.bucket, "Key": source.key},
            **kwargs,
        )

    def get_bucket_region(self, bucket: str) -> str:
        """
        Convenience function for looking up the region a bucket lives in.
        :param bucket: Name of the bucket.
        :return: The region name.
        """
        response = self.s3.get_bucket_location(Bucket=bucket)
        return response.get("LocationConstraint") or DEFAULT_REGION

    def regionalize(
        self, url: S3Address, url_format: FormatTag = "https-region-virtual-host"
    ) -> str:
        """
        Rewrites a URL in a regional format, looking up the bucket region if the URL has none.
        :param url: An S3 URL in any of the known formats, or an S3Object.
        :param url_format: The regional format to write the URL in.
        :return: The regional URL.
        """
        resolved_format = resolve_format(url_format) or DEFAULT_FORMAT
        s3_object = to_s3_object(url)

        if resolved_format.is_regional and s3_object.region is None:
            region = self.get_bucket_region(s3_object.bucket)
            logger.debug("Bucket %s is in region %s", s3_object.bucket, region)
            s3_object = S3Object(
                bucket=s3_object.bucket, key=s3_object.key, region=region
            )

        return format_s3_url(s3_object, resolved_format)
