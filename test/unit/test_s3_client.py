"""Contains tests for the URL based S3 client"""
import random
import string
from unittest import TestCase
from unittest.mock import MagicMock, patch

import boto3
from botocore.exceptions import ClientError
from moto import mock_aws

from s3_url_utils.clients.s3 import S3, to_s3_object
from s3_url_utils.exceptions import NoFormatMatchError
from s3_url_utils.s3_object import S3Object

TEST_BUCKET_NAME = "test-bucket-name"
TEST_BUCKET_REGION = "us-west-2"
TEST_OBJECT_KEY = "prefix/" + "".join(random.choices(string.ascii_lowercase, k=10))
TEST_OBJECT_BODY = "".join(random.choices(string.ascii_uppercase + string.digits, k=400))


@mock_aws
class TestS3Client(TestCase):
    """Class for testing the URL based S3 client"""

    def setUp(self):
        client = boto3.client("s3", region_name=TEST_BUCKET_REGION)
        client.create_bucket(
            Bucket=TEST_BUCKET_NAME,
            CreateBucketConfiguration={"LocationConstraint": TEST_BUCKET_REGION},
        )
        client.put_object(
            Bucket=TEST_BUCKET_NAME, Key=TEST_OBJECT_KEY, Body=TEST_OBJECT_BODY
        )
        self.helper = S3(client)

    def test_read_file(self):
        """Test that we can read a file in any URL format"""
        for url in (
            f"s3://{TEST_BUCKET_NAME}/{TEST_OBJECT_KEY}",
            f"https://{TEST_BUCKET_NAME}.s3.amazonaws.com/{TEST_OBJECT_KEY}",
            f"https://s3-{TEST_BUCKET_REGION}.amazonaws.com/{TEST_BUCKET_NAME}/{TEST_OBJECT_KEY}",
        ):
            with self.subTest(url=url):
                self.assertEqual(TEST_OBJECT_BODY, self.helper.read_file(url))

    def test_read_file_from_object(self):
        """Test that we can read a file addressed by an S3Object"""
        s3_object = S3Object(bucket=TEST_BUCKET_NAME, key=TEST_OBJECT_KEY)

        self.assertEqual(TEST_OBJECT_BODY, self.helper.read_file(s3_object))

    def test_write_file(self):
        """Test that we can write a file"""
        url = f"s3://{TEST_BUCKET_NAME}/written/file.txt"
        body = "".join(random.choices(string.ascii_uppercase + string.digits, k=80))

        self.helper.write_file(url, body)

        self.assertEqual(body, self.helper.read_file(url))

    def test_exists(self):
        """Test that existing and missing objects are told apart"""
        self.assertTrue(self.helper.exists(f"s3://{TEST_BUCKET_NAME}/{TEST_OBJECT_KEY}"))
        self.assertFalse(self.helper.exists(f"s3://{TEST_BUCKET_NAME}/missing"))

    def test_exists_other_error(self):
        """Test that errors other than not found are raised"""
        mock_s3_client = MagicMock()
        mock_s3_client.head_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied"}}, "HeadObject"
        )
        self.helper.s3 = mock_s3_client

        with self.assertRaises(ClientError):
            self.helper.exists(f"s3://{TEST_BUCKET_NAME}/{TEST_OBJECT_KEY}")

    def test_delete_file(self):
        """Test that we can delete a file"""
        url = f"s3://{TEST_BUCKET_NAME}/{TEST_OBJECT_KEY}"

        self.helper.delete_file(url)

        self.assertFalse(self.helper.exists(url))

    def test_copy_file(self):
        """Test that we can copy a file between URLs of different formats"""
        destination = f"https://{TEST_BUCKET_NAME}.s3.{TEST_BUCKET_REGION}.amazonaws.com/copy"

        self.helper.copy_file(f"s3://{TEST_BUCKET_NAME}/{TEST_OBJECT_KEY}", destination)

        self.assertEqual(TEST_OBJECT_BODY, self.helper.read_file(destination))

    def test_get_bucket_region(self):
        """Test that the bucket region is looked up"""
        self.assertEqual(
            TEST_BUCKET_REGION, self.helper.get_bucket_region(TEST_BUCKET_NAME)
        )

    def test_get_bucket_region_us_east_1(self):
        """Test that an empty location constraint means us-east-1"""
        mock_s3_client = MagicMock()
        mock_s3_client.get_bucket_location.return_value = {"LocationConstraint": None}
        self.helper.s3 = mock_s3_client

        self.assertEqual("us-east-1", self.helper.get_bucket_region("any-bucket"))

    @patch("s3_url_utils.clients.s3.logger")
    def test_regionalize(self, mock_logger):
        """Test that a global URL gets the bucket region"""
        self.assertEqual(
            f"https://{TEST_BUCKET_NAME}.s3.{TEST_BUCKET_REGION}.amazonaws.com/{TEST_OBJECT_KEY}",
            self.helper.regionalize(f"s3://{TEST_BUCKET_NAME}/{TEST_OBJECT_KEY}"),
        )
        mock_logger.debug.assert_called_once_with(
            "Bucket %s is in region %s", TEST_BUCKET_NAME, TEST_BUCKET_REGION
        )

    def test_regionalize_keeps_region(self):
        """Test that a URL that already has a region is not looked up"""
        mock_s3_client = MagicMock()
        self.helper.s3 = mock_s3_client

        self.assertEqual(
            "s3://s3.eu-west-1.amazonaws.com/other-bucket/key",
            self.helper.regionalize(
                "https://s3-eu-west-1.amazonaws.com/other-bucket/key", "s3-region-path"
            ),
        )
        mock_s3_client.get_bucket_location.assert_not_called()

    def test_invalid_url(self):
        """Test that URLs that are not S3 URLs are rejected before calling S3"""
        mock_s3_client = MagicMock()
        self.helper.s3 = mock_s3_client

        with self.assertRaises(NoFormatMatchError):
            self.helper.read_file("https://example.com/file")

        mock_s3_client.get_object.assert_not_called()


class TestToS3Object(TestCase):
    """Class for testing to_s3_object"""

    def test_to_s3_object(self):
        """URLs are parsed and S3Objects are passed through"""
        s3_object = S3Object(bucket="b", key="k")

        self.assertIs(s3_object, to_s3_object(s3_object))
        self.assertEqual(s3_object, to_s3_object("s3://b/k"))
