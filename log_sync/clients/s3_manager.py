"""
S3 client manager for the object store operations the sync needs.
"""
from typing import BinaryIO, Optional
from urllib.parse import quote

import boto3
from boto3.exceptions import Boto3Error
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from ..exceptions import RemoteServiceError, UploadFailedError
from ..models.data_models import RemoteObjectMeta


NOT_FOUND_CODES = {'404', 'NotFound', 'NoSuchKey'}


def is_not_found(error: ClientError) -> bool:
    """Return True if a ClientError means the object does not exist."""
    code = str(error.response.get('Error', {}).get('Code', ''))
    status = error.response.get('ResponseMetadata', {}).get('HTTPStatusCode')
    return code in NOT_FOUND_CODES or status == 404


class S3Manager:
    """
    Object store capability used by the change detector and the uploader.

    Authentication comes from the named credential profile, or from the
    ambient boto3 credential chain when no profile is configured. No retry
    policy is added on top of the boto3 client defaults.
    """

    def __init__(self, region: Optional[str] = None, profile: Optional[str] = None, client=None):
        """
        Initialize S3Manager.

        Args:
            region: AWS region, None for the ambient default
            profile: Shared credentials profile name, None for ambient credentials
            client: Pre-built S3 client, mainly for tests
        """
        self.region = region
        self.profile = profile
        self.client = client if client is not None else self._create_s3_client(region, profile)

        logger.info("S3Manager initialized")

    def _create_s3_client(self, region: Optional[str], profile: Optional[str]):
        """Create an S3 client from a boto3 session."""
        try:
            session = boto3.session.Session(profile_name=profile or None, region_name=region or None)
            client = session.client('s3')
            logger.debug(f"Created S3 client (profile: {profile or 'default'}, region: {session.region_name})")
            return client
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to create S3 client: {e}")
            raise RemoteServiceError(f"Failed to create S3 client: {e}") from e

    def head_object(self, bucket: str, key: str) -> RemoteObjectMeta:
        """
        Get existence and size of an object without downloading it.

        Args:
            bucket: Bucket name
            key: Object key in the bucket

        Returns:
            RemoteObjectMeta: exists=False when the store answers 'not found'

        Raises:
            RemoteServiceError: For any other failure (auth, network, service)
        """
        try:
            response = self.client.head_object(Bucket=bucket, Key=key)
        except ClientError as e:
            if is_not_found(e):
                logger.debug(f"Object not found: s3://{bucket}/{key}")
                return RemoteObjectMeta.missing()
            raise RemoteServiceError(f"Failed to query s3://{bucket}/{key}: {e}") from e
        except BotoCoreError as e:
            raise RemoteServiceError(f"Failed to query s3://{bucket}/{key}: {e}") from e

        size = response['ContentLength']
        logger.debug(f"Object exists: s3://{bucket}/{key} ({size} bytes)")
        return RemoteObjectMeta(exists=True, size_bytes=size)

    def upload_stream(self, bucket: str, key: str, stream: BinaryIO) -> str:
        """
        Stream a binary file object to the bucket.

        Args:
            bucket: Bucket name
            key: Destination object key
            stream: Open binary file object, read to the end

        Returns:
            str: Location URL of the uploaded object

        Raises:
            UploadFailedError: If the transfer fails
        """
        try:
            self.client.upload_fileobj(stream, bucket, key)
        except (ClientError, BotoCoreError, Boto3Error) as e:
            raise UploadFailedError(f"Failed to upload s3://{bucket}/{key}: {e}") from e

        return self.object_location(bucket, key)

    def object_location(self, bucket: str, key: str) -> str:
        """Build the location URL of an object from the client endpoint."""
        endpoint = self.client.meta.endpoint_url.rstrip('/')
        return f"{endpoint}/{bucket}/{quote(key)}"

    def test_connection(self, bucket: str) -> bool:
        """
        Test access to the bucket.

        Returns:
            bool: True if the bucket is reachable, False otherwise
        """
        try:
            self.client.head_bucket(Bucket=bucket)
            logger.info(f"S3 connection test successful for bucket {bucket}")
            return True
        except (ClientError, BotoCoreError) as e:
            logger.error(f"S3 connection test failed for bucket {bucket}: {e}")
            return False
