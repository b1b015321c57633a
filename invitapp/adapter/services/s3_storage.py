"""
S3 object storage backed by boto3.

Blocking boto3 calls run in a worker thread so a slow upload never holds
up other requests on the event loop.
"""

import asyncio
import logging
from typing import Optional

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from invitapp.app.services.object_storage import IObjectStorage, StorageError

logger = logging.getLogger(__name__)


def public_s3_url(bucket: str, region: str, key: str) -> str:
    """Return a direct HTTPS URL for the object; a pure function of its inputs."""
    if region == "us-east-1":
        return f"https://{bucket}.s3.amazonaws.com/{key}"
    return f"https://{bucket}.s3.{region}.amazonaws.com/{key}"


class S3ObjectStorage(IObjectStorage):
    """IObjectStorage implementation for AWS S3"""

    def __init__(
        self,
        bucket: str,
        region: str,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        client=None,
    ):
        self.bucket = bucket
        self.region = region
        self.client = client or self._build_client(region, access_key_id, secret_access_key)

    @staticmethod
    def _build_client(region: str, access_key_id: Optional[str], secret_access_key: Optional[str]):
        # Sign against the regional endpoint so buckets outside us-east-1 accept the URL
        endpoint = (
            f"https://s3.{region}.amazonaws.com"
            if region != "us-east-1"
            else "https://s3.amazonaws.com"
        )
        params = {
            "region_name": region,
            "config": Config(signature_version="s3v4"),
            "endpoint_url": endpoint,
        }
        if access_key_id and secret_access_key:
            params.update(
                {
                    "aws_access_key_id": access_key_id,
                    "aws_secret_access_key": secret_access_key,
                }
            )
        return boto3.client("s3", **params)

    async def presign_put(self, key: str, content_type: str, expires_in: int) -> str:
        try:
            return await asyncio.to_thread(
                self.client.generate_presigned_url,
                ClientMethod="put_object",
                Params={"Bucket": self.bucket, "Key": key, "ContentType": content_type},
                ExpiresIn=expires_in,
                HttpMethod="PUT",
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(str(exc)) from exc

    def public_url(self, key: str) -> str:
        return public_s3_url(self.bucket, self.region, key)

    async def upload_file(self, path: str, key: str, content_type: str) -> None:
        try:
            await asyncio.to_thread(
                self.client.upload_file,
                path,
                self.bucket,
                key,
                ExtraArgs={"ContentType": content_type, "ACL": "public-read"},
            )
        except (BotoCoreError, ClientError, S3UploadFailedError) as exc:
            logger.error(f"S3 upload of {key} to {self.bucket} failed: {exc}")
            raise StorageError(str(exc)) from exc
