"""S3 storage adapter."""

from typing import Any, BinaryIO, cast

import boto3
from botocore.exceptions import BotoCoreError, ClientError

MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


class S3StorageAdapter:
    """Read-only view of the objects under an S3 prefix."""

    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        client: Any = None,
        endpoint_url: str | None = None,
        region: str | None = None,
        profile: str | None = None,
    ):
        self.bucket = bucket
        self.prefix = prefix.strip("/")
        if client is None:
            session = boto3.Session(profile_name=profile, region_name=region)
            client = session.client("s3", endpoint_url=endpoint_url)
        self.client = client

    def key_for(self, path: str) -> str:
        """Map a store path to its object key."""
        return f"{self.prefix}/{path}" if self.prefix else path

    def open(self, path: str) -> BinaryIO:
        return cast(BinaryIO, self._get_object(path)["Body"])

    def read(self, path: str) -> bytes:
        body = self._get_object(path)["Body"]
        try:
            return body.read()
        except BotoCoreError as e:
            raise OSError(f"Failed to read s3://{self.bucket}/{self.key_for(path)}: {e}") from e
        finally:
            body.close()

    def _get_object(self, path: str) -> Any:
        if not path or path.startswith("/"):
            raise FileNotFoundError(path)
        try:
            return self.client.get_object(Bucket=self.bucket, Key=self.key_for(path))
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            if code in MISSING_CODES:
                raise FileNotFoundError(path) from e
            raise OSError(f"Failed to get s3://{self.bucket}/{self.key_for(path)}: {e}") from e
        except BotoCoreError as e:
            raise OSError(f"Failed to get s3://{self.bucket}/{self.key_for(path)}: {e}") from e
