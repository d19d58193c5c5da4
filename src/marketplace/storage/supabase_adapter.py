"""Supabase Storage adapter built on the supabase client."""

import structlog
from supabase import Client, ClientOptions, StorageException, create_client

from marketplace.storage.port import StorageError, StorageGateway

logger = structlog.get_logger(__name__)


class SupabaseStorage(StorageGateway):
    def __init__(self, client: Client) -> None:
        self.client = client

    @classmethod
    def connect(cls, url: str, api_key: str) -> "SupabaseStorage":
        options = ClientOptions(persist_session=False, auto_refresh_token=False)
        return cls(create_client(url, api_key, options=options))

    def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        file_options = {"content-type": content_type, "cache-control": "3600", "upsert": "false"}
        try:
            self.client.storage.from_(bucket).upload(path, data, file_options)
        except StorageException as exc:
            logger.error("storage_upload_failed", bucket=bucket, path=path, error=str(exc))
            raise StorageError(f"Upload of {path} failed: {exc}") from exc
        return self.public_url(bucket, path)

    def public_url(self, bucket: str, path: str) -> str:
        return self.client.storage.from_(bucket).get_public_url(path)
