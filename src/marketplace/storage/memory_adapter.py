"""In-process object storage for development and tests."""

from marketplace.storage.port import StorageError, StorageGateway


class InMemoryStorage(StorageGateway):
    base_url = "https://storage.marketplace.local"

    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], tuple[bytes, str]] = {}
        self.fail_paths: set[str] = set()

    def fail_uploads_matching(self, fragment: str) -> None:
        """Make uploads whose path contains ``fragment`` fail."""
        self.fail_paths.add(fragment)

    def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        if any(fragment in path for fragment in self.fail_paths):
            raise StorageError(f"Upload of {path} failed")
        if (bucket, path) in self.objects:
            raise StorageError(f"{bucket}/{path} already exists")
        self.objects[(bucket, path)] = (data, content_type)
        return self.public_url(bucket, path)

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/{bucket}/{path}"
