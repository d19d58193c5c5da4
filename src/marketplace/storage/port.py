"""Object storage port.

Product photos and donated-goods photos live in the external backend's
object storage. Everything in the marketplace uploads through this
contract and keeps only the public URL it returns.
"""

from abc import ABC, abstractmethod


class StorageError(Exception):
    """The storage backend rejected or failed an upload."""


class StorageGateway(ABC):
    @abstractmethod
    def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        """Store ``data`` at ``bucket/path`` and return its public URL."""
        ...

    @abstractmethod
    def public_url(self, bucket: str, path: str) -> str:
        ...
