from abc import ABC, abstractmethod


class StorageError(Exception):
    """Raised by object storage implementations when the backend call fails"""


class IObjectStorage(ABC):
    """Object storage interface - application layer"""

    @abstractmethod
    async def presign_put(self, key: str, content_type: str, expires_in: int) -> str:
        """Return a URL that allows one PUT of key with content_type for expires_in seconds"""
        pass

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Public read URL for key (no network call)"""
        pass

    @abstractmethod
    async def upload_file(self, path: str, key: str, content_type: str) -> None:
        """Upload a local file under key with public-read visibility"""
        pass
