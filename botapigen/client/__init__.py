from .downloader import download_reference
from .session import create_session

__all__ = [
    "create_session",
    "download_reference",
]
