from .client import UploadError, upload_file

__all__ = [
    "UploadError",
    "upload_file",
]
