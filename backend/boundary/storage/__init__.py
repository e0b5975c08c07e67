"""
Object storage boundary.

Exports: S3StorageClient, StoredFile, build_file_key
"""

from .s3_client import S3StorageClient, StoredFile, build_file_key

__all__ = ["S3StorageClient", "StoredFile", "build_file_key"]
