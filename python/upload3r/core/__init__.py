"""upload3r コアモジュール"""
from .s3_client import ObjectStore, S3ClientManager, S3ObjectStore
from .uploader import UploadExecutor, ParallelUploadExecutor
from .task_runner import TaskRunner

__all__ = [
    'ObjectStore',
    'S3ClientManager',
    'S3ObjectStore',
    'UploadExecutor',
    'ParallelUploadExecutor',
    'TaskRunner'
]
