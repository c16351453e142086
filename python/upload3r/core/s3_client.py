"""S3クライアント管理"""
import threading
from typing import BinaryIO, Protocol

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from ..models.config import AWSConfig
from ..models.job import ErrorKind, UploadError
from ..utils.logger import LoggerManager


# botocoreのデフォルト接続プール数
DEFAULT_MAX_POOL_CONNECTIONS = 10


class ObjectStore(Protocol):
    """アップローダーが必要とするストレージの操作"""

    def put(self, bucket: str, key: str, body: BinaryIO, acl: str) -> None:
        ...


class S3ClientManager:
    """S3クライアントの作成と管理

    boto3のクライアントはスレッドセーフなので、作成したクライアントを
    全ワーカーで共有する。Sessionはここでの作成時にしか使わない。
    """

    def __init__(self, aws_config: AWSConfig, max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS):
        self.aws_config = aws_config
        self.max_pool_connections = max(max_pool_connections, DEFAULT_MAX_POOL_CONNECTIONS)
        self.logger = LoggerManager.get_logger()
        self._client = None
        self._lock = threading.Lock()

    def get_client(self):
        """S3クライアントを取得（必要に応じて作成）"""
        with self._lock:
            if self._client is None:
                self._client = self._create_client()
            return self._client

    def _create_client(self):
        """S3クライアントを作成"""
        try:
            if self.aws_config.has_static_credentials:
                session = boto3.Session(
                    aws_access_key_id=self.aws_config.access_key_id,
                    aws_secret_access_key=self.aws_config.secret_access_key,
                    region_name=self.aws_config.region,
                )
                source = "static"
            else:
                # 環境変数や~/.aws/credentialsなどの標準の認証情報
                session = boto3.Session(region_name=self.aws_config.region)
                source = "default"

            s3_client = session.client(
                's3',
                endpoint_url=self.aws_config.endpoint_url,
                config=BotoConfig(max_pool_connections=self.max_pool_connections),
            )
        except (BotoCoreError, ClientError, ValueError) as e:
            raise UploadError(f"Error creating S3 client: {e}", ErrorKind.SESSION) from e

        self.logger.debug(
            f"S3 client created for {self.aws_config.endpoint_url} "
            f"({self.aws_config.region}) with {source} credentials."
        )
        return s3_client


class S3ObjectStore:
    """boto3クライアントをObjectStoreとして使うアダプター"""

    def __init__(self, client_manager: S3ClientManager):
        self.client_manager = client_manager

    @classmethod
    def from_config(cls, aws_config: AWSConfig, concurrency: int) -> 'S3ObjectStore':
        """クライアントを作成してストアを返す（失敗時はUploadError）"""
        client_manager = S3ClientManager(aws_config, max_pool_connections=concurrency)
        client_manager.get_client()
        return cls(client_manager)

    def put(self, bucket: str, key: str, body: BinaryIO, acl: str) -> None:
        self.client_manager.get_client().put_object(
            Bucket=bucket,
            Key=key,
            Body=body,
            ACL=acl,
        )
