"""設定管理用のデータクラス"""
from dataclasses import dataclass, field
from typing import Optional
import re


DEFAULT_ENDPOINT = "https://hb.bizmrg.com"
DEFAULT_REGION = "ru-msk"
DEFAULT_PERMISSIONS = "private"
DEFAULT_CONCURRENCY = 10

# S3のcanned ACL
CANNED_ACLS = (
    "private",
    "public-read",
    "public-read-write",
    "authenticated-read",
    "aws-exec-read",
    "bucket-owner-read",
    "bucket-owner-full-control",
)


@dataclass(frozen=True)
class LoggingConfig:
    """ロギング設定"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass(frozen=True)
class AWSConfig:
    """S3接続の設定"""
    endpoint_url: str = DEFAULT_ENDPOINT
    region: str = DEFAULT_REGION
    access_key_id: str = ""
    secret_access_key: str = field(default="", repr=False)

    def __post_init__(self):
        """エンドポイントのバリデーション"""
        if not re.match(r'^https?://[^/\s]+', self.endpoint_url):
            raise ValueError(
                f"Invalid endpoint: {self.endpoint_url}. "
                "Expected format: http(s)://HOST[:PORT]"
            )

    @property
    def has_static_credentials(self) -> bool:
        return bool(self.access_key_id or self.secret_access_key)


@dataclass(frozen=True)
class RunConfiguration:
    """1回のアップロード実行の設定（全ワーカーで読み取り専用に共有）"""
    source: str
    bucket: str
    aws: AWSConfig = field(default_factory=AWSConfig)
    bucket_prefix: str = ""
    permissions: str = DEFAULT_PERMISSIONS
    concurrency: int = DEFAULT_CONCURRENCY
    dry_run: bool = False

    def __post_init__(self):
        """実行設定のバリデーション"""
        if not self.source:
            raise ValueError("source cannot be empty")

        if not self.bucket:
            raise ValueError("bucket cannot be empty")

        if self.concurrency < 1:
            raise ValueError(
                f"Invalid concurrency: {self.concurrency}. Must be at least 1"
            )

        if self.permissions not in CANNED_ACLS:
            raise ValueError(
                f"Invalid permissions: {self.permissions}. "
                f"Must be one of: {', '.join(CANNED_ACLS)}"
            )


@dataclass(frozen=True)
class Config:
    """メイン設定クラス"""
    logging: LoggingConfig
    run: RunConfiguration

    @classmethod
    def from_options(
        cls,
        source: str,
        bucket: str,
        uri: str = DEFAULT_ENDPOINT,
        region: str = DEFAULT_REGION,
        key_id: str = "",
        secret: str = "",
        permissions: str = DEFAULT_PERMISSIONS,
        bucket_prefix: str = "",
        thread_num: int = DEFAULT_CONCURRENCY,
        dry_run: bool = False,
        log_level: str = "INFO",
        log_file: Optional[str] = None,
    ) -> 'Config':
        """コマンドラインオプションから設定を作成"""
        aws_config = AWSConfig(
            endpoint_url=uri,
            region=region,
            access_key_id=key_id,
            secret_access_key=secret,
        )
        run_config = RunConfiguration(
            source=source,
            bucket=bucket,
            aws=aws_config,
            bucket_prefix=bucket_prefix,
            permissions=permissions,
            concurrency=thread_num,
            dry_run=dry_run,
        )
        return cls(
            logging=LoggingConfig(level=log_level, file=log_file),
            run=run_config,
        )
