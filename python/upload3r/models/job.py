"""アップロードジョブと結果のデータクラス"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """エラーの分類"""
    FILESYSTEM = "filesystem"
    STORE = "store"
    SESSION = "session"


class UploadError(Exception):
    """実行全体を中断させるエラー"""

    def __init__(self, message: str, kind: ErrorKind, source: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.source = source


class RunStatus(Enum):
    """実行の終了状態"""
    SUCCESS = "success"
    ABORTED = "aborted"


@dataclass(frozen=True)
class UploadJob:
    """1ファイル分のアップロード"""
    source: str
    bucket: str
    key: str
    acl: str


@dataclass
class UploadResult:
    """アップロード結果"""
    job: UploadJob
    size: int = 0
    error: Optional[UploadError] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class RunResult:
    """実行全体の結果"""
    status: RunStatus
    uploaded: int = 0
    total_bytes: int = 0
    error: Optional[UploadError] = None

    @property
    def aborted(self) -> bool:
        return self.status is RunStatus.ABORTED

    @classmethod
    def abort(cls, error: UploadError, uploaded: int = 0, total_bytes: int = 0) -> 'RunResult':
        return cls(RunStatus.ABORTED, uploaded, total_bytes, error)
