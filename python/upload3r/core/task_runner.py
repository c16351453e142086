"""アップロードタスクの実行"""
import os
import stat
from typing import Iterator, List, Optional

from ..models.config import RunConfiguration
from ..models.job import ErrorKind, RunResult, RunStatus, UploadError, UploadJob
from ..utils.file_utils import FileScanner
from ..utils.keys import directory_key, single_file_key
from ..utils.logger import LoggerManager
from .s3_client import ObjectStore, S3ObjectStore
from .uploader import ParallelUploadExecutor, UploadExecutor


class TaskRunner:
    """アップロードを実行（単一ファイル/ディレクトリのモード判定と並列数の制御）"""

    def __init__(self, config: RunConfiguration, store: Optional[ObjectStore] = None):
        self.config = config
        self.logger = LoggerManager.get_logger()
        self.file_scanner = FileScanner()
        self._store = store

    def run(self) -> RunResult:
        """アップロードを実行して終了状態を返す"""
        try:
            is_directory = self._is_directory(self.config.source)
            executor = UploadExecutor(self._get_store(), self.config.dry_run)
        except UploadError as e:
            self.logger.error(str(e))
            return RunResult.abort(e)

        if is_directory:
            return self._upload_directory(executor)
        return self._upload_single_file(executor)

    def _get_store(self) -> ObjectStore:
        """ストアを取得（未指定ならS3クライアントを作成）"""
        if self._store is None:
            self._store = S3ObjectStore.from_config(self.config.aws, self.config.concurrency)
        return self._store

    def _is_directory(self, path: str) -> bool:
        """ディレクトリならTrue、通常ファイルならFalse、それ以外はUploadError"""
        try:
            mode = os.stat(path).st_mode
        except OSError as e:
            raise UploadError(f"Cannot stat source {path}: {e}", ErrorKind.FILESYSTEM, path) from e

        if stat.S_ISDIR(mode):
            return True
        if stat.S_ISREG(mode):
            return False
        raise UploadError(
            f"Source is neither file nor directory: {path}", ErrorKind.FILESYSTEM, path
        )

    def _upload_single_file(self, executor: UploadExecutor) -> RunResult:
        """単一ファイルをアップロード"""
        job = UploadJob(
            source=self.config.source,
            bucket=self.config.bucket,
            key=single_file_key(self.config.source, self.config.bucket_prefix),
            acl=self.config.permissions,
        )
        result = executor.upload_file(job)
        if not result.success:
            return RunResult.abort(result.error)
        return RunResult(RunStatus.SUCCESS, uploaded=1, total_bytes=result.size)

    def _upload_directory(self, executor: UploadExecutor) -> RunResult:
        """ディレクトリをアップロード"""
        root = os.path.abspath(self.config.source)

        try:
            files = self.file_scanner.scan_directory(root)
        except OSError as e:
            error = UploadError(
                f"Error walking directory {root}: {e}", ErrorKind.FILESYSTEM,
                getattr(e, "filename", None) or root,
            )
            self.logger.error(str(error))
            return RunResult.abort(error)

        if not files:
            self.logger.warning(f"No files found in {root}")
            return RunResult(RunStatus.SUCCESS)

        self.logger.info(
            f"Starting parallel upload of {len(files)} files with {self.config.concurrency} workers"
        )
        parallel_executor = ParallelUploadExecutor(executor, self.config.concurrency)
        return parallel_executor.upload_files(self._jobs(files, root))

    def _jobs(self, files: List[str], root: str) -> Iterator[UploadJob]:
        """ファイル一覧からジョブを1つずつ作成"""
        for file_path in files:
            yield UploadJob(
                source=file_path,
                bucket=self.config.bucket,
                key=directory_key(file_path, root, self.config.bucket_prefix),
                acl=self.config.permissions,
            )
