"""S3アップロード実行クラス"""
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List

from botocore.exceptions import BotoCoreError, ClientError

from ..models.job import ErrorKind, RunResult, RunStatus, UploadError, UploadJob, UploadResult
from ..utils.logger import LoggerManager
from .s3_client import ObjectStore


class UploadExecutor:
    """ファイルアップロードの実行"""

    def __init__(self, store: ObjectStore, dry_run: bool = False):
        self.store = store
        self.dry_run = dry_run
        self.logger = LoggerManager.get_logger()

    def upload_file(self, job: UploadJob) -> UploadResult:
        """単一ファイルをアップロード（リトライなし）

        エラーは送出せずに1回だけログに出し、UploadResultとして返す。
        """
        self.logger.info(f"Upload {job.source} to {job.bucket}/{job.key}")

        if self.dry_run:
            self.logger.info(f"[DRY RUN]: Would upload {job.source} to {job.bucket}/{job.key}")
            return UploadResult(job)

        try:
            with open(job.source, "rb") as body:
                size = os.fstat(body.fileno()).st_size
                self.store.put(job.bucket, job.key, body, job.acl)
        except (BotoCoreError, ClientError) as e:
            error = UploadError(
                f"S3 error uploading {job.source} to {job.bucket}/{job.key}: {e}",
                ErrorKind.STORE, job.source,
            )
        except OSError as e:
            error = UploadError(f"Error reading {job.source}: {e}", ErrorKind.FILESYSTEM, job.source)
        except Exception as e:
            error = UploadError(
                f"Unexpected error uploading {job.source}: {e}", ErrorKind.STORE, job.source
            )
        else:
            self.logger.debug(f"Successfully uploaded {job.source} ({size} bytes)")
            return UploadResult(job, size=size)

        self.logger.error(str(error))
        return UploadResult(job, error=error)


class ParallelUploadExecutor:
    """並列アップロード実行

    max_workers個のスロットを持つワーカープール。スロットを取得してから
    ジョブを投入し、アップロードが終わったら成否に関わらず解放する。
    最初の失敗以降は新しいジョブを投入せず、実行中のジョブは最後まで待つ。
    """

    def __init__(self, executor: UploadExecutor, max_workers: int):
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.executor = executor
        self.max_workers = max_workers
        self.logger = LoggerManager.get_logger()

    def upload_files(self, jobs: Iterable[UploadJob]) -> RunResult:
        """複数ファイルを並列でアップロード

        Args:
            jobs: UploadJob のイテラブル（投入直前に1つずつ取り出す）

        Returns:
            全ジョブ終了後の RunResult
        """
        slots = threading.BoundedSemaphore(self.max_workers)
        failed = threading.Event()
        futures = []

        def run_in_slot(job: UploadJob) -> UploadResult:
            try:
                result = self.executor.upload_file(job)
                if not result.success:
                    failed.set()
                return result
            except BaseException:
                failed.set()
                raise
            finally:
                slots.release()

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            for job in jobs:
                slots.acquire()
                if failed.is_set():
                    slots.release()
                    break
                futures.append(pool.submit(run_in_slot, job))
            # withを抜ける時点で投入済みの全ジョブの完了を待つ

        return self._collect(futures)

    def _collect(self, futures) -> RunResult:
        """結果を集計（最初に投入されたエラーを実行全体のエラーとする）"""
        results: List[UploadResult] = [future.result() for future in futures]
        succeeded = [result for result in results if result.success]
        uploaded = len(succeeded)
        total_bytes = sum(result.size for result in succeeded)

        errors = [result.error for result in results if not result.success]
        if errors:
            return RunResult.abort(errors[0], uploaded, total_bytes)
        return RunResult(RunStatus.SUCCESS, uploaded, total_bytes)
