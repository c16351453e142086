"""upload3r パッケージ"""
from typing import Optional
from .models.config import Config, RunConfiguration
from .models.job import RunResult, RunStatus, UploadError
from .utils.logger import LoggerManager
from .core.s3_client import ObjectStore
from .core.task_runner import TaskRunner

__version__ = "1.0.0"


class Upload3r:
    """アップローダーのメインクラス"""

    def __init__(self, config: Config, store: Optional[ObjectStore] = None):
        self.config = config

        # ロガーをセットアップ
        self.logger = LoggerManager.setup(self.config.logging)

        # タスクランナーを作成
        self.task_runner = TaskRunner(self.config.run, store)

    def run(self) -> RunResult:
        """アップロードを実行"""
        self.logger.info("Upload3r started!")
        result = self.task_runner.run()
        if not result.aborted:
            self.logger.info(
                f"Upload3r finished successfully! "
                f"{result.uploaded} files, {result.total_bytes} bytes"
            )
        return result


__all__ = ['Upload3r', 'Config', 'RunConfiguration', 'RunResult', 'RunStatus', 'UploadError']
