"""ファイル操作関連のユーティリティ"""
import os
import stat
from typing import List

from .logger import LoggerManager


def _raise_walk_error(error: OSError):
    """os.walkのエラーを握りつぶさずに送出"""
    raise error


class FileScanner:
    """ファイルスキャン機能"""

    def __init__(self):
        self.logger = LoggerManager.get_logger()

    def scan_directory(self, directory: str) -> List[str]:
        """ディレクトリ配下の通常ファイルを再帰的に列挙（絶対パス、順序不定）

        ディレクトリ自体は含めない。stat できないエントリがあれば OSError を
        そのまま送出し、走査は続けない。
        """
        root = os.path.abspath(directory)
        if not os.path.isdir(root):
            raise NotADirectoryError(f"Not a directory: {directory}")

        files = []
        for dir_path, _, file_names in os.walk(root, onerror=_raise_walk_error):
            for file_name in file_names:
                file_path = os.path.join(dir_path, file_name)
                mode = os.stat(file_path).st_mode
                if stat.S_ISREG(mode):
                    files.append(file_path)
                else:
                    self.logger.debug(f"Skipping non-regular file: {file_path}")

        self.logger.debug(f"Found {len(files)} files in {root}")
        return files
