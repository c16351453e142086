"""テスト共通のフィクスチャ"""
import threading
import time

import pytest
from botocore.exceptions import ClientError

from upload3r.models.config import LoggingConfig
from upload3r.utils.logger import LoggerManager


class FakeStore:
    """put呼び出しを記録するインメモリのストア"""

    def __init__(self, fail_keys=(), delay=0.0):
        self.fail_keys = set(fail_keys)
        self.delay = delay
        self.objects = {}
        self.acls = {}
        self.bodies = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._lock = threading.Lock()

    def put(self, bucket, key, body, acl):
        with self._lock:
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
            self.bodies.append(body)
        try:
            time.sleep(self.delay)
            if key in self.fail_keys:
                raise ClientError(
                    {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}},
                    "PutObject",
                )
            data = body.read()
            with self._lock:
                self.objects[(bucket, key)] = data
                self.acls[(bucket, key)] = acl
        finally:
            with self._lock:
                self.in_flight -= 1

    @property
    def keys(self):
        return sorted(key for _, key in self.objects)


@pytest.fixture(autouse=True)
def logger():
    """各テストでロガーを初期化"""
    LoggerManager.reset()
    yield LoggerManager.setup(LoggingConfig(level="DEBUG"))
    LoggerManager.reset()


@pytest.fixture
def fake_store():
    return FakeStore


@pytest.fixture
def data_dir(tmp_path):
    """data/a.txt と data/sub/b.txt を持つディレクトリ"""
    root = tmp_path / "data"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"alpha")
    (root / "sub" / "b.txt").write_bytes(b"bravo")
    return root
