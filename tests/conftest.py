import gzip
import io
import os
import sys
import pathlib
import tarfile

import pytest
import requests

# Ensure project root is on sys.path so 'import kubever' works when pytest runs from
# different working directories or when running individual tests.
_ROOT = pathlib.Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from kubever import create_app
from kubever.config import Settings


def write_file(path: pathlib.Path, data: bytes, mtime: int | None = None) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def make_tarball(members: dict) -> bytes:
    """Build a gzip-compressed tar holding ``{name: bytes}`` members."""
    buf = io.BytesIO()
    with gzip.GzipFile(fileobj=buf, mode='wb') as gz:
        with tarfile.open(fileobj=gz, mode='w') as tw:
            for name, data in members.items():
                info = tarfile.TarInfo(name=name)
                info.size = len(data)
                tw.addfile(info, io.BytesIO(data))
    return buf.getvalue()


class FakeResponse:
    """Stand-in for requests.Response in fetch tests."""

    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error')


@pytest.fixture
def settings(tmp_path):
    return Settings(build_root=str(tmp_path), version_base_url='https://dl.example.test')


@pytest.fixture
def client(settings):
    app = create_app(settings)
    app.testing = True
    return app.test_client()
