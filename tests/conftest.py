import os
from glob import glob
from typing import List

import pytest

from tests.test_util import DATA_DIR


def valid_files() -> List[str]:
    return sorted(glob(os.path.join(DATA_DIR, "valid", "*.txt")))


def invalid_files() -> List[str]:
    return sorted(glob(os.path.join(DATA_DIR, "invalid", "*.txt")))


@pytest.fixture(scope="session", params=valid_files(), ids=os.path.basename)
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=invalid_files(), ids=os.path.basename)
def invalid_file(request) -> str:
    return request.param


@pytest.fixture()
def write_program(tmp_path):
    def write(program: str) -> str:
        path = tmp_path / "program.txt"
        path.write_text(program, encoding="utf8")
        return str(path)

    return write
