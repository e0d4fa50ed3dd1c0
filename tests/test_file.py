# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import io
from pathlib import Path
from tempfile import TemporaryFile
import pytest
import mmtfwriter
from mmtfwriter.file import is_binary, is_open_compatible


@pytest.mark.parametrize(
    "file, expected",
    [
        ("test.mmtf", True),
        (b"test.mmtf", True),
        (Path("test.mmtf"), True),
        (io.BytesIO(), False),
    ]
)
def test_is_open_compatible(file, expected):
    assert is_open_compatible(file) == expected


def test_is_binary():
    assert is_binary(io.BytesIO())
    assert not is_binary(io.StringIO())
    with TemporaryFile("w+b") as file:
        assert is_binary(file)
    with TemporaryFile("w+") as file:
        assert not is_binary(file)


def test_file_is_abstract():
    with pytest.raises(TypeError):
        mmtfwriter.File()
