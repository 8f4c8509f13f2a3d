"""Test fixtures and utilities"""

import pytest

from gertils import ExtantFile


#################################################################
# Fixtures
#################################################################
@pytest.fixture
def write_config_file(tmp_path):
    def write(text: str) -> ExtantFile:
        fp = tmp_path / "intersect3d.yaml"
        fp.write_text(text)
        return ExtantFile.from_string(str(fp))
    return write
