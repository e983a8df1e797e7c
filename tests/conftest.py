from unittest.mock import MagicMock

import pytest

from ghibli_assets.config import PipelineConfig

CASTLE_ID = "2baf70d1-42bb-4437-b551-e5fed5a87abe"


@pytest.fixture
def config(tmp_path):
    cfg = PipelineConfig.from_root(tmp_path)
    cfg.images_dir.mkdir(parents=True)
    return cfg


def make_response(status_code=200, chunks=(b"jpeg-bytes",), json_data=None):
    """A response double usable both as a context manager and for .json()."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    resp.iter_content.return_value = iter(chunks)
    resp.json.return_value = json_data
    return resp
