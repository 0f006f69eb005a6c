from __future__ import annotations

from pathlib import Path

import pytest

from wordvec import WordToVecModel, load_model

from bundles import write_bundle


@pytest.fixture
def bundle_path(tmp_path: Path) -> Path:
    return write_bundle(tmp_path / "word2vec-bundle.zip")


@pytest.fixture
def model(bundle_path: Path) -> WordToVecModel:
    return load_model(bundle_path)
