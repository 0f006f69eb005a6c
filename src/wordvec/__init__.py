"""
wordvec
=======
Loads word-embedding bundles and computes sentence vectors and token
similarities.

    from wordvec import load_model
    model = load_model("word2vec-bundle.zip")
    model.transform(["scala", "spark"])
    model.distance("scala", "spark")
"""
from wordvec.analysis.model import (
    MLModel,
    ModelLoader,
    WordToVecModel,
    WordToVecModelLoader,
    load_model,
)
from wordvec.config import APP_VERSION as __version__
from wordvec.errors import (
    ArchiveOpenError,
    DegenerateVectorError,
    EmptyInputError,
    MalformedModelError,
    PayloadNotFoundError,
    TokenNotFoundError,
    WordVecError,
)
from wordvec.model.io import IOManager
from wordvec.model.store import VectorStore

__all__ = [
    "MLModel",
    "ModelLoader",
    "WordToVecModel",
    "WordToVecModelLoader",
    "load_model",
    "IOManager",
    "VectorStore",
    "WordVecError",
    "ArchiveOpenError",
    "PayloadNotFoundError",
    "MalformedModelError",
    "TokenNotFoundError",
    "EmptyInputError",
    "DegenerateVectorError",
]
