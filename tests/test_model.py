from concurrent.futures import ThreadPoolExecutor
import itertools
import math

import numpy as np
import pytest

from wordvec import (
    DegenerateVectorError,
    EmptyInputError,
    MLModel,
    TokenNotFoundError,
    WordToVecModel,
    WordToVecModelLoader,
    load_model,
)
from wordvec.errors import ArchiveOpenError, PayloadNotFoundError

from bundles import write_bundle

NON_ZERO_TOKENS = ["scala", "spark", "java"]


# --- Loading ---

def test_load_model(model):
    assert isinstance(model, WordToVecModel)
    assert model.dimensionality == 3
    assert model.op == "word_to_vector"
    assert len(model.store) == 4


def test_loader_with_custom_entry_name(tmp_path):
    path = write_bundle(tmp_path / "b.zip", entry_name="root/vectors.json")
    model = WordToVecModelLoader(entry_name="vectors.json").load(path)
    assert model.dimensionality == 3


def test_loader_returns_independent_models(bundle_path):
    loader = WordToVecModelLoader()
    first, second = loader.load(bundle_path), loader.load(bundle_path)

    assert first is not second
    assert first.store is not second.store


def test_model_satisfies_protocol(model):
    transformer: MLModel = model
    assert transformer.transform(["scala"]).shape == (3,)


def test_load_missing_archive_raises():
    with pytest.raises(ArchiveOpenError):
        load_model("/nonexistent/path.zip")


def test_load_without_payload_raises(tmp_path):
    path = write_bundle(tmp_path / "b.zip", entry_name="root/other.json")
    with pytest.raises(PayloadNotFoundError):
        load_model(path)


# --- Transform ---

def test_transform_averages_repeated_token(model):
    np.testing.assert_allclose(model.transform(["scala", "scala"]), [1.0, 2.0, 3.0])


def test_transform_divides_by_sentence_length(model):
    np.testing.assert_allclose(model.transform(["scala", "unknown_token"]), [0.5, 1.0, 1.5])


def test_transform_mixes_tokens(model):
    np.testing.assert_allclose(model.transform(["scala", "spark", "java"]), [2.0 / 3.0, 2.5 / 3.0, 8.0 / 3.0])


def test_transform_of_only_unknown_tokens_is_zero(model):
    np.testing.assert_array_equal(model.transform(["foo", "bar"]), np.zeros(3))


def test_transform_accepts_any_sequence(model):
    np.testing.assert_allclose(model.transform(("scala",)), [1.0, 2.0, 3.0])


def test_transform_returns_new_writable_array(model):
    result = model.transform(["scala"])
    result[0] = 99.0

    assert result.flags.writeable
    np.testing.assert_array_equal(model.store.vector("scala")[0], [1.0, 2.0, 3.0])


def test_transform_empty_sentence(model):
    with pytest.raises(EmptyInputError):
        model.transform([])


# --- Distance ---

def test_distance_is_cosine_similarity(model):
    assert model.distance("scala", "spark") == pytest.approx(5.0 / math.sqrt(14.0 * 5.0))


@pytest.mark.parametrize("token", NON_ZERO_TOKENS)
def test_self_similarity(model, token):
    assert model.distance(token, token) == pytest.approx(1.0, rel=1e-9)


@pytest.mark.parametrize("token1, token2", list(itertools.combinations(NON_ZERO_TOKENS, 2)))
def test_distance_is_symmetric(model, token1, token2):
    assert model.distance(token1, token2) == pytest.approx(model.distance(token2, token1), rel=1e-12)


def test_distance_names_missing_token(model):
    with pytest.raises(TokenNotFoundError, match="unknown_token") as exc_info:
        model.distance("scala", "unknown_token")
    assert exc_info.value.token == "unknown_token"


def test_distance_reports_first_missing_token(model):
    with pytest.raises(TokenNotFoundError) as exc_info:
        model.distance("first_missing", "second_missing")
    assert exc_info.value.token == "first_missing"


def test_token_not_found_is_a_lookup_error(model):
    with pytest.raises(LookupError):
        model.distance("unknown_token", "scala")


@pytest.mark.parametrize("pair", [("scala", "null"), ("null", "scala"), ("null", "null")])
def test_distance_to_zero_vector(model, pair):
    with pytest.raises(DegenerateVectorError) as exc_info:
        model.distance(*pair)
    assert exc_info.value.token == "null"


# --- Sharing ---

def test_concurrent_readers_see_same_results(model):
    expected_vector = model.transform(["scala", "java", "unknown_token"])
    expected_distance = model.distance("spark", "java")

    def work(_):
        return model.transform(["scala", "java", "unknown_token"]), model.distance("spark", "java")

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(work, range(32)))

    for vector, distance in results:
        np.testing.assert_array_equal(vector, expected_vector)
        assert distance == expected_distance


def test_repr(model):
    assert repr(model) == "WordToVecModel(op='word_to_vector', tokens=4, dim=3)"
