import numpy as np
import pytest

from proxggm import (
    ProxGradientGGM,
    penalized_log_likelihood,
    prox_gradient_mapping,
    simulate_ggm,
    sparse_precision,
)


def test_estimator_matches_function():
    X = simulate_ggm(150, sparse_precision(5, density=0.4, seed=1), seed=2)
    start = np.eye(5)

    theta, info = prox_gradient_mapping(
        X, start, update_w=0.1, update_change=0.5, regularizer=0.02, max_iter=60, tol=1e-8
    )
    model = ProxGradientGGM(
        regularizer=0.02, update_w=0.1, max_iter=60, tol=1e-8, theta_start=None
    )
    fitted = model.fit(X)

    assert fitted is model
    assert np.allclose(model.precision_, theta)
    assert model.info_ == info
    assert model.n_iter_ == info["n_iter"]
    assert model.converged_ == info["converged"]
    assert model.n_features_in_ == 5
    assert model.n_obs_ == 150

    score = model.score(X)
    assert np.isclose(score, penalized_log_likelihood(X, model.precision_, 0.02))


def test_auto_start_is_inverse_variance_diagonal():
    X = simulate_ggm(100, np.diag([1.0, 4.0]), seed=3)
    S = np.cov(X, rowvar=False)

    auto = ProxGradientGGM(max_iter=20, tol=0.0).fit(X)
    manual = ProxGradientGGM(max_iter=20, tol=0.0, theta_start=np.diag(1 / np.diag(S))).fit(X)
    assert np.allclose(auto.precision_, manual.precision_)


def test_get_and_set_params():
    model = ProxGradientGGM(regularizer=0.1)
    params = model.get_params()
    assert params["regularizer"] == 0.1
    assert params["theta_start"] == "auto"

    assert model.set_params(update_w=0.2) is model
    assert model.update_w == 0.2
    with pytest.raises(ValueError, match="Unknown parameter"):
        model.set_params(alpha=1.0)


def test_unknown_start_string_raises():
    X = np.random.default_rng(4).standard_normal((20, 2))
    with pytest.raises(ValueError, match="theta_start"):
        ProxGradientGGM(theta_start="identity").fit(X)


def test_score_before_fit_raises():
    with pytest.raises(RuntimeError, match="not been fitted"):
        ProxGradientGGM().score(np.zeros((3, 2)))


def test_precision_as_frame_uses_column_names():
    pd = pytest.importorskip("pandas")
    X = simulate_ggm(60, np.eye(3), seed=5)
    df = pd.DataFrame(X, columns=["a", "b", "c"])

    model = ProxGradientGGM(max_iter=10).fit(df)
    frame = model.precision_as_frame()
    assert list(frame.columns) == ["a", "b", "c"]
    assert list(frame.index) == ["a", "b", "c"]
    assert np.allclose(frame.to_numpy(), model.precision_)
