import time

import numpy as np

from proxggm import (
    estimate_precision,
    penalized_negative_log_likelihood,
    simulate_ggm,
    sparse_precision,
    support_recovery,
)


def main():
    P, N_tr, N_te = 12, 300, 150
    precision = sparse_precision(P, density=0.15, seed=123)
    X = simulate_ggm(N_tr + N_te, precision, seed=7)
    X_tr, X_te = X[:N_tr], X[N_tr:]
    start = np.diag(1.0 / np.diag(np.cov(X_tr, rowvar=False)))

    print("=== Regularization path ===")
    print(f"P={P}  N_tr={N_tr}  N_te={N_te}  true edges={support_recovery(precision, precision)['n_edges_true']}")
    for reg in (0.0, 0.001, 0.005, 0.01, 0.02, 0.05):
        t0 = time.time()
        theta = estimate_precision(
            X_tr, start, update_w=0.1, update_change=0.5, regularizer=reg, max_iter=2000, tol=1e-8
        )
        sec = time.time() - t0
        nll_te = penalized_negative_log_likelihood(X_te, theta, 0.0)
        rec = support_recovery(theta, precision, atol=1e-8)
        print(
            f"reg={reg:<6g} sec={sec:.3f}  test NLL={nll_te:10.3f}  "
            f"edges={rec['n_edges_est']:3d}  F1={rec['f1']:.3f}"
        )


if __name__ == "__main__":
    main()
