import argparse
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import scipy.sparse as sp

# ---------- Builders ----------


def build_scipy_coo(m: int, n: int, density: float, seed: int) -> Tuple[sp.coo_matrix, int]:
    rs = np.random.RandomState(seed)
    data_rvs = lambda s: rs.randint(-9, 10, size=s)
    A = sp.random(m, n, density=density, format="csr", random_state=rs, data_rvs=data_rvs)
    A.data = A.data.astype(np.int64)
    A.eliminate_zeros()
    A.sort_indices()
    A_coo = A.tocoo()
    return A_coo, int(A_coo.nnz)


def build_coomat_from_scipy(A_scipy: sp.coo_matrix):
    from coomat.sparse import COO

    return COO.from_arrays(A_scipy.row, A_scipy.col, A_scipy.data, A_scipy.shape, check=False)


# ---------- Timing helpers ----------


def time_op(fn: Callable[[], Any], warmup: int, repeat: int) -> List[float]:
    for _ in range(warmup):
        fn()
    times: List[float] = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def summarize(name: str, times: List[float]) -> Optional[Dict[str, float]]:
    if not times:
        return None
    arr = np.array(times, dtype=np.float64)
    return {
        "name": name,
        "min_ms": float(arr.min() * 1e3),
        "median_ms": float(np.median(arr) * 1e3),
        "mean_ms": float(arr.mean() * 1e3),
    }


# ---------- Ops registry (per backend) ----------


class Backend:
    SCIPY = "scipy"
    COOMAT = "coomat"


SCIPY_OPS = {
    "add": lambda A, B: (A.tocsr() + B.tocsr()).tocoo(),
    "sub": lambda A, B: (A.tocsr() - B.tocsr()).tocoo(),
    "matmul": lambda A, B: (A.tocsr() @ B.tocsr()).tocoo(),
}

COOMAT_OPS = {
    "add": lambda A, B: A + B,
    "sub": lambda A, B: A - B,
    "matmul": lambda A, B: A @ B,
}


# ---------- Main ----------


def main():
    p = argparse.ArgumentParser(description="coomat arithmetic benchmarks against scipy.sparse")
    p.add_argument("--m", type=int, default=512)
    p.add_argument("--n", type=int, default=512)
    p.add_argument("--k", type=int, default=512, help="Columns of the right operand for matmul")
    p.add_argument("--density", type=float, default=0.01)
    p.add_argument("--warmup", type=int, default=1)
    p.add_argument("--repeat", type=int, default=3)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--no_scipy", action="store_true")
    p.add_argument("--validate", action="store_true")
    p.add_argument("--ops", type=str, default="all", help="Comma-separated ops: add, sub, matmul")

    args = p.parse_args()

    A_scipy, nnzA = build_scipy_coo(args.m, args.n, args.density, args.seed)
    B_scipy, nnzB = build_scipy_coo(args.m, args.n, args.density, args.seed + 101)
    # For matmul we need shape (n, k) given A is (m, n)
    C_scipy, nnzC = build_scipy_coo(args.n, args.k, args.density, args.seed + 202)
    A, B, C = (build_coomat_from_scipy(X) for X in (A_scipy, B_scipy, C_scipy))

    wanted = {op.strip().lower() for op in (args.ops.split(",") if args.ops else [])}
    if "all" in wanted or not wanted:
        wanted = {"add", "sub", "matmul"}

    results: List[Dict[str, float]] = []
    for op in ("add", "sub", "matmul"):
        if op not in wanted:
            continue
        left_s, right_s = (A_scipy, C_scipy) if op == "matmul" else (A_scipy, B_scipy)
        left, right = (A, C) if op == "matmul" else (A, B)
        if not args.no_scipy:
            times = time_op(lambda: SCIPY_OPS[op](left_s, right_s), args.warmup, args.repeat)
            stats = summarize(f"{Backend.SCIPY}:{op}", times)
            if stats:
                results.append(stats)
        times = time_op(lambda: COOMAT_OPS[op](left, right), args.warmup, args.repeat)
        stats = summarize(f"{Backend.COOMAT}:{op}", times)
        if stats:
            results.append(stats)
        if args.validate:
            ref = SCIPY_OPS[op](left_s, right_s).toarray()
            out = COOMAT_OPS[op](left, right).toarray()
            if not np.array_equal(out, ref):
                raise AssertionError(f"Validation failed: coomat {op} vs scipy")

    # ---- print summary ----
    print(
        f"coomat benchmarks: m={args.m} n={args.n} k={args.k} density={args.density} "
        f"nnz(A)={nnzA} nnz(B)={nnzB} nnz(C)={nnzC}"
    )
    for r in results:
        if not r:
            continue
        print(
            f"{r['name']:>16}: min {r['min_ms']:.3f} ms | median {r['median_ms']:.3f} ms | mean {r['mean_ms']:.3f} ms"
        )


if __name__ == "__main__":
    main()
