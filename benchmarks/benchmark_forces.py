import time
import numpy as np

from gravtrails.integrators import compute_forces
from gravtrails.constants import G


def compute_forces_broadcast(positions, masses, g_constant=G):
    r_vec = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
    dist_sq = np.einsum("ijk,ijk->ij", r_vec, r_vec)
    with np.errstate(divide="ignore", invalid="ignore"):
        inv_dist3 = np.where(dist_sq > 0, dist_sq ** -1.5, 0.0)
    factors = g_constant * masses[:, None] * masses[None, :] * inv_dist3
    return np.einsum("ij,ijk->ik", factors, r_vec)


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    for n in (5, 20, 50):
        positions = rng.integers(0, 400, size=(n, 3)).astype(float)
        masses = rng.uniform(10000, 110000, size=n)

        t0 = time.time()
        for _ in range(100):
            pairwise = compute_forces(positions, masses)
        t1 = time.time()
        for _ in range(100):
            broadcast = compute_forces_broadcast(positions, masses)
        t2 = time.time()

        assert np.allclose(pairwise, broadcast)
        print(f"n={n:3d}  pairwise: {(t1 - t0) * 10:.3f} ms/tick  "
              f"broadcast: {(t2 - t1) * 10:.3f} ms/tick")
