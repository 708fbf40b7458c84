"""
Writes assets/data.csv: a laminar flat-plate boundary layer sampled on a
wall-normal grid at a series of streamwise stations.

The velocity profile is the Pohlhausen quartic u/U = 2η - 2η³ + η⁴ with
η = y/δ and δ = 5 x / sqrt(Re_x).
"""
import csv
import os

import numpy as np

U_INF = 1.0
NU = 1.0e-5

STATIONS = np.round(np.arange(0.1, 2.0 + 1e-9, 0.1), 2)
Y = np.round(np.linspace(0.0, 0.06, 61), 4)

OUTPUT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data.csv")

with open(OUTPUT, "w", newline="", encoding="utf-8") as f:
    writer = csv.writer(f)
    writer.writerow(["x", "y", "u", "Re"])
    for x in STATIONS:
        re_x = U_INF * x / NU
        delta = 5.0 * x / np.sqrt(re_x)
        eta = Y / delta
        u = np.where(eta < 1.0, 2 * eta - 2 * eta**3 + eta**4, 1.0) * U_INF
        for y, u_val in zip(Y, u):
            writer.writerow([f"{x:g}", f"{y:g}", f"{u_val:.6f}", f"{re_x:.1f}"])

print(f"Wrote {len(STATIONS) * len(Y)} samples to {OUTPUT}")
