"""
===============================================================================
corrstat: Complete Walkthrough
===============================================================================

A synthetic panel of 8 channels driven by a common signal x(t).  Each
channel responds with a different gain, lag or nonlinearity.  We run every
measure in the package on it and compare what each one picks up.

Run:
    python example_correlation.py
"""

import logging
from pathlib import Path

import numpy as np

import corrstat
from corrstat import correlation as corr
from corrstat import descriptive as desc
from corrstat.utils import set_console_level, setup_file_logging

rng = np.random.default_rng(2025)

T = 400  # time steps
t = np.arange(T)
x = np.sin(2 * np.pi * 0.02 * t) + 0.5 * np.sin(2 * np.pi * 0.07 * t)
x += 0.15 * rng.normal(size=T)

channel_names = [
    "linear",  # direct linear copy
    "linear_lag5",  # linear, delayed by 5 steps
    "quadratic",  # x², invisible to Pearson
    "saturated",  # tanh(x), monotonic but nonlinear
    "spiky",  # linear with a handful of huge outliers
    "integer",  # coarse quantisation, lots of ties
    "noisy_linear",  # weak linear + heavy noise
    "independent",  # pure noise
]

y = np.zeros((T, len(channel_names)))
y[:, 0] = 0.9 * x + 0.1 * rng.normal(size=T)
y[5:, 1] = 0.85 * x[:-5] + 0.15 * rng.normal(size=T - 5)
y[:, 2] = x ** 2 + 0.2 * rng.normal(size=T)
y[:, 3] = np.tanh(2 * x) + 0.1 * rng.normal(size=T)
y[:, 4] = x + 0.1 * rng.normal(size=T)
y[rng.choice(T, size=8, replace=False), 4] = 50.0
y[:, 5] = np.round(2 * x)
y[:, 6] = 0.3 * x + rng.normal(size=T)
y[:, 7] = rng.normal(size=T)

# ── 0. Logging / configuration ────────────────────────────────────────
log_file = setup_file_logging(Path("experiments/corrstat_demo"))
set_console_level(logging.INFO)
corrstat.configure(seed=42)
print(f"  Debug log: {log_file}")

# ── 1. Descriptive statistics ─────────────────────────────────────────
for i, name in enumerate(channel_names):
    s = desc.summary_stats(y[:, i])
    print(f"    {name:14s}  mean = {s.mean:+.3f}  sd = {s.stdev:.3f}  "
          f"median = {desc.median(y[:, i]):+.3f}  MAD = {desc.median_absolute_dev(y[:, i]):.3f}")

print(f"  10% trimmed mean of 'spiky' = {desc.mean_truncated(0.1, y[:, 4]):+.4f}")
print(f"  pooled sd over channels     = {desc.pooled_stdev(y.T):.4f}")

# ── 2. Pairwise against the driver ────────────────────────────────────
for i, name in enumerate(channel_names):
    col = y[:, i]
    print(f"    {name:14s}  pearson = {corr.pearson(x, col):+.4f}  "
          f"spearman = {corr.spearman(x, col):+.4f}  "
          f"tau_b = {corr.kendall_tau_b(x, col):+.4f}  "
          f"bicor = {corr.bicor(x, col):+.4f}")

# ── 3. Lagged correlation ─────────────────────────────────────────────
best = max(range(20), key=lambda lag: corr.normalized_xcorr(lag, x, y[:, 1]))
print(f"  'linear_lag5' peaks at lag {best}")
print(f"  ACF(1) of x = {corr.auto_correlation(1, x):.4f}")

# ── 4. Channel-by-channel matrices ────────────────────────────────────
pw = corr.Pairwise(y, axis="columns", names=channel_names)
print(repr(pw.pearson))
print(repr(pw.bicor))
print(pw.summary())

mat = pw.kendall.values
print("  Upper triangle (|tau_b| > 0.5):")
for i in range(len(channel_names)):
    for j in range(i + 1, len(channel_names)):
        if abs(mat[i, j]) > 0.5:
            print(f"    {channel_names[i]:14s} ↔ {channel_names[j]:14s}  tau = {mat[i, j]:+.4f}")

# Result works like an array
arr = np.asarray(pw.spearman)
print(f"  np.asarray(pw.spearman) → shape {arr.shape}, symmetric = {pw.spearman.is_symmetric()}")

try:
    print(pw.bicor.to_dataframe().round(3).to_string())
except ImportError as err:
    print(f"  (skipping DataFrame export: {err})")

# ── 5. Matrix similarity ──────────────────────────────────────────────
first, second = y[:, :4], y[:, 4:]
print(f"  RV2(first half, second half) = {corr.rv2(first, second):+.4f}")
print(f"  RV2(first half, itself)      = {corr.rv2(first, first):+.4f}")
