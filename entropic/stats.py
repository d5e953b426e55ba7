"""Quick statistical checks on byte streams from entropy sources."""

from __future__ import annotations

import zlib

import numpy as np


def _as_bytes_array(data) -> np.ndarray:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(data), dtype=np.uint8)
    return np.asarray(data, dtype=np.uint8).reshape(-1)


def shannon_entropy(data) -> float:
    """Shannon entropy in bits per byte."""
    arr = _as_bytes_array(data)
    if arr.size == 0:
        return 0.0
    counts = np.bincount(arr, minlength=256)
    probs = counts[counts > 0] / arr.size
    return float(-np.sum(probs * np.log2(probs)))


def min_entropy(data) -> float:
    """Min-entropy in bits per byte (NIST SP 800-90B most-common-value)."""
    arr = _as_bytes_array(data)
    if arr.size == 0:
        return 0.0
    p_max = np.bincount(arr, minlength=256).max() / arr.size
    return float(-np.log2(p_max))


def chi_squared_uniformity(data) -> dict:
    """Chi-squared statistic of the byte histogram against uniform."""
    arr = _as_bytes_array(data)
    hist = np.bincount(arr, minlength=256)
    expected = max(arr.size / 256, 1e-15)
    chi2 = float(np.sum((hist - expected) ** 2 / expected))
    return {"chi2": chi2, "uniform": chi2 < 293.25}  # p=0.05 for 255 df


def compression_ratio(data) -> float:
    """zlib level-9 ratio; close to 1.0 means incompressible."""
    raw = _as_bytes_array(data).tobytes()
    if len(raw) < 10:
        return 0.0
    return len(zlib.compress(raw, 9)) / len(raw)


def quality_report(data, label: str = "") -> dict:
    """Run all checks and grade the sample A-F."""
    arr = _as_bytes_array(data)
    if arr.size < 16:
        return {"label": label, "samples": int(arr.size), "grade": "F", "error": "insufficient data"}

    sh = shannon_entropy(arr)
    chi = chi_squared_uniformity(arr)
    cr = compression_ratio(arr)
    score = sh / 8.0 * 60 + min(cr, 1.0) * 20 + (20 if chi["uniform"] else 0)
    grade = (
        "A" if score >= 80 else
        "B" if score >= 60 else
        "C" if score >= 40 else
        "D" if score >= 20 else "F"
    )
    return {
        "label": label,
        "samples": int(arr.size),
        "unique_values": int(np.count_nonzero(np.bincount(arr, minlength=256))),
        "shannon_entropy": round(sh, 4),
        "min_entropy": round(min_entropy(arr), 4),
        "compression_ratio": round(cr, 4),
        "chi_squared": chi,
        "quality_score": round(score, 1),
        "grade": grade,
    }
