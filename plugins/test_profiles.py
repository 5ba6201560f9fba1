#!/usr/bin/env python3
"""
Test script for the scalar shaping profiles.

Verifies:
1. cubic_pulse peak, zero outside the band, symmetry, smooth band edges
2. smoothstep ramp values and clamping
3. mix blending and broadcasting
4. Scalar vs array return types
"""

import numpy as np
from sdf_glyph.profiles import smoothstep, cubic_pulse, mix


def test_cubic_pulse_peak():
    """Weight is exactly 1 at the centre."""
    print("Testing cubic_pulse peak...")
    assert cubic_pulse(0.5, 0.1, 0.5) == 1.0, "Peak should be exactly 1"
    assert cubic_pulse(0.2, 0.05, 0.2) == 1.0, "Peak should be exactly 1 for any centre"
    arr = cubic_pulse(0.5, 0.1, np.array([0.5, 0.5], dtype=np.float32))
    assert np.all(arr == 1.0), f"Array peak should be exactly 1: {arr}"
    print("  ✓ cubic_pulse peak correct")


def test_cubic_pulse_zero_outside_band():
    """Weight is exactly 0 wherever |x - c| >= w."""
    print("Testing cubic_pulse outside band...")
    for x in [0.0, 0.2, 0.3, 0.39, 0.61, 0.7, 1.0]:
        p = cubic_pulse(0.5, 0.1, x)
        assert p == 0.0, f"Should be exactly 0 outside band at x={x}: {p}"

    # Exactly on the band edge (values representable in binary)
    assert cubic_pulse(0.5, 0.25, 0.25) == 0.0, "Lower band edge should be 0"
    assert cubic_pulse(0.5, 0.25, 0.75) == 0.0, "Upper band edge should be 0"

    # Decimal band edges carry representation error only
    assert abs(cubic_pulse(0.5, 0.1, 0.4)) < 1e-6, "0.4 edge should be ~0"
    assert abs(cubic_pulse(0.5, 0.1, 0.6)) < 1e-6, "0.6 edge should be ~0"

    arr = cubic_pulse(0.5, 0.1, np.linspace(0.0, 0.39, 40, dtype=np.float32))
    assert np.all(arr == 0.0), "Array path should be exactly 0 below the band"
    print("  ✓ cubic_pulse is zero outside the band")


def test_cubic_pulse_half_value():
    """t = 0.5 gives 1 - 0.25 * 2 = 0.5."""
    print("Testing cubic_pulse half-way value...")
    p = cubic_pulse(0.5, 0.1, 0.45)
    assert abs(p - 0.5) < 1e-9, f"Half-way weight should be 0.5: {p}"
    p = cubic_pulse(0.5, 0.1, 0.55)
    assert abs(p - 0.5) < 1e-9, f"Half-way weight should be 0.5 above centre too: {p}"
    print("  ✓ cubic_pulse half-way value correct")


def test_cubic_pulse_symmetry():
    """pulse(c + k) == pulse(c - k)."""
    print("Testing cubic_pulse symmetry...")
    # Offsets exactly representable: results must match bit for bit
    for k in [0.0, 0.03125, 0.0625, 0.09375, 0.125, 0.25]:
        a = cubic_pulse(0.5, 0.1, 0.5 + k)
        b = cubic_pulse(0.5, 0.1, 0.5 - k)
        assert a == b, f"Asymmetric at k={k}: {a} vs {b}"

    for k in [0.013, 0.037, 0.071, 0.099]:
        a = cubic_pulse(0.3, 0.1, 0.3 + k)
        b = cubic_pulse(0.3, 0.1, 0.3 - k)
        assert abs(a - b) < 1e-9, f"Asymmetric at k={k}: {a} vs {b}"
    print("  ✓ cubic_pulse is symmetric")


def test_cubic_pulse_smooth_at_edges():
    """Value and slope both approach 0 at the band edges."""
    print("Testing cubic_pulse edge smoothness...")
    c, w = 0.5, 0.1
    edge = c + w

    def slope(h):
        return abs(cubic_pulse(c, w, edge - h) - cubic_pulse(c, w, edge - 2 * h)) / h

    assert cubic_pulse(c, w, edge - 1e-4) < 1e-5, "Value should vanish near the edge"
    assert slope(1e-6) < 5e-3, f"Slope should vanish near the edge: {slope(1e-6)}"
    assert slope(1e-6) < slope(1e-4) / 10, "Slope should keep shrinking towards the edge"

    # Same on the lower edge (symmetry)
    lower = c - w
    assert cubic_pulse(c, w, lower + 1e-4) < 1e-5, "Value should vanish near the lower edge"
    print("  ✓ cubic_pulse has smooth band edges")


def test_cubic_pulse_monotonic_in_band():
    """Weight never increases as |x - c| grows inside the band."""
    print("Testing cubic_pulse monotonicity...")
    above = cubic_pulse(0.5, 0.1, np.linspace(0.5, 0.6, 101))
    below = cubic_pulse(0.5, 0.1, np.linspace(0.5, 0.4, 101))
    assert np.all(np.diff(above) <= 1e-7), "Should decrease moving up from the centre"
    assert np.all(np.diff(below) <= 1e-7), "Should decrease moving down from the centre"
    assert np.all((above >= 0.0) & (above <= 1.0)), "Weights should stay in [0, 1]"
    print("  ✓ cubic_pulse is monotonic in the band")


def test_smoothstep():
    """Cubic ramp between the edges, clamped outside."""
    print("Testing smoothstep...")
    assert smoothstep(0.4, 0.6, 0.0) == 0.0, "Below lower edge should be 0"
    assert smoothstep(0.4, 0.6, 0.4) == 0.0, "At lower edge should be 0"
    assert abs(smoothstep(0.4, 0.6, 0.6) - 1.0) < 1e-12, "At upper edge should be 1"
    assert smoothstep(0.4, 0.6, 1.0) == 1.0, "Above upper edge should be 1"
    assert abs(smoothstep(0.4, 0.6, 0.5) - 0.5) < 1e-9, "Midpoint should be 0.5"
    assert abs(smoothstep(0.4, 0.6, 0.45) - 0.15625) < 1e-9, "t=0.25 should give 0.15625"

    ramp = smoothstep(0.4, 0.6, np.linspace(0.0, 1.0, 201))
    assert np.all(np.diff(ramp) >= 0.0), "Ramp should be non-decreasing"
    print("  ✓ smoothstep working correctly")


def test_return_types():
    """Scalars give floats, arrays give float32 of the same shape."""
    print("Testing return types...")
    assert isinstance(smoothstep(0.4, 0.6, 0.5), float), "Scalar smoothstep should be float"
    assert isinstance(cubic_pulse(0.5, 0.1, 0.5), float), "Scalar pulse should be float"

    field = np.random.rand(3, 5)
    s = smoothstep(0.4, 0.6, field)
    p = cubic_pulse(0.5, 0.1, field)
    assert s.shape == (3, 5) and s.dtype == np.float32, f"Bad smoothstep result: {s.shape} {s.dtype}"
    assert p.shape == (3, 5) and p.dtype == np.float32, f"Bad pulse result: {p.shape} {p.dtype}"
    print("  ✓ Return types correct")


def test_mix():
    """Linear blend along the colour axis."""
    print("Testing mix...")
    black = (0.0, 0.0, 0.0, 1.0)
    red = (1.0, 0.0, 0.0, 1.0)
    assert np.allclose(mix(black, red, 0.0), black), "t=0 should give a"
    assert np.allclose(mix(black, red, 1.0), red), "t=1 should give b"
    assert np.allclose(mix(black, red, 0.5), (0.5, 0.0, 0.0, 1.0)), "t=0.5 should average"

    weights = np.array([[0.0, 0.25, 1.0]], dtype=np.float32)
    colours = np.zeros((1, 3, 4), dtype=np.float32)
    out = mix(colours, red, weights)
    assert out.shape == (1, 3, 4), f"Per-pixel weights should broadcast: {out.shape}"
    assert np.allclose(out[0, :, 0], [0.0, 0.25, 1.0]), f"Red channel should follow weights: {out[0, :, 0]}"
    print("  ✓ mix working correctly")


if __name__ == "__main__":
    print("\n=== Testing Shaping Profiles ===\n")

    test_cubic_pulse_peak()
    test_cubic_pulse_zero_outside_band()
    test_cubic_pulse_half_value()
    test_cubic_pulse_symmetry()
    test_cubic_pulse_smooth_at_edges()
    test_cubic_pulse_monotonic_in_band()
    test_smoothstep()
    test_return_types()
    test_mix()

    print("\n✓ All tests passed!\n")
