"""Tests for range and angle-wrapping utilities."""

import math

import torch
import pytest

from polebench.utils.ranges import BoundedRange
from polebench.utils.wrapping import wrap_angles


class TestBoundedRange:
    def test_rejects_inverted(self) -> None:
        with pytest.raises(ValueError):
            BoundedRange(1.0, -1.0)

    def test_symmetric(self) -> None:
        r = BoundedRange.symmetric(-3.0)
        assert (r.low, r.high) == (-3.0, 3.0)
        assert r.length == 6.0

    def test_bound(self) -> None:
        r = BoundedRange(-2.4, 2.4)
        values = torch.tensor([-5.0, 0.3, 2.4, 9.0], dtype=torch.float64)
        expected = torch.tensor([-2.4, 0.3, 2.4, 2.4], dtype=torch.float64)
        assert torch.equal(r.bound(values), expected)

    def test_contains_is_inclusive(self) -> None:
        r = BoundedRange(-1.0, 1.0)
        values = torch.tensor([-1.0, 1.0, 1.0001, -2.0])
        assert r.contains(values).tolist() == [True, True, False, False]

    def test_strictly_within(self) -> None:
        outer = BoundedRange(-1.0, 1.0)
        assert BoundedRange(-0.5, 0.5).strictly_within(outer)
        assert not BoundedRange(-1.0, 0.5).strictly_within(outer)

    def test_sample_in_range(self) -> None:
        r = BoundedRange(-0.2, 0.2)
        gen = torch.Generator().manual_seed(0)
        samples = r.sample((1000,), generator=gen)
        assert samples.dtype == torch.float64
        assert r.contains(samples).all()
        assert samples.min() < -0.15
        assert samples.max() > 0.15

    def test_sample_reproducible(self) -> None:
        r = BoundedRange(0.0, 5.0)
        a = r.sample((4,), generator=torch.Generator().manual_seed(42))
        b = r.sample((4,), generator=torch.Generator().manual_seed(42))
        assert torch.equal(a, b)


class TestWrapAngles:
    def test_no_dims(self) -> None:
        x = torch.tensor([[10.0, 20.0]])
        assert wrap_angles(x, ()) is x

    def test_upper_bound_is_kept(self) -> None:
        x = torch.tensor([math.pi, -math.pi], dtype=torch.float64)
        out = wrap_angles(x, (0, 1))
        assert out[0].item() == math.pi
        assert out[1].item() == math.pi

    def test_single_correction(self) -> None:
        x = torch.tensor(
            [[1.5 * math.pi, 0.0, -1.5 * math.pi, 7.0]], dtype=torch.float64
        )
        out = wrap_angles(x, (0, 2))
        assert out[0, 0].item() == pytest.approx(-0.5 * math.pi)
        assert out[0, 2].item() == pytest.approx(0.5 * math.pi)
        # Untouched dimension
        assert out[0, 3].item() == 7.0

    def test_not_inplace_by_default(self) -> None:
        x = torch.tensor([4.0], dtype=torch.float64)
        wrap_angles(x, (0,))
        assert x.item() == 4.0

    def test_inplace(self) -> None:
        x = torch.tensor([4.0], dtype=torch.float64)
        out = wrap_angles(x, (0,), inplace=True)
        assert out is x
        assert x.item() == pytest.approx(4.0 - 2 * math.pi)
