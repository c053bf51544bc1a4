import math

import numpy as np
import pytest

import params
from chart_builder.scales import (
    LinearScale, SqrtScale, position_scale, size_scale, opacity_scale, opacity_for,
)


def test_linear_scale_maps_endpoints_and_extrapolates():
    s = LinearScale((0, 60), (50, 850))
    assert s(0) == pytest.approx(50)
    assert s(60) == pytest.approx(850)
    assert s(30) == pytest.approx(450)
    # no clamping outside the domain
    assert s(90) == pytest.approx(1250)
    assert s(-15) == pytest.approx(-150)


def test_linear_scale_accepts_arrays():
    s = LinearScale((0, 10), (0, 100))
    np.testing.assert_allclose(s(np.array([0, 5, 10])), [0, 50, 100])


def test_degenerate_domain_maps_to_middle():
    s = LinearScale((5, 5), (0, 10))
    assert s(123) == pytest.approx(5)


def test_sqrt_scale_keeps_area_proportional():
    s = SqrtScale((0, 20), (8, 50))
    assert s(0) == pytest.approx(8)
    assert s(20) == pytest.approx(50)
    assert s(5) == pytest.approx(8 + math.sqrt(5) / math.sqrt(20) * 42)


def test_variant_scales():
    share = params.CHART_VARIANTS["share"]
    diff = params.CHART_VARIANTS["difference"]

    x = position_scale(share)
    assert x(0) == pytest.approx(params.MARGIN["left"])
    assert x(60) == pytest.approx(params.CHART_WIDTH - params.MARGIN["right"])

    x2 = position_scale(diff)
    assert x2(0) == pytest.approx(params.CHART_WIDTH / 2)

    assert isinstance(size_scale(diff), SqrtScale)
    assert not isinstance(size_scale(share), SqrtScale)
    assert size_scale(share)(35) == pytest.approx(50)


def test_opacity_threshold_overrides_scale():
    diff = params.CHART_VARIANTS["difference"]
    scale = opacity_scale(diff)
    assert opacity_for(0, scale, 20) == pytest.approx(0.3)
    assert opacity_for(-10, scale, 20) == pytest.approx(0.65)
    assert opacity_for(20, scale, 20) == pytest.approx(1.0)
    assert opacity_for(-25, scale, 20) == 1.0
