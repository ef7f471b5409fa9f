"""
DOF Diagram v1.0 — Optics Engine Tests

Validates circle of confusion, hyperfocal, near/far limits with the
viewport clamp and saturation rule, and the field of view.
"""

import itertools
import math
import os
import sys

import pytest

# Ensure dof_diagram package is importable
_scripts_python = os.path.join(
    os.path.dirname(__file__), "..", "..", "scripts", "python"
)
_scripts_python = os.path.normpath(_scripts_python)
if _scripts_python not in sys.path:
    sys.path.insert(0, _scripts_python)

from dof_diagram.controls import MULTIPLIERS
from dof_diagram.optics_engine import (
    compute_circle_of_confusion,
    compute_depth_of_field,
    compute_dof_limits,
    compute_fov,
    compute_hyperfocal,
)
from dof_diagram.protocols import CameraConfiguration
from dof_diagram.registry import get_sensor, list_sensors


VIEWPORT_FAR = 400.0


@pytest.fixture
def full_frame():
    return get_sensor("35mm (full frame)")


@pytest.fixture
def portrait_config(full_frame):
    """50mm f/1.8 focused at 6 feet on full frame."""
    return CameraConfiguration(
        focal_length_mm=50.0,
        aperture=1.8,
        sensor=full_frame,
        subject_distance_in=72.0,
    )


def _hyperfocal_in(config):
    coc = compute_circle_of_confusion(config.sensor.diagonal_mm)
    h_mm = compute_hyperfocal(
        config.effective_focal_length_mm, config.effective_aperture, coc
    )
    return h_mm / 25.4


# ── Building Blocks ────────────────────────────────────────

class TestBuildingBlocks:
    def test_circle_of_confusion(self):
        assert compute_circle_of_confusion(1500.0) == pytest.approx(1.0)

    def test_hyperfocal_formula(self):
        """H = f + f^2 / (N * c)."""
        assert compute_hyperfocal(50.0, 2.0, 0.025) == pytest.approx(50.0 + 2500.0 / 0.05)

    def test_hyperfocal_invalid_aperture_is_infinite(self):
        assert math.isinf(compute_hyperfocal(50.0, 0.0, 0.03))

    def test_fov_formula(self):
        assert compute_fov(50.0, 24.0) == pytest.approx(
            2 * math.degrees(math.atan(0.24))
        )

    def test_fov_invalid_inputs_return_zero(self):
        assert compute_fov(0.0, 24.0) == 0.0
        assert compute_fov(50.0, 0.0) == 0.0

    def test_dof_limits_bracket_focus(self):
        near, far = compute_dof_limits(50.0, 1.8, 1828.8, 0.0283)
        assert near < 1828.8 < far

    def test_focus_equal_to_focal_length_is_valid(self):
        """s == f: both denominators equal H, both limits equal s."""
        near, far = compute_dof_limits(50.0, 2.8, 50.0, 0.03)
        assert near == pytest.approx(50.0)
        assert far == pytest.approx(50.0)

    def test_zero_far_denominator_is_infinite(self):
        """f=10, N=1, c=1 gives H=110; focus at 120 zeroes H - (s - f)."""
        near, far = compute_dof_limits(10.0, 1.0, 120.0, 1.0)
        assert math.isinf(far)
        assert near == pytest.approx(110.0 * 120.0 / 220.0)

    def test_past_hyperfocal_far_is_negative(self):
        near, far = compute_dof_limits(14.0, 8.0, 2540.0, 0.0283)
        assert far < 0
        assert near > 0


# ── Scenario: 50mm f/1.8 at 72in ───────────────────────────

class TestPortraitScenario:
    def test_circle_of_confusion(self, portrait_config):
        result = compute_depth_of_field(portrait_config, VIEWPORT_FAR)
        assert result.circle_of_confusion_mm == pytest.approx(42.438 / 1500, rel=1e-4)

    def test_hyperfocal(self, portrait_config):
        result = compute_depth_of_field(portrait_config, VIEWPORT_FAR)
        assert result.hyperfocal_distance == pytest.approx(_hyperfocal_in(portrait_config))
        assert result.hyperfocal_distance == pytest.approx(1934.7, rel=1e-3)

    def test_limits_bracket_subject(self, portrait_config):
        result = compute_depth_of_field(portrait_config, VIEWPORT_FAR)
        assert result.near_limit < 72.0 < result.far_limit
        assert result.near_limit == pytest.approx(69.49, abs=0.02)
        assert result.far_limit == pytest.approx(74.70, abs=0.02)
        assert result.far_saturated is False

    def test_vertical_fov(self, portrait_config):
        result = compute_depth_of_field(portrait_config, VIEWPORT_FAR)
        assert result.vertical_fov_deg == pytest.approx(26.99, abs=0.01)

    def test_horizontal_fov_uses_width(self, portrait_config):
        result = compute_depth_of_field(portrait_config, VIEWPORT_FAR)
        assert result.horizontal_fov_deg == pytest.approx(
            2 * math.degrees(math.atan(35.0 / 100.0))
        )

    def test_teleconverter_is_shallower(self, portrait_config):
        base = compute_depth_of_field(portrait_config, VIEWPORT_FAR)
        tele_config = CameraConfiguration(
            focal_length_mm=50.0,
            aperture=1.8,
            sensor=portrait_config.sensor,
            subject_distance_in=72.0,
            multiplier=2.0,
        )
        tele = compute_depth_of_field(tele_config, VIEWPORT_FAR)
        assert tele.depth_of_field < base.depth_of_field
        assert tele.near_limit < 72.0 < tele.far_limit
        assert tele.vertical_fov_deg < base.vertical_fov_deg

    def test_idempotent(self, portrait_config):
        first = compute_depth_of_field(portrait_config, VIEWPORT_FAR)
        second = compute_depth_of_field(portrait_config, VIEWPORT_FAR)
        assert first == second

    def test_default_viewport_far_boundary(self, portrait_config):
        assert compute_depth_of_field(portrait_config) == compute_depth_of_field(
            portrait_config, VIEWPORT_FAR
        )


# ── Saturation ─────────────────────────────────────────────

class TestSaturation:
    @pytest.fixture
    def wide_config(self, full_frame):
        """14mm f/8: hyperfocal ~ 34.6in, inside the slider range."""
        return CameraConfiguration(
            focal_length_mm=14.0,
            aperture=8.0,
            sensor=full_frame,
            subject_distance_in=30.0,
        )

    def test_focus_at_hyperfocal_reaches_edge(self, wide_config):
        """At s == H the far limit is H^2/f: finite, clamped to the edge."""
        hyperfocal = _hyperfocal_in(wide_config)
        at_h = CameraConfiguration(
            focal_length_mm=14.0,
            aperture=8.0,
            sensor=wide_config.sensor,
            subject_distance_in=hyperfocal,
        )
        result = compute_depth_of_field(at_h, VIEWPORT_FAR)
        assert result.far_limit == VIEWPORT_FAR
        assert result.far_saturated is False
        assert result.near_limit == pytest.approx(hyperfocal / 2, rel=0.02)

    def test_focus_past_hyperfocal_snaps_far_to_edge(self, wide_config):
        past = CameraConfiguration(
            focal_length_mm=14.0,
            aperture=8.0,
            sensor=wide_config.sensor,
            subject_distance_in=100.0,
        )
        result = compute_depth_of_field(past, VIEWPORT_FAR)
        assert result.far_limit == VIEWPORT_FAR
        assert result.far_saturated is True
        assert result.near_limit == pytest.approx(25.84, abs=0.05)

    def test_subject_closer_than_focal_length(self, full_frame):
        """800mm effective at 10in: raw far < raw near, resolved by saturation."""
        cfg = CameraConfiguration(
            focal_length_mm=400.0,
            aperture=22.0,
            sensor=full_frame,
            subject_distance_in=10.0,
            multiplier=2.0,
        )
        result = compute_depth_of_field(cfg, VIEWPORT_FAR)
        assert result.near_limit <= result.far_limit == VIEWPORT_FAR

    def test_smaller_viewport_clamps(self, wide_config):
        result = compute_depth_of_field(wide_config, 20.0)
        assert result.near_limit <= 20.0
        assert result.far_limit == 20.0

    def test_finite_far_past_edge_is_not_saturated(self, full_frame):
        """50mm f/8 at 250in: far ~ 578in is clamped, not infinite."""
        cfg = CameraConfiguration(
            focal_length_mm=50.0,
            aperture=8.0,
            sensor=full_frame,
            subject_distance_in=250.0,
        )
        _, far_mm = compute_dof_limits(
            50.0, 8.0, cfg.subject_distance_mm,
            compute_circle_of_confusion(full_frame.diagonal_mm),
        )
        assert far_mm / 25.4 == pytest.approx(578.4, abs=0.5)
        result = compute_depth_of_field(cfg, VIEWPORT_FAR)
        assert result.far_limit == VIEWPORT_FAR
        assert result.far_saturated is False

    def test_hyperfocal_inside_viewport_stays_finite(self):
        """6x9, 14mm x2 f/22 at s == H: far = H*s/14 stays under 400in."""
        cfg = CameraConfiguration(
            focal_length_mm=14.0,
            aperture=22.0,
            sensor=get_sensor("6x9 (Medium Format)"),
            subject_distance_in=10.0,
            multiplier=2.0,
        )
        hyperfocal = _hyperfocal_in(cfg)
        at_h = CameraConfiguration(
            focal_length_mm=14.0,
            aperture=22.0,
            sensor=cfg.sensor,
            subject_distance_in=hyperfocal,
            multiplier=2.0,
        )
        result = compute_depth_of_field(at_h, VIEWPORT_FAR)
        assert result.far_limit == pytest.approx(hyperfocal * hyperfocal * 25.4 / 14.0, rel=1e-6)
        assert result.far_limit < VIEWPORT_FAR
        assert result.far_saturated is False


# ── Teleconverter offset ───────────────────────────────────

class TestNominalFocalOffset:
    @pytest.fixture
    def tele_config(self, full_frame):
        """200mm f/2.8 behind a 2x teleconverter at 6 feet."""
        return CameraConfiguration(
            focal_length_mm=200.0,
            aperture=2.8,
            sensor=full_frame,
            subject_distance_in=72.0,
            multiplier=2.0,
        )

    def test_limits_use_bare_lens_offset(self, tele_config):
        result = compute_depth_of_field(tele_config, VIEWPORT_FAR)
        assert result.near_limit == pytest.approx(71.884, abs=0.005)
        assert result.far_limit == pytest.approx(72.116, abs=0.005)

    def test_matches_building_block(self, tele_config):
        coc = compute_circle_of_confusion(tele_config.sensor.diagonal_mm)
        near_mm, far_mm = compute_dof_limits(
            400.0, 5.6, tele_config.subject_distance_mm, coc,
            nominal_focal_length_mm=200.0,
        )
        result = compute_depth_of_field(tele_config, VIEWPORT_FAR)
        assert result.near_limit == pytest.approx(near_mm / 25.4)
        assert result.far_limit == pytest.approx(far_mm / 25.4)

    def test_nominal_defaults_to_focal_length(self):
        assert compute_dof_limits(50.0, 2.8, 1000.0, 0.03) == compute_dof_limits(
            50.0, 2.8, 1000.0, 0.03, nominal_focal_length_mm=50.0
        )


# ── Properties across the UI ranges ────────────────────────

class TestProperties:
    def test_limits_ordered_and_in_viewport(self):
        grid = itertools.product(
            list_sensors()[:8],
            (3.0, 14.0, 50.0, 200.0, 400.0),
            (0.95, 2.8, 22.0),
            MULTIPLIERS,
            (10.0, 72.0, 250.0, 400.0),
        )
        for sensor_name, focal, aperture, mult, distance in grid:
            cfg = CameraConfiguration(
                focal_length_mm=focal,
                aperture=aperture,
                sensor=get_sensor(sensor_name),
                subject_distance_in=distance,
                multiplier=mult,
            )
            result = compute_depth_of_field(cfg, VIEWPORT_FAR)
            assert 0.0 <= result.near_limit <= result.far_limit <= VIEWPORT_FAR, cfg
            assert 0.0 < result.vertical_fov_deg < 180.0, cfg

    def test_vfov_grows_as_focal_length_shrinks(self, full_frame):
        fovs = []
        for focal in (400.0, 200.0, 100.0, 50.0, 24.0, 14.0, 3.0):
            cfg = CameraConfiguration(focal, 2.8, full_frame, 72.0)
            fovs.append(compute_depth_of_field(cfg, VIEWPORT_FAR).vertical_fov_deg)
        assert fovs == sorted(fovs)
        assert len(set(fovs)) == len(fovs)

    def test_smaller_aperture_deepens_focus(self, full_frame):
        spans = []
        for aperture in (1.4, 2.8, 5.6):
            cfg = CameraConfiguration(85.0, aperture, full_frame, 120.0)
            spans.append(compute_depth_of_field(cfg, VIEWPORT_FAR).depth_of_field)
        assert spans == sorted(spans)
