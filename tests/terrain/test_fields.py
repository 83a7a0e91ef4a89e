"""Tests for noise field construction."""

import threading

import numpy as np
import pytest

from planetgen.exceptions import GenerationCancelledError, InvalidConfigError
from planetgen.rng import view_point
from planetgen.terrain.config import MergeOperation, NoiseKind, NoiseLayerConfig
from planetgen.terrain.fields import EXCLUDED, build_noise_field, sampling_offset
from planetgen.terrain.noise import sample_noise

PERLIN_REPLACE = NoiseLayerConfig(
    kind=NoiseKind.PERLIN, scale=10.0, operation=MergeOperation.REPLACE
)
CELLULAR_UNION = NoiseLayerConfig(
    kind=NoiseKind.CELLULAR, scale=6.0, operation=MergeOperation.UNION
)
SIMPLEX_MIX = NoiseLayerConfig(
    kind=NoiseKind.SIMPLEX, scale=4.0, operation=MergeOperation.MIX
)


class TestBuildNoiseField:
    """Tests for build_noise_field."""

    def test_output_shape_and_dtype(self) -> None:
        field = build_noise_field(1, 17, [PERLIN_REPLACE])
        assert field.shape == (17, 17)
        assert field.dtype == np.float32

    def test_deterministic_with_same_seed(self) -> None:
        layers = [PERLIN_REPLACE, CELLULAR_UNION, SIMPLEX_MIX]
        np.testing.assert_array_equal(
            build_noise_field(9, 32, layers), build_noise_field(9, 32, layers)
        )

    def test_different_seed_different_output(self) -> None:
        a = build_noise_field(1, 32, [PERLIN_REPLACE])
        b = build_noise_field(2, 32, [PERLIN_REPLACE])
        assert not np.allclose(a, b)

    def test_sampling_coordinates(self) -> None:
        """Cell (x, y) samples view_point + offset/scale + (x, y)/scale."""
        map_size = 6
        field = build_noise_field(3, map_size, [PERLIN_REPLACE])

        vx, vy = view_point(3)
        offset = sampling_offset(map_size)
        x, y = 4, 1
        expected = sample_noise(
            NoiseKind.PERLIN,
            vx + offset / 10.0 + x / 10.0,
            vy + offset / 10.0 + y / 10.0,
        )
        assert field[y, x] == pytest.approx(float(expected), abs=1e-6)

    def test_layers_apply_in_order(self) -> None:
        """A replace layer discards everything before it."""
        replaced = build_noise_field(5, 16, [CELLULAR_UNION, SIMPLEX_MIX, PERLIN_REPLACE])
        alone = build_noise_field(5, 16, [PERLIN_REPLACE])
        np.testing.assert_array_equal(replaced, alone)

    def test_union_never_lowers_field(self) -> None:
        base = build_noise_field(5, 16, [PERLIN_REPLACE])
        merged = build_noise_field(5, 16, [PERLIN_REPLACE, CELLULAR_UNION])
        assert np.all(merged >= base)

    def test_empty_layer_list_leaves_zero_field(self) -> None:
        field = build_noise_field(1, 5, [])
        np.testing.assert_array_equal(field, 0.0)

    def test_zero_start_with_multiply_stays_zero(self) -> None:
        multiply = NoiseLayerConfig(kind=NoiseKind.SIMPLEX, operation=MergeOperation.MULTIPLY)
        np.testing.assert_array_equal(build_noise_field(1, 8, [multiply]), 0.0)


class TestExcludedCells:
    """Tests for sentinel cells carved by a prior pass."""

    def test_excluded_cells_untouched(self) -> None:
        initial = np.full((10, 10), 0.5, dtype=np.float32)
        initial[2:5, 3:7] = EXCLUDED
        field = build_noise_field(4, 10, [PERLIN_REPLACE, CELLULAR_UNION], initial=initial)

        np.testing.assert_array_equal(field[2:5, 3:7], EXCLUDED)
        assert np.all(field[:2] != EXCLUDED)

    def test_initial_field_not_modified(self) -> None:
        initial = np.full((8, 8), 0.25, dtype=np.float32)
        build_noise_field(4, 8, [PERLIN_REPLACE], initial=initial)
        np.testing.assert_array_equal(initial, 0.25)

    def test_initial_field_feeds_first_merge(self) -> None:
        initial = np.full((8, 8), 2.0, dtype=np.float32)
        union = NoiseLayerConfig(kind=NoiseKind.PERLIN, operation=MergeOperation.UNION)
        field = build_noise_field(4, 8, [union], initial=initial)
        np.testing.assert_array_equal(field, 2.0)

    def test_initial_shape_mismatch(self) -> None:
        with pytest.raises(InvalidConfigError):
            build_noise_field(1, 8, [PERLIN_REPLACE], initial=np.zeros((4, 4)))


class TestWorkersAndCancellation:
    """Tests for the worker pool and cancellation."""

    @pytest.mark.parametrize("workers", [2, 3, 8])
    def test_workers_match_inline(self, workers: int) -> None:
        layers = [PERLIN_REPLACE, CELLULAR_UNION, SIMPLEX_MIX]
        inline = build_noise_field(11, 37, layers, workers=1)
        pooled = build_noise_field(11, 37, layers, workers=workers)
        np.testing.assert_array_equal(inline, pooled)

    def test_cancelled_before_first_layer(self) -> None:
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(GenerationCancelledError):
            build_noise_field(1, 8, [PERLIN_REPLACE], cancel=cancel)

    def test_unset_event_runs(self) -> None:
        field = build_noise_field(1, 8, [PERLIN_REPLACE], cancel=threading.Event())
        assert field.shape == (8, 8)


class TestSamplingOffset:
    """Tests for window centering."""

    def test_even(self) -> None:
        assert sampling_offset(8) == -4.0

    def test_odd_truncates(self) -> None:
        assert sampling_offset(7) == -3.0
