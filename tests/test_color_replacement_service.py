"""Tests for color replacement: spec building, preview and apply."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from hypothesis import given, strategies as st

from pixel_palette.exceptions import ReplacementSpecMismatch
from pixel_palette.models.pixel_color import PixelColor
from pixel_palette.models.replacement import ReplacementSpec
from pixel_palette.services.color_analysis_service import ColorAnalysisService
from pixel_palette.services.color_replacement_service import ColorReplacementService

from .helpers import BLUE, CLEAR, GREEN, RED, make_image, pixel_rows, rgba_images

channel = st.integers(0, 255)
opaque = st.builds(PixelColor, channel, channel, channel)


@pytest.fixture
def service():
    return ColorReplacementService()


class TestBuildSpec:
    """Pairing old and new color lists."""

    def test_pairs_in_order(self, service):
        spec = service.build_spec([RED, GREEN], [BLUE, RED])
        assert spec.pairs == ((RED, BLUE), (GREEN, RED))
        assert len(spec) == 2

    def test_length_mismatch(self, service):
        with pytest.raises(ReplacementSpecMismatch) as exc:
            service.build_spec([RED, GREEN], [BLUE])
        assert exc.value.old_count == 2
        assert exc.value.new_count == 1
        assert "(2)" in str(exc.value) and "(1)" in str(exc.value)

    def test_mismatch_is_value_error(self, service):
        with pytest.raises(ValueError):
            service.build_spec([], [RED])

    def test_lookup_first_rule_wins(self):
        spec = ReplacementSpec.from_colors([RED, RED], [BLUE, GREEN])
        assert spec.lookup() == {RED: BLUE}


class TestPreview:
    """Dry-run match counting."""

    def test_counts_and_percentages(self, service, rrbg_image):
        spec = service.build_spec([RED, GREEN, CLEAR], [BLUE, BLUE, BLUE])
        previews = service.preview(rrbg_image, spec)

        assert [(p.old_color, p.new_color) for p in previews] == list(spec.pairs)
        assert [p.match_count for p in previews] == [2, 1, 0]
        assert [p.percentage for p in previews] == [50.0, 25.0, 0.0]

    def test_duplicate_old_colors_counted_independently(self, service, rrbg_image):
        spec = service.build_spec([RED, RED], [BLUE, GREEN])
        assert [p.match_count for p in service.preview(rrbg_image, spec)] == [2, 2]

    def test_does_not_modify_image(self, service, rrbg_image):
        before = rrbg_image.pixels.copy()
        service.preview(rrbg_image, service.build_spec([RED], [BLUE]))
        assert np.array_equal(rrbg_image.pixels, before)

    def test_empty_image(self, service, empty_image):
        previews = service.preview(empty_image, service.build_spec([RED], [BLUE]))
        assert previews[0].match_count == 0
        assert previews[0].percentage == 0.0

    def test_opaque_rule_ignores_translucent_pixels(self, service):
        image = make_image([[PixelColor(255, 0, 0, 128), RED]])
        assert service.preview(image, service.build_spec([RED], [BLUE]))[0].match_count == 1

    @given(rgba_images(), st.lists(opaque, min_size=1, max_size=3))
    def test_preview_agrees_with_histogram(self, image, olds):
        service = ColorReplacementService()
        histogram = ColorAnalysisService().build_histogram(image)
        spec = service.build_spec(olds, olds)
        for preview in service.preview(image, spec):
            assert preview.match_count == histogram.count_of(preview.old_color)


class TestApply:
    """Rewriting pixels into a new buffer."""

    def test_two_by_two_scenario(self, service, rrbg_image):
        result = service.apply(rrbg_image, service.build_spec([RED], [BLUE]))
        assert pixel_rows(result.image) == [[BLUE, BLUE], [BLUE, GREEN]]
        assert result.replacement_count == 2

    def test_source_untouched(self, service, rrbg_image):
        before = rrbg_image.pixels.copy()
        result = service.apply(rrbg_image, service.build_spec([RED], [BLUE]))
        assert np.array_equal(rrbg_image.pixels, before)
        assert result.image.pixels is not rrbg_image.pixels

    def test_same_dimensions(self, service, rrbg_image):
        result = service.apply(rrbg_image, service.build_spec([GREEN], [RED]))
        assert result.image.pixels.shape == rrbg_image.pixels.shape
        assert result.image.pixels.dtype == np.uint8

    def test_first_rule_wins_for_duplicates(self, service, rrbg_image):
        result = service.apply(rrbg_image, service.build_spec([RED, RED], [GREEN, BLUE]))
        assert pixel_rows(result.image) == [[GREEN, GREEN], [BLUE, GREEN]]
        assert result.replacement_count == 2

    def test_no_chained_replacement(self, service):
        image = make_image([[RED, BLUE]])
        result = service.apply(image, service.build_spec([RED, BLUE], [BLUE, GREEN]))
        assert pixel_rows(result.image) == [[BLUE, GREEN]]
        assert result.replacement_count == 2

    def test_swap(self, service):
        image = make_image([[RED, BLUE, GREEN]])
        result = service.apply(image, service.build_spec([RED, BLUE], [BLUE, RED]))
        assert pixel_rows(result.image) == [[BLUE, RED, GREEN]]

    def test_many_rules_in_any_order(self, service):
        # rules listed in descending packed order
        olds = [PixelColor(200 - 10 * i, i, 0) for i in range(20)]
        news = [PixelColor(0, 0, i) for i in range(20)]
        rows = [olds[::-1] + [CLEAR], [GREEN] + olds[::2] + olds[1::2]]
        result = service.apply(make_image(rows), service.build_spec(olds, news))
        lookup = dict(zip(olds, news))
        expected = [[lookup.get(color, color) for color in row] for row in rows]
        assert pixel_rows(result.image) == expected
        assert result.replacement_count == 40

    def test_new_color_alpha_written(self, service):
        result = service.apply(make_image([[RED]]), service.build_spec([RED], [CLEAR]))
        assert pixel_rows(result.image) == [[CLEAR]]

    def test_no_matches(self, service, rrbg_image):
        result = service.apply(rrbg_image, service.build_spec([CLEAR], [RED]))
        assert result.replacement_count == 0
        assert np.array_equal(result.image.pixels, rrbg_image.pixels)

    def test_empty_spec(self, service, rrbg_image):
        result = service.apply(rrbg_image, service.build_spec([], []))
        assert result.replacement_count == 0

    def test_empty_image(self, service, empty_image):
        result = service.apply(empty_image, service.build_spec([RED], [BLUE]))
        assert result.replacement_count == 0
        assert result.image.pixels.shape == (0, 0, 4)

    def test_result_keeps_source_path(self, service):
        image = make_image([[RED]], path=Path("a.png"))
        assert service.apply(image, service.build_spec([RED], [BLUE])).image.path == Path("a.png")

    def test_counter_not_carried_between_calls(self, service, rrbg_image):
        spec = service.build_spec([RED], [BLUE])
        assert service.apply(rrbg_image, spec).replacement_count == 2
        assert service.apply(rrbg_image, spec).replacement_count == 2

    @given(rgba_images(), st.lists(st.tuples(opaque, opaque), max_size=3))
    def test_disjoint_rules_remove_old_colors_and_are_idempotent(self, image, pairs):
        olds = {old for old, _ in pairs}
        pairs = [(old, new) for old, new in pairs if new not in olds]
        service = ColorReplacementService()
        analysis = ColorAnalysisService()
        spec = service.build_spec([o for o, _ in pairs], [n for _, n in pairs])

        before = analysis.build_histogram(image)
        first = service.apply(image, spec)
        after = analysis.build_histogram(first.image)

        unique_olds = set(o for o, _ in pairs)
        assert first.replacement_count == sum(before.count_of(o) for o in unique_olds)
        assert all(after.count_of(o) == 0 for o in unique_olds)
        assert service.apply(first.image, spec).replacement_count == 0


class TestOutputPath:
    """Destination naming for saved results."""

    def test_default_suffix(self, service):
        assert service.output_path_for("art/sprite.png") == Path("art/sprite_color_change.png")

    def test_suffix_from_env(self, monkeypatch):
        monkeypatch.setenv("COLOR_CHANGE_SUFFIX", "_new")
        assert ColorReplacementService().output_path_for("x.png") == Path("x_new.png")
