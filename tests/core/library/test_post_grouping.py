import pytest

from core.library.post_grouping import (
    PostGrouping,
    numeric_from_name,
    resolve_post_grouping,
)


class TestResolvePostGrouping:
    def test_numeric_stem_prefixed_by_metadata_id(self) -> None:
        assert resolve_post_grouping("12345601", 123456) == PostGrouping(123456, 1)

    def test_numeric_stem_equal_to_metadata_id_is_page_zero(self) -> None:
        assert resolve_post_grouping("123456", 123456) == PostGrouping(123456, 0)

    @pytest.mark.parametrize(
        "stem,expected",
        [
            ("900_p0", PostGrouping(900, 0)),
            ("900_P3", PostGrouping(900, 3)),
            ("900-p2", PostGrouping(900, 2)),
            ("900_4", PostGrouping(900, 4)),
            ("900-5", PostGrouping(900, 5)),
        ],
    )
    def test_page_patterns(self, stem: str, expected: PostGrouping) -> None:
        assert resolve_post_grouping(stem) == expected

    def test_pattern_wins_over_metadata_id_when_prefix_does_not_match(self) -> None:
        assert resolve_post_grouping("900_p1", 123) == PostGrouping(900, 1)

    def test_fallback_uses_metadata_id(self) -> None:
        assert resolve_post_grouping("a_p0", 900) == PostGrouping(900, 0)

    def test_fallback_uses_first_digit_run(self) -> None:
        assert resolve_post_grouping("img 42 final 7") == PostGrouping(42, 0)

    def test_no_digits_means_no_post(self) -> None:
        assert resolve_post_grouping("cover") == PostGrouping(None, 0)

    def test_zero_digits_mean_no_post(self) -> None:
        assert resolve_post_grouping("cover000") == PostGrouping(None, 0)

    def test_non_positive_metadata_id_is_ignored(self) -> None:
        assert resolve_post_grouping("555", 0) == PostGrouping(555, 0)
        assert resolve_post_grouping("555", -5) == PostGrouping(555, 0)

    def test_is_deterministic(self) -> None:
        first = resolve_post_grouping("77_p9", None)
        again = resolve_post_grouping("77_p9", first.post_id)

        assert first == again == PostGrouping(77, 9)

    def test_page_index_is_never_negative(self) -> None:
        for stem in ["1-2", "x", "00_p00", "9" * 30]:
            assert resolve_post_grouping(stem).page_index >= 0


class TestNumericFromName:
    def test_first_digit_run(self) -> None:
        assert numeric_from_name("a12b34.jpg") == 12

    def test_no_digits(self) -> None:
        assert numeric_from_name("cover.jpg") is None
