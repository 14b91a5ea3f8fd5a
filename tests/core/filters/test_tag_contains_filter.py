from core.filters.tag_contains_filter import TagContainsFilter


class TestNormalize:
    def test_splits_trims_lowercases_and_dedupes(self) -> None:
        assert TagContainsFilter.normalize(["Red, blue", "RED", " ", "green,"]) == [
            "red",
            "blue",
            "green",
        ]

    def test_accepts_single_string(self) -> None:
        assert TagContainsFilter.normalize("a,b") == ["a", "b"]

    def test_none_and_non_strings(self) -> None:
        assert TagContainsFilter.normalize(None) == []
        assert TagContainsFilter.normalize([1, None, "x"]) == ["x"]


class TestApply:
    def test_empty_filter_matches_everything(self, make_item) -> None:
        items = [make_item("1.jpg"), make_item("2.jpg", tags=["a"])]

        assert TagContainsFilter.apply(items, []) == items

    def test_substring_match_is_case_insensitive(self, make_item) -> None:
        item = make_item("1.jpg", tags=["RedHead"])

        assert TagContainsFilter.apply([item], ["red"]) == [item]

    def test_every_requested_tag_must_match(self, make_item) -> None:
        redhead = make_item("1.jpg", tags=["redhead"])
        both = make_item("2.jpg", tags=["redhead", "blue sky"])

        assert TagContainsFilter.apply([redhead, both], ["red", "blue"]) == [both]

    def test_adding_tags_never_increases_matches(self, make_item) -> None:
        items = [
            make_item("1.jpg", tags=["redhead"]),
            make_item("2.jpg", tags=["red", "blue"]),
            make_item("3.jpg", tags=["green"]),
            make_item("4.jpg"),
        ]
        filters = [[], ["red"], ["red", "blue"], ["red", "blue", "green"]]

        counts = [len(TagContainsFilter.apply(items, tags)) for tags in filters]

        assert counts == sorted(counts, reverse=True)
        assert counts == [4, 2, 1, 0]
