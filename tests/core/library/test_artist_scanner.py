from pathlib import Path

from core.library.artist_scanner import ArtistScanner, build_media_ref, is_image_file


class TestIsImageFile:
    def test_recognized_extensions_any_case(self) -> None:
        for name in ["a.jpg", "a.JPEG", "a.png", "a.WebP", "a.gif"]:
            assert is_image_file(name)

    def test_other_files_are_ignored(self) -> None:
        for name in ["a.jpg.json", "notes.txt", "a.bmp", "jpg"]:
            assert not is_image_file(name)


class TestBuildMediaRef:
    def test_quotes_segments(self) -> None:
        assert build_media_ref("1001", "my pic#1.jpg") == "/media/1001/my%20pic%231.jpg"

    def test_custom_prefix(self) -> None:
        assert build_media_ref("1", "a.jpg", "https://cdn") == "https://cdn/1/a.jpg"


class TestArtistScanner:
    def test_builds_items_from_files_and_sidecars(self, tmp_path: Path, write_image) -> None:
        write_image(
            tmp_path,
            "900_p0.jpg",
            {
                "id": 900,
                "title": "Sunset",
                "caption": "<b>warm</b>",
                "tags": ["sunset", {"name": "sky"}],
                "create_date": "2024-01-01T00:00:00+00:00",
                "total_bookmarks": 5,
                "total_view": "not a number",
                "comments": [
                    {"user": {"name": "fan"}, "comment": "nice", "date": "2024-01-02"},
                    "garbage",
                ],
            },
        )

        [item] = ArtistScanner().scan("12345", tmp_path)

        assert item.artist_id == "12345"
        assert item.file_name == "900_p0.jpg"
        assert item.media_ref == "/media/12345/900_p0.jpg"
        assert item.numeric_id == 900
        assert (item.post_id, item.page_index) == (900, 0)
        assert item.title == "Sunset"
        assert item.caption == "<b>warm</b>"
        assert item.tags == ["sunset", "sky"]
        assert item.likes == 5
        assert item.views is None
        assert len(item.comments) == 1
        assert item.comments[0].author == "fan"
        assert item.comments[0].text == "nice"
        assert item.raw_metadata["id"] == 900

    def test_item_without_sidecar_gets_defaults(self, tmp_path: Path, write_image) -> None:
        write_image(tmp_path, "a_p1.jpg")

        [item] = ArtistScanner().scan("1", tmp_path)

        assert item.numeric_id == 1
        assert item.post_id == 1
        assert item.title == ""
        assert item.tags == []
        assert item.create_date is None
        assert item.raw_metadata == {}

    def test_malformed_sidecar_still_yields_item(self, tmp_path: Path, write_image) -> None:
        write_image(tmp_path, "5.png", sidecar_text="{oops")
        write_image(tmp_path, "6.png", {"title": 12, "tags": "red", "id": "abc"})

        items = ArtistScanner().scan("1", tmp_path)

        assert [item.file_name for item in items] == ["6.png", "5.png"]
        assert items[0].title == ""
        assert items[0].tags == []
        assert items[0].numeric_id == 6

    def test_date_falls_back_to_date_field(self, tmp_path: Path, write_image) -> None:
        write_image(tmp_path, "1.jpg", {"date": "2023-06-01T00:00:00Z"})

        [item] = ArtistScanner().scan("1", tmp_path)

        assert item.create_date == "2023-06-01T00:00:00Z"

    def test_only_image_files_are_scanned(self, tmp_path: Path, write_image) -> None:
        write_image(tmp_path, "1.jpg", {"id": 1})
        (tmp_path / "readme.txt").write_text("x", encoding="utf-8")
        (tmp_path / "sub.jpg").mkdir()

        items = ArtistScanner().scan("1", tmp_path)

        assert [item.file_name for item in items] == ["1.jpg"]

    def test_sorted_by_date_then_post_then_page(self, tmp_path: Path, write_image) -> None:
        old = {"create_date": "2023-01-01T00:00:00+00:00"}
        new = {"create_date": "2024-01-01T00:00:00+00:00"}
        write_image(tmp_path, "10_p1.jpg", old)
        write_image(tmp_path, "10_p0.jpg", old)
        write_image(tmp_path, "20_p0.jpg", old)
        write_image(tmp_path, "5_p0.jpg", new)
        write_image(tmp_path, "nodate.jpg")

        items = ArtistScanner().scan("1", tmp_path)

        assert [item.file_name for item in items] == [
            "5_p0.jpg",
            "20_p0.jpg",
            "10_p0.jpg",
            "10_p1.jpg",
            "nodate.jpg",
        ]

    def test_missing_directory_yields_no_items(self, tmp_path: Path) -> None:
        assert ArtistScanner().scan("1", tmp_path / "missing") == []

    def test_file_instead_of_directory_yields_no_items(self, tmp_path: Path) -> None:
        path = tmp_path / "file.jpg"
        path.write_bytes(b"x")

        assert ArtistScanner().scan("1", path) == []
