from storage.media import safe_filename, save_media


def test_safe_filename_drops_directories_and_odd_characters():
    assert safe_filename("../../etc/passwd") == "passwd"
    assert safe_filename("My Story (final).mp4") == "My_Story_final_.mp4"
    assert safe_filename("...") == "upload"


def test_save_media_writes_under_media_dir(tmp_path):
    ref = save_media("story.mp4", b"\x00\x01video", stamp="1714559400000", root=tmp_path)

    assert ref.name == "story.mp4"
    assert ref.url.endswith("media/1714559400000_story.mp4")
    assert (tmp_path / "media" / "1714559400000_story.mp4").read_bytes() == b"\x00\x01video"


def test_save_media_failure_returns_empty_url(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")

    ref = save_media("story.mp4", b"x", stamp="1", root=blocker)
    assert ref.name == "story.mp4"
    assert ref.url == ""
