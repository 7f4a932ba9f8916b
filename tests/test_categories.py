import json

from conftest import write

from docs_translator.categories import CATEGORY_FILE, write_category_files
from docs_translator.config import DEFAULT_CATEGORY_LABELS


def test_writes_descriptor_per_subdirectory(tmp_path):
    out = tmp_path / "out"
    write(out / "video" / "av1.md", "x")
    write(out / "custom" / "a.md", "x")
    write(out / "index.md", "x")

    created = write_category_files(out, DEFAULT_CATEGORY_LABELS)

    assert created == ["custom", "video"]
    video = json.loads((out / "video" / CATEGORY_FILE).read_text(encoding="utf-8"))
    assert video == {
        "label": "视频编解码器",
        "position": 1,
        "link": {"type": "generated-index"},
    }
    custom = json.loads((out / "custom" / CATEGORY_FILE).read_text(encoding="utf-8"))
    assert custom["label"] == "custom"
    assert not (out / CATEGORY_FILE).exists()


def test_labels_are_passed_in(tmp_path):
    out = tmp_path / "out"
    (out / "video").mkdir(parents=True)

    write_category_files(out, {"video": "Video"})

    data = json.loads((out / "video" / CATEGORY_FILE).read_text(encoding="utf-8"))
    assert data["label"] == "Video"


def test_idempotent_byte_identical(tmp_path):
    out = tmp_path / "out"
    for name in ["audio", "metrics", "unknown"]:
        (out / name).mkdir(parents=True)

    write_category_files(out, DEFAULT_CATEGORY_LABELS)
    first = {p: p.read_bytes() for p in out.glob("*/" + CATEGORY_FILE)}
    write_category_files(out, DEFAULT_CATEGORY_LABELS)
    second = {p: p.read_bytes() for p in out.glob("*/" + CATEGORY_FILE)}

    assert len(first) == 3
    assert first == second
    # non-ASCII labels are written as UTF-8, not \u escapes
    assert "音频编解码器".encode("utf-8") in first[out / "audio" / CATEGORY_FILE]


def test_missing_output_root_is_noop(tmp_path):
    assert write_category_files(tmp_path / "nope", DEFAULT_CATEGORY_LABELS) == []
