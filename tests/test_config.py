from __future__ import annotations

from pathlib import Path
import pytest

from count_corpus_terms.config import load_config, options_from_config


def test_load_config_accepts_groups_and_options(tmp_path: Path):
    cfg_path = tmp_path / "cfg.yml"
    cfg_path.write_text(
        "\n".join(
            [
                "groups:",
                "  news:",
                "    files:",
                "      - input/*.txt",
                "out_dir: output",
                "languages: [english]",
                "stop_word_sets: [english1]",
                "stop_words: [foo]",
                "minimum_count: 3",
                "max_phrase_length: 4",
                "no_filter_substring: true",
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = load_config(cfg_path)

    assert cfg["groups"]["news"]["files"] == ["input/*.txt"]
    ops = options_from_config(cfg)
    assert ops.languages == ("english",)
    assert ops.stop_word_sets == ("english1",)
    assert ops.stop_words == ("foo",)
    assert ops.minimum_count == 3
    assert ops.max_phrase_length == 4
    assert ops.no_filter_substring is True


def test_load_config_normalizes_group_to_groups(tmp_path: Path):
    cfg_path = tmp_path / "cfg.yml"
    cfg_path.write_text(
        "\n".join(
            [
                "group:",
                "  name: text",
                "  files:",
                "    - input/*.txt",
                "out_dir: output",
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = load_config(cfg_path)

    assert "groups" in cfg
    assert cfg["groups"]["text"]["files"] == ["input/*.txt"]


def test_options_from_config_defaults(tmp_path: Path):
    cfg_path = tmp_path / "cfg.yml"
    cfg_path.write_text("groups:\n  text:\n    files: [a.txt]\n", encoding="utf-8")

    ops = options_from_config(load_config(cfg_path))

    assert ops.languages == ("chinese", "english")
    assert ops.stop_word_sets == ("cjk", "english1", "english2")
    assert ops.stop_words == ()
    assert ops.minimum_count == 2


def test_stop_words_file_resolved_against_base_dir(tmp_path: Path):
    (tmp_path / "stop.txt").write_text("# mine\nbar\n", encoding="utf-8")
    cfg_path = tmp_path / "cfg.yml"
    cfg_path.write_text(
        "groups:\n  text:\n    files: [a.txt]\nstop_words: [foo]\nstop_words_file: stop.txt\n",
        encoding="utf-8",
    )

    ops = options_from_config(load_config(cfg_path), tmp_path)

    assert ops.stop_words == ("foo", "bar")


def test_load_config_rejects_missing_groups_and_group(tmp_path: Path):
    cfg_path = tmp_path / "invalid.yml"
    cfg_path.write_text("out_dir: output\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"define 'groups' or 'group'"):
        load_config(cfg_path)


def test_load_config_rejects_non_yaml_suffix(tmp_path: Path):
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text("{}", encoding="utf-8")

    with pytest.raises(ValueError, match=r"YAML"):
        load_config(cfg_path)


def test_load_config_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


@pytest.mark.parametrize(
    "line, key",
    [
        ("languages: english", "languages"),
        ("stop_words: [1, 2]", "stop_words"),
        ("minimum_count: two", "minimum_count"),
        ("max_phrase_length: true", "max_phrase_length"),
        ("no_filter_substring: 1", "no_filter_substring"),
    ],
)
def test_load_config_rejects_bad_option_types(tmp_path: Path, line: str, key: str):
    cfg_path = tmp_path / "cfg.yml"
    cfg_path.write_text(f"groups:\n  text:\n    files: [a.txt]\n{line}\n", encoding="utf-8")

    with pytest.raises(ValueError, match=key):
        load_config(cfg_path)


def test_unknown_language_names_are_not_a_load_error(tmp_path: Path):
    cfg_path = tmp_path / "cfg.yml"
    cfg_path.write_text(
        "groups:\n  text:\n    files: [a.txt]\nlanguages: [english, french]\n", encoding="utf-8"
    )

    ops = options_from_config(load_config(cfg_path))

    assert ops.languages == ("english", "french")
