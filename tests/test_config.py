from __future__ import annotations

from pathlib import Path

import pytest

from intset.bounded import MAX_SIZE
from intset.config import default_config, find_project_root, load_config
from intset.errors import IntSetConfigError


def test_load_minimal_config_defaults_apply(tmp_path: Path) -> None:
    (tmp_path / "intset.toml").write_text("version = 1\n", encoding="utf-8")
    cfg = load_config(root=tmp_path)

    assert cfg.version == 1
    assert cfg.set.max_size == MAX_SIZE
    assert cfg.dump.trailing_newline is True
    assert cfg == default_config()


def test_load_config_overrides_work(tmp_path: Path) -> None:
    (tmp_path / "intset.toml").write_text(
        "\n".join(
            [
                "version = 1",
                "",
                "[set]",
                "max_size = 8",
                "",
                "[dump]",
                "trailing_newline = false",
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = load_config(root=tmp_path)
    assert cfg.set.max_size == 8
    assert cfg.dump.trailing_newline is False


def test_load_config_from_explicit_path(tmp_path: Path) -> None:
    p = tmp_path / "custom.toml"
    p.write_text("version = 1\n[set]\nmax_size = 3\n", encoding="utf-8")
    assert load_config(config_path=p).set.max_size == 3


def test_invalid_toml_raises(tmp_path: Path) -> None:
    p = tmp_path / "intset.toml"
    p.write_text("version = \n", encoding="utf-8")
    with pytest.raises(IntSetConfigError):
        load_config(root=tmp_path)


def test_invalid_utf8_raises(tmp_path: Path) -> None:
    (tmp_path / "intset.toml").write_bytes(b"version = 1\n# \xff\xfe\n")
    with pytest.raises(IntSetConfigError, match="UTF-8"):
        load_config(root=tmp_path)


def test_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(IntSetConfigError, match="Missing"):
        load_config(config_path=tmp_path / "intset.toml")


def test_missing_version_raises(tmp_path: Path) -> None:
    (tmp_path / "intset.toml").write_text("[set]\nmax_size = 4\n", encoding="utf-8")
    with pytest.raises(IntSetConfigError, match="version"):
        load_config(root=tmp_path)


def test_unsupported_version_raises(tmp_path: Path) -> None:
    (tmp_path / "intset.toml").write_text("version = 2\n", encoding="utf-8")
    with pytest.raises(IntSetConfigError, match="Unsupported"):
        load_config(root=tmp_path)


@pytest.mark.parametrize(
    "body",
    [
        'version = 1\n[set]\nmax_size = "big"\n',
        "version = 1\n[set]\nmax_size = true\n",
        "version = 1\n[set]\nmax_size = 0\n",
        "version = 1\n[dump]\ntrailing_newline = 1\n",
        'version = 1\nset = "nope"\n',
    ],
)
def test_invalid_values_raise(tmp_path: Path, body: str) -> None:
    (tmp_path / "intset.toml").write_text(body, encoding="utf-8")
    with pytest.raises(IntSetConfigError):
        load_config(root=tmp_path)


def test_find_project_root_success(tmp_path: Path) -> None:
    (tmp_path / "intset.toml").write_text("version = 1\n", encoding="utf-8")
    deep = tmp_path / "a" / "b"
    deep.mkdir(parents=True)

    assert find_project_root(deep) == tmp_path.resolve()
    some_file = deep / "x.txt"
    some_file.write_text("x\n", encoding="utf-8")
    assert find_project_root(some_file) == tmp_path.resolve()


def test_find_project_root_failure(tmp_path: Path) -> None:
    with pytest.raises(IntSetConfigError, match="Could not find"):
        find_project_root(tmp_path)
