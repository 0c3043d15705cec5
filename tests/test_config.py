"""Tests for loading the YAML site configuration."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from studio_pages.config import AnchorConfig, SiteConfig, SiteConfigError, load_site_config

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    """Every key is optional."""
    assert load_site_config(_write(tmp_path, "")) == SiteConfig()


def test_overrides_are_applied(tmp_path: Path) -> None:
    """Values from each section replace the defaults they name."""
    path = _write(
        tmp_path,
        """
        defaults:
          timezone: Europe/London
          date_format: yyyy-LL-dd
          autoescape: false
          content_dir: pages
          output_dir: public
        anchors:
          levels: [2, 3]
          placement: before
          symbol: "¶"
          aria_hidden: true
        data:
          title: Studio
        """,
    )
    config = load_site_config(path)
    assert config.timezone == "Europe/London"
    assert config.date_format == "yyyy-LL-dd"
    assert config.autoescape is False
    assert config.content_dir == Path("pages")
    assert config.output_dir == Path("public")
    assert config.anchors == AnchorConfig(
        levels=(2, 3), placement="before", symbol="¶", aria_hidden=True
    ), f"unexpected anchors {config.anchors!r}"
    assert config.data == {"title": "Studio"}


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing configuration file is reported by path."""
    with pytest.raises(FileNotFoundError, match="missing.yaml"):
        load_site_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "body",
    [
        "- just\n- a list\n",
        "defaults: nope\n",
        "anchors:\n  levels: [0, 7]\n",
        "anchors:\n  levels: first\n",
        "anchors:\n  placement: inside\n",
        "data: [1, 2]\n",
    ],
)
def test_invalid_content_raises_site_config_error(tmp_path: Path, body: str) -> None:
    """Malformed sections and out-of-range values are rejected."""
    with pytest.raises(SiteConfigError):
        load_site_config(_write(tmp_path, body))


def test_repository_config_loads() -> None:
    """The bundled ``config/site.yaml`` stays valid."""
    config = load_site_config(REPO_ROOT / "config" / "site.yaml")
    assert config.anchors.levels == (1, 2, 3, 4)
    assert config.anchors.placement == "after"
