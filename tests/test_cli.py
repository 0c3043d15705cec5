"""Tests for the ``pages`` command-line interface."""

from __future__ import annotations

import textwrap
import typing as typ

import pytest
from bs4 import BeautifulSoup

from studio_pages import cli
from studio_pages.config import SiteConfig
from studio_pages.errors import MissingFieldError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every command from an empty directory without a default config."""
    monkeypatch.chdir(tmp_path)


def _write_site(root: Path) -> Path:
    content = root / "content"
    (content / "_includes").mkdir(parents=True)
    (content / "_includes" / "page.html").write_text(
        "<article>{{ content }}</article>\n", encoding="utf-8"
    )
    (content / "index.md").write_text(
        textwrap.dedent(
            """\
            ---
            title: Home
            layout: page.html
            ---
            # {{ title }} of {{ site.title }}
            """
        ),
        encoding="utf-8",
    )
    config = root / "site.yaml"
    config.write_text(
        textwrap.dedent(
            f"""\
            defaults:
              content_dir: {content}
              output_dir: {root / "public"}
            data:
              title: Studio
            """
        ),
        encoding="utf-8",
    )
    return config


def test_build_writes_pages_using_includes_layouts(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``pages build`` renders with the site config and ``_includes`` layouts."""
    config = _write_site(tmp_path)
    cli.build(config=config)
    output = tmp_path / "public" / "index.html"
    assert output.exists(), "expected the home page to be written"
    soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
    assert soup.article is not None, "expected the _includes layout to wrap the page"
    assert soup.article.h1["id"] == "home-of-studio"
    assert "wrote " in capsys.readouterr().out


def test_build_overrides_output_directory(tmp_path: Path) -> None:
    """``--output-dir`` replaces the configured destination."""
    config = _write_site(tmp_path)
    cli.build(config=config, output_dir=tmp_path / "elsewhere")
    assert (tmp_path / "elsewhere" / "index.html").exists()
    assert not (tmp_path / "public").exists()


def test_build_exits_non_zero_on_page_failure(tmp_path: Path) -> None:
    """A page that fails to render makes the command exit with status 1."""
    config = _write_site(tmp_path)
    (tmp_path / "content" / "broken.md").write_text(
        "{{ PricingSection({}) }}\n", encoding="utf-8"
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=config)
    assert excinfo.value.code == 1
    assert (tmp_path / "public" / "index.html").exists(), (
        "expected the healthy page to be written despite the failure"
    )


def test_shortcodes_lists_required_fields(capsys: pytest.CaptureFixture[str]) -> None:
    """Each registered shortcode is printed with its required fields."""
    cli.shortcodes()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "currentBuildDate", f"unexpected first line {lines[0]!r}"
    assert "ServicesSection (requires: services)" in lines
    assert "bannerSlider" in lines, "expected fully defaulted shortcodes listed bare"
    assert "BeautyTipsSlider (requires: items)" in lines


def test_render_with_inline_json(capsys: pytest.CaptureFixture[str]) -> None:
    """``--config-json`` objects are passed as the shortcode configuration."""
    cli.render(
        "MarqueeSection",
        config_json='{"messages": [{"text": "Open <daily>"}]}',
    )
    soup = BeautifulSoup(capsys.readouterr().out, "html.parser")
    slide = soup.select_one(".swiper-slide")
    assert slide is not None, "expected one marquee slide"
    assert "Open <daily>" in slide.get_text(), "expected escaped text to round-trip"


def test_render_binds_arrays_positionally(capsys: pytest.CaptureFixture[str]) -> None:
    """A JSON array is bound to the shortcode's positional field."""
    cli.render(
        "BeautyTipsSlider",
        config_json='[{"title": "Hydrate", "description": "Drink water"}]',
    )
    out = capsys.readouterr().out
    assert "Hydrate:" in out and "Drink water" in out
    assert "Natural beauty tips" in out, "expected the default title"


def test_render_reads_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """``--config-file`` loads the configuration from disk."""
    payload = tmp_path / "faq.json"
    payload.write_text(
        '{"questions": [{"question": "Open late?", "answer": "Fridays"}]}',
        encoding="utf-8",
    )
    cli.render("FaqBoxSection", config_file=payload)
    assert "Open late?" in capsys.readouterr().out


def test_render_rejects_two_sources(tmp_path: Path) -> None:
    """Inline JSON and a file cannot be combined."""
    with pytest.raises(ValueError, match="not both"):
        cli.render("MarqueeSection", config_json="{}", config_file=tmp_path / "x.json")


def test_render_rejects_scalar_json() -> None:
    """Only objects and arrays are accepted."""
    with pytest.raises(ValueError, match="object or array"):
        cli.render("MarqueeSection", config_json="42")


def test_render_missing_required_field() -> None:
    """Missing required fields surface as :class:`MissingFieldError`."""
    with pytest.raises(MissingFieldError):
        cli.render("ServicesSection", config_json="{}")


def test_default_config_used_when_present(
    tmp_path: Path, mocker: MockerFixture
) -> None:
    """Without ``--config`` the default ``config/site.yaml`` is loaded if it exists."""
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "site.yaml").write_text("defaults:\n  timezone: UTC\n", encoding="utf-8")
    loader = mocker.patch.object(
        cli, "load_site_config", autospec=True, return_value=SiteConfig()
    )
    cli.shortcodes()
    loader.assert_called_once_with(cli.DEFAULT_CONFIG)


def test_default_settings_without_config_file(mocker: MockerFixture) -> None:
    """Without any config file the built-in defaults are used."""
    loader = mocker.patch.object(cli, "load_site_config", autospec=True)
    cli.shortcodes()
    loader.assert_not_called()
