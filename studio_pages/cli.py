"""Cyclopts CLI entrypoint for building studio pages and previewing shortcodes.

The ``pages`` console script renders a content directory into static HTML
(``pages build``), lists the registered shortcodes (``pages shortcodes``),
and renders a single shortcode from a JSON configuration
(``pages render``), which is handy when authoring section content.

Examples
--------
Build the site with the default configuration:

>>> from studio_pages.cli import main
>>> main()  # doctest: +SKIP

Preview one section:

>>> from studio_pages.cli import app
>>> app.run(
...     ["render", "MarqueeSection", "--config-json", '{"messages": []}']
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .builder import PageBuilder
from .config import DEFAULT_CONFIG_PATH, SiteConfig, load_site_config
from .site import SiteTemplating

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_PATH)
INCLUDES_DIRNAME = "_includes"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _configure_logging(*, verbose: bool) -> None:
    """Send log records to stderr; ``verbose`` lowers the threshold to DEBUG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT
    )


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(config: Path | None) -> SiteConfig:
    """Load ``config``, or the default file when present, or built-in defaults."""
    if config is not None:
        return load_site_config(config)
    if DEFAULT_CONFIG.exists():
        return load_site_config(DEFAULT_CONFIG)
    logger.debug("No %s found; using default settings", DEFAULT_CONFIG)
    return SiteConfig()


@app.command(help="Render every page in the content directory to static HTML.")
def build(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
    content_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the content folder", env_var="INPUT_CONTENT_DIR"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log debug output")] = False,
) -> None:
    """Build the site described by the configuration file.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``). Defaults to ``config/site.yaml`` when it exists.
    content_dir : Path or None, optional
        Directory of ``.md``/``.html`` pages; overrides the configured one.
    output_dir : Path or None, optional
        Destination directory; overrides the configured one.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    SystemExit
        With status 1 when at least one page failed to render. Pages that
        rendered are still written.
    """
    _configure_logging(verbose=verbose)
    site_config = _load_config(config)
    source_dir = content_dir or site_config.content_dir
    includes_dir = source_dir / INCLUDES_DIRNAME
    templating = SiteTemplating(
        site_config, layouts_dir=includes_dir if includes_dir.is_dir() else None
    )
    builder = PageBuilder(templating, source_dir, output_dir or site_config.output_dir)
    report = builder.build()
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    if not report.ok:
        logger.error("%d page(s) failed to build", len(report.failures))
        raise SystemExit(1)


@app.command(help="List the registered shortcodes and their required fields.")
def shortcodes(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Print one line per shortcode: its name and any required fields."""
    templating = SiteTemplating(_load_config(config))
    definitions = {
        definition.name: definition for definition in templating.shortcodes.definitions()
    }
    for name in templating.shortcodes.names():
        definition = definitions.get(name)
        if definition is None or not definition.required:
            print(name)
        else:
            print(f"{name} (requires: {', '.join(definition.required)})")


@app.command(help="Render one shortcode with a JSON configuration.")
def render(
    name: typ.Annotated[str, Parameter(help="Shortcode name")],
    *,
    config_json: typ.Annotated[
        str | None, Parameter(help="Inline JSON configuration")
    ] = None,
    config_file: typ.Annotated[
        Path | None, Parameter(help="Path to a JSON configuration file")
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Render shortcode ``name`` to stdout.

    Parameters
    ----------
    name : str
        Registered shortcode name, e.g. ``ServicesSection``.
    config_json : str or None, optional
        JSON object passed as the shortcode configuration. An array is bound
        to the shortcode's first positional field instead.
    config_file : Path or None, optional
        File containing the JSON configuration; mutually exclusive with
        ``config_json``.
    config : Path or None, optional
        Path to the site configuration file.

    Raises
    ------
    ValueError
        If both JSON sources are given or the JSON is neither an object nor
        an array.
    """
    if config_json is not None and config_file is not None:
        msg = "Pass either --config-json or --config-file, not both."
        raise ValueError(msg)
    payload: object = {}
    args: tuple[object, ...] = ()
    if config_json is not None:
        payload = msgspec_json.decode(config_json)
    elif config_file is not None:
        payload = msgspec_json.decode(config_file.read_bytes())
    if not isinstance(payload, (dict, list)):
        msg = "Shortcode configuration must be a JSON object or array."
        raise ValueError(msg)  # noqa: TRY004 - reported as a bad CLI value
    if config_json is not None or config_file is not None:
        args = (payload,)
    templating = SiteTemplating(_load_config(config))
    print(templating.shortcode(name, *args))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
