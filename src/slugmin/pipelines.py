"""pipelines"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from slugmin import config
from slugmin.errors import InputError
from slugmin.logging import get_logger
from slugmin.slug import slugify, slugify_filename


def _merge_config(cli_options: Mapping[str, Any] | None) -> dict[str, Any]:
    return config.get_config(cli_options or {})


def _build_converter(settings: Mapping[str, Any]) -> Callable[[str], str]:
    preserve_case = bool(settings.get("preserve_case", False))
    if settings["style"] == "filename":
        return lambda text: slugify_filename(text, preserve_case)
    max_length = int(settings.get("max_length") or 0)
    return lambda text: slugify(text, preserve_case, max_length=max_length)


def _read_stdin_lines() -> list[str]:
    try:
        return [line.rstrip("\r\n") for line in sys.stdin]
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(
            f"Failed to read standard input: {exc}",
            hint="Pass the text as arguments or pipe UTF-8 encoded input.",
        ) from exc


def run_slugify(
    cli_options: Mapping[str, Any] | None = None,
    texts: Iterable[str] | None = None,
) -> list[str]:
    """
    Slugify each text (or each stdin line) and print one slug per line.
    """

    settings = _merge_config(cli_options)
    logger = get_logger(
        "slugmin.slugify",
        bool(settings.get("verbose", False)),
        bool(settings.get("quiet", False)),
    )
    convert = _build_converter(settings)

    inputs = list(texts) if texts is not None else _read_stdin_lines()
    logger.debug(
        "Converting %d input(s) with style=%s preserve_case=%s",
        len(inputs),
        settings["style"],
        settings["preserve_case"],
    )

    slugs: list[str] = []
    for text in inputs:
        slug = convert(text)
        logger.debug("%r -> %r", text, slug)
        if text.strip() and not slug:
            logger.warning("No ASCII-mappable content in %r; slug is empty", text)
        slugs.append(slug)
        print(slug)
    return slugs


def run_config_show(cli_options: Mapping[str, Any] | None = None) -> None:
    settings = _merge_config(cli_options)
    print("Effective configuration:")
    print(config.render_config(settings), end="")
