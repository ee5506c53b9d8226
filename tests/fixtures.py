"""Sample SVGs and helpers shared by the test modules."""

from __future__ import annotations

from pathlib import Path

ARROW_RIGHT = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" '
    'stroke-width="1.5" stroke="currentColor" aria-hidden="true">'
    '<path stroke-linecap="round" stroke-linejoin="round" d="M13.5 4.5 21 12l-7.5 7.5M21 12H3"/>'
    "</svg>\n"
)

BELL = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20" fill="currentColor" aria-hidden="true">'
    '<path fill-rule="evenodd" d="M10 2a6 6 0 0 0-6 6v3l-2 2v1h16v-1l-2-2V8a6 6 0 0 0-6-6Z" clip-rule="evenodd"/>'
    "</svg>\n"
)


def write_icons(directory: Path, icons: dict[str, str]) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for name, markup in icons.items():
        (directory / name).write_text(markup, encoding="utf-8")
    return directory
