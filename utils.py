from dataclasses import dataclass
from enum import Enum
import logging
import re


COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[32m",  # green
    "WARNING": "\033[33m",  # yellow
    "ERROR": "\033[31m",  # red
    "CRITICAL": "\033[1;31m",  # bold red
}
COLOR_RESET = "\033[0m"

SEPARATOR_RE = re.compile(r"[-_.\s]+")
DIGIT_RUN_RE = re.compile(r"\d+([a-z])")


class ColorFormatter(logging.Formatter):
    def format(self, record):
        color = COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname}{COLOR_RESET}"
        return super().format(record)


def setup_logging():
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter("%(levelname)s %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.INFO)


def pascal_case(name: str) -> str:
    """Collapse a file stem like "arrow-right" into "ArrowRight".

    All-caps parts are lowered first ("ARROW" -> "Arrow"), mixed-case parts keep
    their inner capitals, and a letter following a digit run is capitalized
    ("h1-heading" -> "H1Heading").
    """
    parts = []
    for part in SEPARATOR_RE.split(name):
        if not part:
            continue
        if part.isupper():
            part = part.lower()
        part = DIGIT_RUN_RE.sub(lambda m: m.group(0).upper(), part)
        parts.append(part[0].upper() + part[1:])
    return "".join(parts)


class Format(str, Enum):
    MODULE = "esm"
    COMMONJS = "cjs"


@dataclass(frozen=True)
class SourceAsset:
    filename: str
    markup: str
    identifier: str
    deprecated: bool = False

    def __post_init__(self):
        # JS also allows "$" where Python identifiers don't.
        if not self.identifier.replace("$", "_").isidentifier():
            raise ValueError(
                f"{self.filename}: {self.identifier!r} is not a valid component name"
            )


@dataclass(frozen=True)
class GeneratedArtifact:
    identifier: str
    format: Format
    module_source: str
    declaration: str
