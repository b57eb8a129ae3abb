"""Extraction and ordering of Go version labels from the download page."""

import re
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup
from packaging.version import Version

from .errors import ParseFailure

# go1.16 and newer, optional patch number, ASCII digits only
VERSION_PATTERN = re.compile(r"^go(\d+)\.(1[6-9]|[2-9]\d+)(?:\.(\d+))?$", re.ASCII)

TOGGLE_BUTTON_SELECTOR = ".toggleButton"
GO_PREFIX = "go"
SEMVER_PREFIX = "v"


def extract_version_labels(html: str, url: Optional[str] = None) -> List[str]:
    """Return the label of every version toggle button on the page, in page order.

    The label is the text of the button's ``span`` children, or the button's
    own text when it has none. Raises ParseFailure when the markup cannot be
    parsed or holds no toggle button at all.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise ParseFailure(str(e), url) from e

    buttons = soup.select(TOGGLE_BUTTON_SELECTOR)
    if not buttons:
        raise ParseFailure("no version toggle buttons found", url)

    labels = []
    for button in buttons:
        spans = button.find_all("span")
        if spans:
            text = "".join(span.get_text() for span in spans)
        else:
            text = button.get_text()
        labels.append(text.strip())
    return labels


def is_supported_version(label: str) -> bool:
    return VERSION_PATTERN.match(label) is not None


def to_semver(label: str) -> str:
    """go1.21.0 -> v1.21.0"""
    if not label.startswith(GO_PREFIX):
        raise ValueError(f"Not a Go version label: {label!r}")
    return SEMVER_PREFIX + label[len(GO_PREFIX):]


def from_semver(value: str) -> str:
    """v1.21.0 -> go1.21.0"""
    if not value.startswith(SEMVER_PREFIX):
        raise ValueError(f"Not a semantic version: {value!r}")
    return GO_PREFIX + value[len(SEMVER_PREFIX):]


def dedupe_versions(labels: Iterable[str]) -> List[str]:
    """Drop repeated versions anywhere in the sequence, keeping the first occurrence.

    Labels of equal precedence count as repeats, so go1.20 and go1.20.0
    collapse to whichever came first.
    """
    seen = set()
    unique = []
    for label in labels:
        key = Version(to_semver(label))
        if key in seen:
            continue
        seen.add(key)
        unique.append(label)
    return unique


def sort_versions(labels: Iterable[str]) -> List[str]:
    """Sort labels newest first by major, minor and patch (missing patch is 0)."""
    semvers = sorted((to_semver(label) for label in labels), key=Version, reverse=True)
    return [from_semver(value) for value in semvers]


def select_versions(labels: Iterable[str]) -> List[str]:
    """Keep supported labels, drop duplicates and order them newest first."""
    supported = [label for label in labels if is_supported_version(label)]
    return sort_versions(dedupe_versions(supported))
