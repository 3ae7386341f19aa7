"""Mapping between channel identifiers and the labels shown in channel lists.

The release and development defaults of a category always display as the
fixed ``"Release"`` / ``"Development"`` labels; any other identifier is its
own label.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

RELEASE_LABEL = "Release"
DEVELOPMENT_LABEL = "Development"


def to_label(channel_id: str, release: Optional[str], development: Optional[str]) -> str:
    if channel_id == release:
        return RELEASE_LABEL
    if channel_id == development:
        return DEVELOPMENT_LABEL
    return channel_id


def from_label(label: str, release: Optional[str], development: Optional[str]) -> str:
    if label == RELEASE_LABEL and release is not None:
        return release
    if label == DEVELOPMENT_LABEL and development is not None:
        return development
    return label


def to_labels(
    channel_ids: Iterable[str], release: Optional[str], development: Optional[str]
) -> List[str]:
    return [to_label(c, release, development) for c in channel_ids]


def from_labels(
    labels: Iterable[str], release: Optional[str], development: Optional[str]
) -> List[str]:
    return [from_label(label, release, development) for label in labels]


class ChannelCodec:
    """The functions above with a category's two defaults bound."""

    def __init__(self, release: Optional[str], development: Optional[str]):
        self.release = release
        self.development = development

    def to_label(self, channel_id: str) -> str:
        return to_label(channel_id, self.release, self.development)

    def from_label(self, label: str) -> str:
        return from_label(label, self.release, self.development)

    def to_labels(self, channel_ids: Iterable[str]) -> List[str]:
        return to_labels(channel_ids, self.release, self.development)

    def from_labels(self, labels: Iterable[str]) -> List[str]:
        return from_labels(labels, self.release, self.development)
