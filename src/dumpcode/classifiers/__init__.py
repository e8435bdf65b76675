"""Language classifiers map a file to the tag placed after its opening fence.

Each classifier exposes ``id`` and ``try_classify(ext, content)`` returning
a tag, or ``None`` to defer to the next classifier.  The chain is tried in
order:

    1. ExtensionTableClassifier: fixed extension -> tag table
    2. ShebangClassifier: ``#!`` interpreter sniffing
    3. SpecialFileClassifier: markers in extensionless files

If no classifier answers, the tag is ``""`` (an untagged fence).
"""

from __future__ import annotations

from typing import Protocol, Sequence

from .extensions import LANGUAGE_BY_EXTENSION, ExtensionTableClassifier
from .shebang import ShebangClassifier
from .special import SpecialFileClassifier

__all__ = [
    "Classifier",
    "DEFAULT_CHAIN",
    "FALLBACK_CHAIN",
    "LANGUAGE_BY_EXTENSION",
    "classify",
    "fallback_tag",
]


class Classifier(Protocol):
    """Every classifier must expose ``id`` and ``try_classify()``."""

    id: str

    def try_classify(self, ext: str, content: str) -> str | None:
        """Return a tag, or None when this classifier has no opinion."""
        ...


FALLBACK_CHAIN: tuple[Classifier, ...] = (
    ShebangClassifier(),
    SpecialFileClassifier(),
)

DEFAULT_CHAIN: tuple[Classifier, ...] = (ExtensionTableClassifier(), *FALLBACK_CHAIN)


def run_chain(chain: Sequence[Classifier], ext: str, content: str) -> str:
    for classifier in chain:
        tag = classifier.try_classify(ext, content)
        if tag is not None:
            return tag
    return ""


def classify(ext: str, content: str) -> str:
    """Return the language tag for a file.

    *ext* is the lowercase extension without a dot (``""`` if none);
    *content* is the file's text, or at least its leading part.
    """
    return run_chain(DEFAULT_CHAIN, ext, content)


def fallback_tag(ext: str, content: str) -> str:
    """Classify by content alone, skipping the extension table.

    The selector uses this to decide whether an extensionless file is
    worth including.
    """
    return run_chain(FALLBACK_CHAIN, ext, content)
