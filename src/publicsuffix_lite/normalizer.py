"""Hostname canonicalization ahead of trie lookup.

Pipeline, applied in order:
  1. Strip exactly one trailing "." (when enabled). "foo.com.." keeps
     one dot and then fails in step 2 with an empty label.
  2. Split on "." into labels.
  3. Convert labels containing non-ASCII characters to their ACE
     ("xn--") form (when enabled), via the idna package with UTS #46
     mapping.
  4. Lowercase ASCII letters in every label. Labels left in Unicode
     get no case folding beyond A-Z.

Any empty label, oversized label or failed conversion raises
InvalidLabelError (IdnaConversionError for the conversion case).
"""
from __future__ import annotations

import string
from dataclasses import dataclass

import idna

from publicsuffix_lite.errors import IdnaConversionError, InvalidLabelError

MAX_LABEL_LENGTH = 63

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Normalization switches. Defaults follow DNS presentation rules."""
    strip_trailing_dot: bool = True
    idna_ascii: bool = True

    @classmethod
    def raw(cls) -> NormalizerConfig:
        """No trailing-dot stripping, no ASCII conversion (lowercasing still applies)."""
        return cls(strip_trailing_dot=False, idna_ascii=False)

    @classmethod
    def unicode(cls) -> NormalizerConfig:
        """Keep Unicode labels as submitted."""
        return cls(idna_ascii=False)


DEFAULT_NORMALIZER = NormalizerConfig()


def ascii_lower(label: str) -> str:
    return label.translate(_ASCII_LOWER)


def to_ascii_label(label: str) -> str:
    """Return the ACE form of a single Unicode label.

    Raises IdnaConversionError when the idna package rejects the label.
    """
    try:
        encoded = idna.encode(label, uts46=True, transitional=False)
    except (idna.IDNAError, UnicodeError) as exc:
        raise IdnaConversionError(
            label, f"cannot convert label {label!r} to ASCII: {exc}"
        ) from exc
    ace = encoded.decode("ascii")
    # UTS #46 maps ideographic full stops to "."; one label in, one label out.
    if "." in ace:
        raise IdnaConversionError(
            label, f"label {label!r} maps to more than one label"
        )
    return ace


class Normalizer:
    """Turns a hostname into the label list used for matching.

    Stateless apart from its frozen config, so one instance can be
    shared across threads.

    Usage:
        Normalizer().labels("WWW.Example.COM.")
        # ["www", "example", "com"]
    """

    def __init__(self, config: NormalizerConfig = DEFAULT_NORMALIZER) -> None:
        self._config = config

    @property
    def config(self) -> NormalizerConfig:
        return self._config

    def labels(self, hostname: str) -> list[str]:
        """Normalize hostname and return its labels, leftmost first."""
        if self._config.strip_trailing_dot and hostname.endswith("."):
            hostname = hostname[:-1]

        result: list[str] = []
        for label in hostname.split("."):
            if not label:
                raise InvalidLabelError(
                    label, f"empty label in hostname {hostname!r}"
                )
            if self._config.idna_ascii and not label.isascii():
                label = to_ascii_label(label)
            if len(label) > MAX_LABEL_LENGTH:
                raise InvalidLabelError(
                    label,
                    f"label exceeds {MAX_LABEL_LENGTH} characters: {label!r}",
                )
            result.append(ascii_lower(label))
        return result

    def normalize(self, hostname: str) -> str:
        """Normalize hostname and rejoin its labels with "."."""
        return ".".join(self.labels(hostname))


def normalize_hostname(
    hostname: str, config: NormalizerConfig = DEFAULT_NORMALIZER
) -> str:
    """Shortcut for Normalizer(config).normalize(hostname)."""
    return Normalizer(config).normalize(hostname)
