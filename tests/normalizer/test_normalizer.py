"""Tests for the hostname normalization pipeline."""

import dataclasses

import pytest

from publicsuffix_lite.errors import IdnaConversionError, InvalidLabelError
from publicsuffix_lite.normalizer import (
    DEFAULT_NORMALIZER,
    MAX_LABEL_LENGTH,
    Normalizer,
    NormalizerConfig,
    normalize_hostname,
    to_ascii_label,
)


class TestNormalizerConfig:

    def test_defaults(self):
        assert DEFAULT_NORMALIZER.strip_trailing_dot
        assert DEFAULT_NORMALIZER.idna_ascii

    def test_presets(self):
        assert NormalizerConfig.raw() == NormalizerConfig(False, False)
        assert NormalizerConfig.unicode() == NormalizerConfig(True, False)

    def test_config_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_NORMALIZER.idna_ascii = False  # type: ignore[misc]


class TestNormalizerPipeline:

    def test_lowercases_ascii(self):
        assert Normalizer().labels("WwW.Example.COM") == ["www", "example", "com"]

    def test_strips_one_trailing_dot(self):
        assert Normalizer().labels("example.com.") == ["example", "com"]

    def test_does_not_strip_repeated_trailing_dots(self):
        with pytest.raises(InvalidLabelError):
            Normalizer().labels("example.com..")

    def test_trailing_dot_kept_when_stripping_disabled(self):
        with pytest.raises(InvalidLabelError):
            Normalizer(NormalizerConfig.raw()).labels("example.com.")

    def test_raw_still_lowercases(self):
        assert Normalizer(NormalizerConfig.raw()).labels("EXAMPLE.Com") == ["example", "com"]

    def test_single_label(self):
        assert Normalizer().labels("localhost") == ["localhost"]

    def test_idna_conversion(self):
        assert Normalizer().labels("食狮.中国") == ["xn--85x722f", "xn--fiqs8s"]

    def test_ace_input_passes_through(self):
        assert Normalizer().labels("XN--FIQS8S") == ["xn--fiqs8s"]

    def test_idna_maps_unicode_case(self):
        labels = Normalizer().labels("ÄBC.com")
        assert labels[0].startswith("xn--")
        assert labels == Normalizer().labels("äbc.com")

    def test_unicode_kept_without_idna(self):
        n = Normalizer(NormalizerConfig.unicode())
        assert n.labels("食狮.中国") == ["食狮", "中国"]

    def test_unicode_label_only_ascii_letters_folded(self):
        n = Normalizer(NormalizerConfig.unicode())
        assert n.labels("ÄBC.COM") == ["Äbc", "com"]

    def test_normalize_joins_labels(self):
        assert Normalizer().normalize("WWW.Example.COM.") == "www.example.com"
        assert normalize_hostname("食狮.中国") == "xn--85x722f.xn--fiqs8s"

    def test_normalize_is_idempotent(self):
        for host in ["WWW.Example.COM.", "食狮.公司.cn", "a.b.C.d"]:
            once = normalize_hostname(host)
            assert normalize_hostname(once) == once


class TestInvalidLabels:

    @pytest.mark.parametrize("hostname", [
        "",
        ".",
        ".com",
        "a..b",
        "..",
    ])
    def test_empty_labels(self, hostname):
        with pytest.raises(InvalidLabelError):
            Normalizer().labels(hostname)

    def test_label_length_limit(self):
        ok = "a" * MAX_LABEL_LENGTH
        assert Normalizer().labels(f"{ok}.com") == [ok, "com"]
        with pytest.raises(InvalidLabelError) as exc_info:
            Normalizer().labels(f"{ok}a.com")
        assert exc_info.value.label == ok + "a"

    def test_length_checked_after_conversion(self):
        with pytest.raises(InvalidLabelError):
            Normalizer().labels("ü" * 60 + ".com")

    def test_idna_failure(self):
        with pytest.raises(IdnaConversionError):
            Normalizer().labels("☃.com")

    def test_idna_failure_is_an_invalid_label(self):
        assert issubclass(IdnaConversionError, InvalidLabelError)

    def test_to_ascii_label_error_carries_label(self):
        with pytest.raises(IdnaConversionError) as exc_info:
            to_ascii_label("☃")
        assert exc_info.value.label == "☃"
