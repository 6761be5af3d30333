# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Unit tests for country-code normalisation."""

from __future__ import annotations

import pandas as pd
import pytest

from biofootprint.transform.codes import normalize_country_codes, pad_code


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("7", "007"),
        ("40", "040"),
        ("004", "004"),
        (7, "007"),
        (40.0, "040"),
        ("4.0", "004"),
        ("'004", "004"),
        (" 12 ", "012"),
        ("1234", "1234"),
        ("F351", "F351"),
    ],
)
def test_pad_code(raw, expected) -> None:
    assert pad_code(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", float("nan")])
def test_pad_code_blank_is_none(raw) -> None:
    assert pad_code(raw) is None


def test_short_codes_always_three_wide_and_keep_digits() -> None:
    for number in range(1, 100):
        padded = pad_code(str(number))
        assert len(padded) == 3
        assert padded.endswith(str(number))


class TestNormalizeCountryCodes:
    def test_renames_and_pads(self) -> None:
        frame = pd.DataFrame({"Area Code (M49)": ["4", "40", "516"], "Value": [1, 2, 3]})
        normalized = normalize_country_codes(frame, "Area Code (M49)")
        assert "Area Code (M49)" not in normalized.columns
        assert normalized["country_code"].tolist() == ["004", "040", "516"]
        assert normalized["Value"].tolist() == [1, 2, 3]

    def test_input_frame_untouched(self) -> None:
        frame = pd.DataFrame({"globio_country_code": ["4"]})
        normalize_country_codes(frame, "globio_country_code")
        assert list(frame.columns) == ["globio_country_code"]
        assert frame["globio_country_code"].tolist() == ["4"]

    def test_numeric_column_with_blanks(self) -> None:
        frame = pd.DataFrame({"globio_country_code": [4.0, None, 40.0]})
        normalized = normalize_country_codes(frame, "globio_country_code")
        assert normalized["country_code"].tolist() == ["004", None, "040"]

    def test_longer_codes_not_truncated(self) -> None:
        frame = pd.DataFrame({"code": ["5000", "12"]})
        normalized = normalize_country_codes(frame, "code")
        assert normalized["country_code"].tolist() == ["5000", "012"]

    def test_missing_column_raises(self) -> None:
        with pytest.raises(KeyError):
            normalize_country_codes(pd.DataFrame({"other": ["1"]}), "code")
