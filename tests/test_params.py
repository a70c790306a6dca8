"""
Test decode parameters.
"""

import dataclasses

import pytest

from faxbits import settings
from faxbits.exceptions import FaxTypeError, FaxValueError
from faxbits.params import DecodeParams, Encoding


def test_fields() -> None:
    """Fields come back the way they went in."""
    params = DecodeParams(
        k=-1, columns=1728, rows=0, black_is_1=False, end_of_block=True
    )
    assert params.k == -1
    assert params.columns == 1728
    assert params.rows == 0
    assert params.black_is_1 is False
    assert params.end_of_block is True
    assert params.end_of_line is False
    assert params.encoded_byte_align is False


def test_immutable() -> None:
    params = DecodeParams()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.columns = 42  # type: ignore[misc]


def test_encoding() -> None:
    assert DecodeParams(k=-1).encoding is Encoding.GROUP_4
    assert DecodeParams(k=0).encoding is Encoding.GROUP_3_1D
    assert DecodeParams(k=4).encoding is Encoding.GROUP_3_2D


def test_row_bytes() -> None:
    assert DecodeParams(columns=1728).row_bytes == 216
    assert DecodeParams(columns=1).row_bytes == 1
    assert DecodeParams(columns=9).row_bytes == 2


def test_from_dict_defaults() -> None:
    """Missing entries have the defaults from the PDF Reference."""
    assert DecodeParams.from_dict({}) == DecodeParams(
        k=0,
        columns=1728,
        rows=0,
        black_is_1=False,
        end_of_block=True,
        end_of_line=False,
        encoded_byte_align=False,
    )


def test_from_dict() -> None:
    parms = {
        "K": -1,
        "Columns": 2480,
        "Rows": 3508,
        "BlackIs1": True,
        "EndOfBlock": False,
        "EndOfLine": True,
        "EncodedByteAlign": True,
    }
    params = DecodeParams.from_dict(parms)
    assert params == DecodeParams(-1, 2480, 3508, True, False, True, True)
    assert params.as_dict() == parms
    assert DecodeParams.from_dict(params.as_dict()) == params


def test_from_dict_float() -> None:
    """Integral reals are fine where integers are expected."""
    assert DecodeParams.from_dict({"Columns": 1728.0}).columns == 1728


def test_from_dict_lenient(caplog) -> None:
    """Bad values are replaced with defaults."""
    params = DecodeParams.from_dict(
        {"K": "foo", "Columns": -5, "Rows": True, "BlackIs1": 1, "Predictor": 1}
    )
    assert params == DecodeParams()
    assert "Integer required" in caplog.text
    assert "Invalid /Columns" in caplog.text
    assert "Boolean required" in caplog.text


def test_from_dict_strict(monkeypatch) -> None:
    """Bad values are errors in strict mode."""
    monkeypatch.setattr(settings, "STRICT", True)
    with pytest.raises(FaxValueError):
        DecodeParams.from_dict({"Columns": 0})
    with pytest.raises(FaxValueError):
        DecodeParams.from_dict({"Rows": -1})
    with pytest.raises(FaxTypeError):
        DecodeParams.from_dict({"EndOfBlock": "yes"})
    # Unknown keys are still fine
    assert DecodeParams.from_dict({"Predictor": 1}) == DecodeParams()
