import math

import pytest

from replaygain_tool.utils.conversion import db_to_ratio, ratio_to_db


def test_db_to_ratio() -> None:
    assert db_to_ratio(0.0) == 1.0
    assert db_to_ratio(20.0) == 10.0
    assert db_to_ratio(-20.0) == pytest.approx(0.1)
    assert db_to_ratio(-6.0) == pytest.approx(0.501187, rel=1e-5)


def test_ratio_to_db() -> None:
    assert ratio_to_db(1.0) == 0.0
    assert ratio_to_db(10.0) == 20.0
    assert ratio_to_db(0.5) == pytest.approx(-6.0206, rel=1e-5)


def test_ratio_to_db_rejects_non_positive_ratio() -> None:
    with pytest.raises(ValueError):
        ratio_to_db(0.0)
    with pytest.raises(ValueError):
        ratio_to_db(-1.0)


def test_db_to_ratio_overflow() -> None:
    with pytest.raises(OverflowError):
        db_to_ratio(1e6)
    assert db_to_ratio(-1e6) == 0.0


def test_conversion_is_inverse() -> None:
    for db in (-60.0, -6.5, 0.0, 3.0, 12.25):
        assert ratio_to_db(db_to_ratio(db)) == pytest.approx(db, abs=1e-9)
    assert math.isclose(db_to_ratio(ratio_to_db(0.25)), 0.25)
