import logging

import pytest

from hr_metrics.payroll.calculator.standard_calculator import (
    StandardPayrollCalculator,
    parse_amount,
    parse_whole_number,
)


def test_net_salary_is_base_minus_deductions_plus_bonus():
    calc = StandardPayrollCalculator()

    assert calc.net_salary(50000, 2000, 1000) == 49000


def test_net_salary_accepts_form_strings():
    calc = StandardPayrollCalculator()

    assert calc.net_salary("50000", "2,000", "") == 48000
    assert calc.net_salary("30000", None, " 500 ") == 30500


def test_negative_result_is_kept():
    calc = StandardPayrollCalculator()

    assert calc.net_salary(1000, 5000, 0) == -4000


@pytest.mark.parametrize("value", ["abc", "12.5", "-300", -300])
def test_invalid_amounts_fall_back_to_zero(value, caplog):
    with caplog.at_level(logging.WARNING, logger="hr_metrics.payroll.calculator"):
        assert parse_amount(value, "bonus") == 0

    assert "bonus" in caplog.text


def test_invalid_deductions_do_not_poison_net_salary():
    calc = StandardPayrollCalculator()

    assert calc.net_salary(50000, "n/a", "1000") == 51000


def test_parse_whole_number_strips_thousands_separators():
    assert parse_whole_number("50,000") == 50000
    assert parse_whole_number(" 1,250 ") == 1250
    assert parse_whole_number(-3) == -3

    with pytest.raises(ValueError):
        parse_whole_number("12.5")
