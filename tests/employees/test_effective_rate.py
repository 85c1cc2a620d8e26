import pytest

from src.shop_payroll.shop_payroll.core.enums import PayType
from src.shop_payroll.shop_payroll.employees.model import Employee, effective_rate


@pytest.mark.parametrize(
    "override, base, expected",
    [
        (None, None, 0.0),
        (None, 12.5, 12.5),
        (15, 12.5, 15.0),
        (0, 12.5, 0.0),
    ],
)
def test_effective_rate(override, base, expected):
    assert effective_rate(override, base) == expected


def test_employee_compensation_maps_rate_fields():
    emp = Employee(
        employee_id=1,
        shop_id=1,
        name="A",
        pay_type=PayType.FIXED_DAILY,
        hourly_rate=9,
        fixed_daily_rate=60,
        custom_daily_rate=70,
    )
    comp = emp.compensation()
    assert comp.pay_type == PayType.FIXED_DAILY
    assert comp.effective_hourly_rate == 9.0
    assert comp.effective_daily_rate == 70.0
