import pytest

from src.shop_payroll.shop_payroll.access import Actor
from src.shop_payroll.shop_payroll.core.enums import PayType, Role
from src.shop_payroll.shop_payroll.core.exceptions import AuthorizationError, NotFoundError, ValidationError


@pytest.fixture
def ctx(store):
    owner = store.add_admin("owner@example.com", role=Role.SHOP_ADMIN)
    shop_id = store.add_shop(owner)
    return store.container(), Actor(owner, Role.SHOP_ADMIN), shop_id


def test_create_requires_name_pay_type_and_shop(ctx):
    c, actor, shop_id = ctx
    with pytest.raises(ValidationError, match="name, payType and shopId required"):
        c.employee_service.create(actor, {"name": "Sam", "shopId": shop_id})
    with pytest.raises(ValidationError):
        c.employee_service.create(actor, {"name": "Sam", "payType": "Weekly", "shopId": shop_id})
    with pytest.raises(ValidationError):
        c.employee_service.create(actor, {"name": "Sam", "payType": "Hourly", "shopId": shop_id, "hourlyRate": -1})


def test_create_and_partial_update(ctx):
    c, actor, shop_id = ctx
    emp = c.employee_service.create(
        actor,
        {"name": " Sam ", "payType": "Hourly", "shopId": shop_id, "hourlyRate": "11.5", "customHourlyRate": 12},
    )
    assert emp.employee_id > 0
    assert emp.name == "Sam"
    assert emp.compensation().effective_hourly_rate == 12.0

    updated = c.employee_service.update(actor, emp.employee_id, {"customHourlyRate": None, "phoneNumber": "0700"})
    assert updated.custom_hourly_rate is None
    assert updated.hourly_rate == 11.5
    assert updated.phone_number == "0700"
    assert c.employees_repo.get_by_id(emp.employee_id).custom_hourly_rate is None


def test_switching_pay_type(ctx):
    c, actor, shop_id = ctx
    emp = c.employee_service.create(actor, {"name": "Sam", "payType": "Hourly", "shopId": shop_id})
    updated = c.employee_service.update(actor, emp.employee_id, {"payType": "Fixed Daily", "fixedDailyRate": 55})
    assert updated.pay_type == PayType.FIXED_DAILY
    assert updated.compensation().effective_daily_rate == 55.0


def test_foreign_shop_admin_cannot_touch_employee(store, ctx):
    c, actor, shop_id = ctx
    emp = c.employee_service.create(actor, {"name": "Sam", "payType": "Hourly", "shopId": shop_id})
    stranger = Actor(store.add_admin("x@example.com", role=Role.SHOP_ADMIN), Role.SHOP_ADMIN)

    with pytest.raises(AuthorizationError):
        c.employee_service.get(stranger, emp.employee_id)
    with pytest.raises(AuthorizationError):
        c.employee_service.delete(stranger, emp.employee_id)


def test_delete(ctx):
    c, actor, shop_id = ctx
    emp = c.employee_service.create(actor, {"name": "Sam", "payType": "Hourly", "shopId": shop_id})
    c.employee_service.delete(actor, emp.employee_id)
    with pytest.raises(NotFoundError):
        c.employee_service.get(actor, emp.employee_id)
