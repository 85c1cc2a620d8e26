from __future__ import annotations

import time as systime
from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.shop_payroll.shop_payroll.container import wire_container
from src.shop_payroll.shop_payroll.core.enums import PayType, Role
from src.shop_payroll.shop_payroll.employees.model import Employee
from src.shop_payroll.shop_payroll.payouts.model import PaymentPayout
from src.shop_payroll.shop_payroll.punches.model import TimePunch
from src.shop_payroll.shop_payroll.rotas.model import ScheduledShift
from src.shop_payroll.shop_payroll.shops.model import Shop
from src.shop_payroll.shop_payroll.users.model import AdminUser

FIXED_NOW = datetime(2024, 3, 15, 10, 0, 0)


class InMemoryAdmins:
    def __init__(self):
        self._by_id: dict[int, AdminUser] = {}

    def get_by_id(self, admin_id: int) -> Optional[AdminUser]:
        return self._by_id.get(int(admin_id))

    def get_by_email(self, email: str) -> Optional[AdminUser]:
        return next((a for a in self._by_id.values() if a.email == email.strip().lower()), None)

    def create(self, *, name, email, password_hash, role) -> int:
        admin_id = len(self._by_id) + 1
        self._by_id[admin_id] = AdminUser(
            admin_id=admin_id, name=name, email=email.lower(), password_hash=password_hash, role=role
        )
        return admin_id


class InMemoryShops:
    def __init__(self):
        self._by_id: dict[int, Shop] = {}

    def get_by_id(self, shop_id: int) -> Optional[Shop]:
        return self._by_id.get(int(shop_id))

    def list_by_admin(self, admin_id: int):
        return [s for s in self._by_id.values() if s.admin_id == int(admin_id)]

    def list_all(self):
        return list(self._by_id.values())

    def create(self, shop: Shop) -> int:
        shop_id = len(self._by_id) + 1
        self._by_id[shop_id] = replace(shop, shop_id=shop_id)
        return shop_id


class InMemoryEmployees:
    def __init__(self):
        self._by_id: dict[int, Employee] = {}
        self._next_id = 1

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def list_all(self):
        return list(self._by_id.values())

    def list_for_shops(self, shop_ids):
        ids = {int(s) for s in shop_ids}
        return [e for e in self._by_id.values() if e.shop_id in ids]

    def create(self, employee: Employee) -> int:
        employee_id = self._next_id
        self._next_id += 1
        self._by_id[employee_id] = replace(employee, employee_id=employee_id)
        return employee_id

    def update(self, employee: Employee) -> bool:
        if employee.employee_id not in self._by_id:
            return False
        self._by_id[employee.employee_id] = employee
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._by_id.pop(int(employee_id), None) is not None


class InMemoryPunches:
    def __init__(self):
        self._by_id: dict[int, TimePunch] = {}

    def list_for_employee(self, *, employee_id, start, end):
        return [p for p in self._by_id.values() if p.employee_id == employee_id and start <= p.punch_in <= end]

    def get_by_id(self, punch_id: int) -> Optional[TimePunch]:
        return self._by_id.get(int(punch_id))

    def create_punch_in(self, *, shop_id, employee_id, punch_in) -> int:
        punch_id = len(self._by_id) + 1
        self._by_id[punch_id] = TimePunch(punch_id=punch_id, shop_id=shop_id, employee_id=employee_id, punch_in=punch_in)
        return punch_id

    def set_punch_out(self, *, punch_id, punch_out) -> bool:
        p = self._by_id.get(int(punch_id))
        if not p:
            return False
        self._by_id[p.punch_id] = replace(p, punch_out=punch_out)
        return True

    def list_filtered(self, *, shop_ids=None, employee_id=None, start=None, end=None):
        items = list(self._by_id.values())
        if shop_ids is not None:
            items = [p for p in items if p.shop_id in set(shop_ids)]
        if employee_id is not None:
            items = [p for p in items if p.employee_id == employee_id]
        if start is not None:
            items = [p for p in items if p.punch_in >= start]
        if end is not None:
            items = [p for p in items if p.punch_in <= end]
        return items


class InMemoryRotas:
    def __init__(self):
        self._by_id: dict[int, ScheduledShift] = {}
        self._next_id = 1

    def list_for_employee(self, *, employee_id, start, end):
        return [
            r
            for r in self._by_id.values()
            if r.employee_id == employee_id and start <= datetime.combine(r.shift_date, time.min) <= end
        ]

    def get_by_id(self, rota_id: int) -> Optional[ScheduledShift]:
        return self._by_id.get(int(rota_id))

    def create(self, *, shop_id, employee_id, shift_date, scheduled_start=None, scheduled_end=None, note=None) -> int:
        rota_id = self._next_id
        self._next_id += 1
        self._by_id[rota_id] = ScheduledShift(
            rota_id=rota_id,
            shop_id=shop_id,
            employee_id=employee_id,
            shift_date=shift_date,
            scheduled_start=scheduled_start,
            scheduled_end=scheduled_end,
            note=note,
        )
        return rota_id

    def update(self, shift: ScheduledShift) -> bool:
        if shift.rota_id not in self._by_id:
            return False
        self._by_id[shift.rota_id] = shift
        return True

    def delete(self, *, rota_id) -> bool:
        return self._by_id.pop(int(rota_id), None) is not None

    def list_filtered(self, *, shop_ids=None, employee_id=None, start=None, end=None):
        items = list(self._by_id.values())
        if shop_ids is not None:
            items = [r for r in items if r.shop_id in set(shop_ids)]
        if employee_id is not None:
            items = [r for r in items if r.employee_id == employee_id]
        if start is not None:
            items = [r for r in items if r.shift_date >= start]
        if end is not None:
            items = [r for r in items if r.shift_date <= end]
        return items


class InMemoryPayouts:
    def __init__(self):
        self._by_id: dict[int, PaymentPayout] = {}

    def create(self, *, employee_id, payout_date, amount_paid, period_start, period_end) -> int:
        payout_id = len(self._by_id) + 1
        self._by_id[payout_id] = PaymentPayout(
            payout_id=payout_id,
            employee_id=employee_id,
            payout_date=payout_date,
            amount_paid=amount_paid,
            period_start=period_start,
            period_end=period_end,
        )
        return payout_id

    def list_filtered(self, *, employee_ids=None, start=None, end=None):
        items = list(self._by_id.values())
        if employee_ids is not None:
            items = [p for p in items if p.employee_id in set(employee_ids)]
        if start is not None:
            items = [p for p in items if p.payout_date >= start]
        if end is not None:
            items = [p for p in items if p.payout_date <= end]
        return items


class Store:
    """All in-memory repositories plus shortcuts to populate them."""

    def __init__(self):
        self.admins = InMemoryAdmins()
        self.shops = InMemoryShops()
        self.employees = InMemoryEmployees()
        self.punches = InMemoryPunches()
        self.rotas = InMemoryRotas()
        self.payouts = InMemoryPayouts()

    def add_admin(self, email: str, password: str = "secret123", role: Role = Role.ADMIN) -> int:
        return self.admins.create(
            name=email.split("@")[0], email=email, password_hash=generate_password_hash(password), role=role
        )

    def add_shop(self, admin_id: int, name: str = "Corner Shop") -> int:
        return self.shops.create(Shop(shop_id=0, name=name, admin_id=admin_id))

    def add_employee(self, shop_id: int, pay_type: PayType = PayType.HOURLY, name: str = "Sam", **rates) -> int:
        return self.employees.create(Employee(employee_id=0, shop_id=shop_id, name=name, pay_type=pay_type, **rates))

    def add_punch(self, employee_id: int, punch_in: datetime, punch_out: Optional[datetime] = None) -> int:
        emp = self.employees.get_by_id(employee_id)
        punch_id = self.punches.create_punch_in(shop_id=emp.shop_id, employee_id=employee_id, punch_in=punch_in)
        if punch_out is not None:
            self.punches.set_punch_out(punch_id=punch_id, punch_out=punch_out)
        return punch_id

    def add_rota(self, employee_id: int, shift_date: date, start: Optional[str] = None, end: Optional[str] = None) -> int:
        emp = self.employees.get_by_id(employee_id)
        return self.rotas.create(
            shop_id=emp.shop_id,
            employee_id=employee_id,
            shift_date=shift_date,
            scheduled_start=start,
            scheduled_end=end,
        )

    def container(self, clock=None):
        return wire_container(
            admins_repo=self.admins,
            shops_repo=self.shops,
            employees_repo=self.employees,
            punches_repo=self.punches,
            rotas_repo=self.rotas,
            payouts_repo=self.payouts,
            clock=clock,
        )


@pytest.fixture
def fixed_now():
    return lambda: FIXED_NOW


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def tokyo_tz(monkeypatch):
    """Run with a server zone far from UTC."""
    monkeypatch.setenv("TZ", "Asia/Tokyo")
    systime.tzset()
    yield
    monkeypatch.undo()
    systime.tzset()
