from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .access import AccessPolicy
from .attendance.reconciler import AttendanceReconciler
from .common.datetime_utils import Clock
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payouts.mysql_payout_repository import MySQLPayoutRepository
from .payouts.repository import PayoutRepository
from .payouts.service import PayoutService
from .payroll.service import PayrollService
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService
from .rotas.mysql_rota_repository import MySQLRotaRepository
from .rotas.repository import RotaRepository
from .rotas.service import RotaService
from .shops.mysql_shop_repository import MySQLShopRepository
from .shops.repository import ShopRepository
from .shops.service import ShopService
from .users.mysql_admin_repository import MySQLAdminRepository
from .users.repository import AdminRepository
from .users.service import AdminAccountService, AuthService


@dataclass(frozen=True)
class Container:
    admins_repo: AdminRepository
    shops_repo: ShopRepository
    employees_repo: EmployeeRepository
    punches_repo: PunchRepository
    rotas_repo: RotaRepository
    payouts_repo: PayoutRepository

    access_policy: AccessPolicy
    auth_service: AuthService
    admin_account_service: AdminAccountService
    shop_service: ShopService
    employee_service: EmployeeService
    punch_service: PunchService
    rota_service: RotaService
    payout_service: PayoutService
    reconciler: AttendanceReconciler
    payroll_service: PayrollService


def wire_container(
    *,
    admins_repo: AdminRepository,
    shops_repo: ShopRepository,
    employees_repo: EmployeeRepository,
    punches_repo: PunchRepository,
    rotas_repo: RotaRepository,
    payouts_repo: PayoutRepository,
    clock: Optional[Clock] = None,
) -> Container:
    """Build every service on top of the given repositories (any storage)."""

    access_policy = AccessPolicy(shops_repo, employees_repo)
    reconciler = AttendanceReconciler(punches_repo, rotas_repo, clock=clock)

    return Container(
        admins_repo=admins_repo,
        shops_repo=shops_repo,
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        rotas_repo=rotas_repo,
        payouts_repo=payouts_repo,
        access_policy=access_policy,
        auth_service=AuthService(admins_repo),
        admin_account_service=AdminAccountService(admins_repo),
        shop_service=ShopService(shops_repo, admins_repo, access_policy),
        employee_service=EmployeeService(employees_repo, access_policy),
        punch_service=PunchService(punches_repo, employees_repo, access_policy),
        rota_service=RotaService(rotas_repo, employees_repo, access_policy),
        payout_service=PayoutService(payouts_repo, access_policy),
        reconciler=reconciler,
        payroll_service=PayrollService(employees_repo, reconciler),
    )


def build_container(*, db_config: dict, clock: Optional[Clock] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        admins_repo=MySQLAdminRepository(conn),
        shops_repo=MySQLShopRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        punches_repo=MySQLPunchRepository(conn),
        rotas_repo=MySQLRotaRepository(conn),
        payouts_repo=MySQLPayoutRepository(conn),
        clock=clock,
    )
