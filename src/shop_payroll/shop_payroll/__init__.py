"""Shop Payroll package.

Back office for shop staffing: employees, rota, time-clock punches, payouts and
the attendance reconciliation / payroll computation engine. Organized by
feature modules with a thin Flask controller layer over service/repository
layers.
"""
