"""Create the first global Admin account.

Reads ADMIN_DEFAULT_EMAIL / ADMIN_DEFAULT_PASSWORD (and optionally
ADMIN_DEFAULT_NAME) from the environment or a .env file.
"""
from __future__ import annotations

import importlib
import logging
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.shop_payroll.shop_payroll.core.constants import MIN_PASSWORD_LENGTH
from src.shop_payroll.shop_payroll.database.bootstrap import ensure_admin

logger = logging.getLogger("seed_admin")


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    email = os.getenv("ADMIN_DEFAULT_EMAIL", "").strip()
    password = os.getenv("ADMIN_DEFAULT_PASSWORD", "")
    name = os.getenv("ADMIN_DEFAULT_NAME", "Administrator")

    if not email or len(password) < MIN_PASSWORD_LENGTH:
        logger.error(
            "ADMIN_DEFAULT_EMAIL and ADMIN_DEFAULT_PASSWORD (min %d chars) must be set",
            MIN_PASSWORD_LENGTH,
        )
        return 1

    ensure_admin(dict(settings.DB_CONFIG), email=email, password=password, name=name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
