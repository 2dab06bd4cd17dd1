"""
Seed Permission Catalog Script

Populates the permissions and default roles tables from the static catalog,
and optionally a bootstrap super admin. Safe to run repeatedly: existing
permissions and roles are left as administrators edited them.

    python -m mall_access.scripts.seed_catalog
"""

import asyncio
import logging
import sys
from typing import Dict, Optional

from sqlmodel import SQLModel

from config import ApplicationConfig
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.passwords import hash_password, password_policy_violation
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.users.validation import email_violation, normalize_email
from mall_access.domain.entities import (
    SYSTEM_ACTOR,
    ActivityAction,
    ActivityModule,
    AdminPermission,
    AdminRole,
    AdminUser,
)
from mall_access.domain.permission_catalog import (
    DEFAULT_ROLES,
    PERMISSION_CATALOG,
    permission_display_name,
    permission_name,
)

logger = logging.getLogger(__name__)

SUPER_ADMIN_ROLE = "super_admin"


async def seed_permissions(uow: UnitOfWork) -> int:
    """Insert catalog permissions that have no active row yet"""
    created_count = 0
    for module, actions in PERMISSION_CATALOG.items():
        for action in actions:
            if await uow.permissions.get_active_by_pair(module, action) is not None:
                continue
            await uow.permissions.create(
                AdminPermission(
                    name=permission_name(module, action),
                    module=module,
                    action=action,
                    display_name=permission_display_name(module, action),
                )
            )
            created_count += 1
            logger.debug(f"Created permission: {permission_name(module, action)}")

    logger.info(f"Permissions seeded: {created_count} created")
    return created_count


async def seed_roles(uow: UnitOfWork) -> int:
    """Create missing default roles with their grants"""
    permissions = await uow.permissions.list_all()
    permission_ids = {p.name: p.id for p in permissions}
    created_count = 0

    for name, definition in DEFAULT_ROLES.items():
        if await uow.roles.get_by_name(name) is not None:
            continue

        role = await uow.roles.create(
            AdminRole(
                name=name,
                display_name=definition["display_name"],
                description=definition["description"],
                color=definition["color"],
                sort_order=await uow.roles.get_max_sort_order() + 1,
            )
        )
        grants = [permission_ids[p] for p in definition["permissions"] if p in permission_ids]
        await uow.role_permissions.replace_for_role(role.id, grants)
        created_count += 1
        logger.debug(f"Created role {name} with {len(grants)} permissions")

    logger.info(f"Roles seeded: {created_count} created")
    return created_count


async def seed_bootstrap_admin(
    uow: UnitOfWork, email: str, password: str
) -> Optional[AdminUser]:
    """Create the first super admin if no user holds the email yet; None when skipped"""
    email = normalize_email(email)
    if email_violation(email):
        raise ValueError(f"Bootstrap admin email rejected: {email}")

    if await uow.users.get_by_email(email) is not None:
        return None

    violation = password_policy_violation(password)
    if violation:
        raise ValueError(f"Bootstrap admin password rejected: {violation}")

    role = await uow.roles.get_by_name(SUPER_ADMIN_ROLE)
    if role is None:
        raise ValueError("Bootstrap admin needs the super_admin role to be seeded")

    user = await uow.users.create(
        AdminUser(email=email, full_name="Administrator", password_hash=hash_password(password))
    )
    await uow.user_roles.replace_for_user(user.id, [role.id], None)
    logger.info(f"Bootstrap admin created: {email}")
    return user


async def seed_catalog(
    uow: UnitOfWork,
    admin_email: Optional[str] = None,
    admin_password: Optional[str] = None,
) -> Dict[str, int]:
    """Seed permissions, default roles and the optional bootstrap admin in one transaction"""
    async with uow:
        permission_count = await seed_permissions(uow)
        role_count = await seed_roles(uow)
        admin = None
        if admin_email and admin_password:
            admin = await seed_bootstrap_admin(uow, admin_email, admin_password)
        await uow.commit()

        if admin is not None:
            await ActivityLogger(uow).record(
                SYSTEM_ACTOR,
                ActivityAction.create.value,
                ActivityModule.users.value,
                resource_type="admin_user",
                resource_id=admin.id,
                resource_name=admin.email,
                metadata={"bootstrap": True},
            )

    return {
        "permissions": permission_count,
        "roles": role_count,
        "admins": int(admin is not None),
    }


async def main():
    from mall_access.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
    from mall_access.depends import AsyncSessionLocal, engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        counts = await seed_catalog(
            SqlAlchemyUnitOfWork(session),
            ApplicationConfig.BOOTSTRAP_ADMIN_EMAIL,
            ApplicationConfig.BOOTSTRAP_ADMIN_PASSWORD,
        )

    await engine.dispose()
    logger.info(f"Seeding completed: {counts}")


if __name__ == "__main__":
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL.upper())
    try:
        asyncio.run(main())
    except Exception:
        logger.exception("Error during seeding")
        sys.exit(1)
