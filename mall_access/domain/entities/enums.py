"""
Access Service Domain Enums

Known vocabulary for activity entries and user listing filters.
Activity ``action`` and ``module`` columns stay open strings: these enums
list the values the service itself writes, new verbs need no migration.
"""

from enum import Enum


class ActivityAction(str, Enum):
    """Verbs recorded in the activity log"""

    create = "create"
    update = "update"
    delete = "delete"
    publish = "publish"
    unpublish = "unpublish"
    login = "login"
    logout = "logout"
    read = "read"
    bulk_read = "bulk_read"
    bulk_delete = "bulk_delete"
    export = "export"
    reorder = "reorder"
    toggle = "toggle"


class ActivityModule(str, Enum):
    """Functional areas recorded in the activity log"""

    auth = "auth"
    events = "events"
    tenants = "tenants"
    blog = "blog"
    promotions = "promotions"
    contacts = "contacts"
    vip = "vip"
    homepage = "homepage"
    settings = "settings"
    users = "users"


class UserStatusFilter(str, Enum):
    """Status filter accepted by the user listing"""

    all = "all"
    active = "active"
    inactive = "inactive"


SYSTEM_ACTOR = "system"
