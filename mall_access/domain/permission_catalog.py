"""
Permission Catalog

Static (module, action) pairs the dashboard recognizes as checkable
capabilities, plus the default roles seeded on a fresh database.
Used by the seed script and by use cases naming the permission they need.
"""

from typing import Dict, FrozenSet, List, Optional, Tuple

# Modules
DASHBOARD = "dashboard"
ANALYTICS = "analytics"
EVENTS = "events"
POSTS = "posts"
PROMOTIONS = "promotions"
TENANTS = "tenants"
TENANT_CATEGORIES = "tenant_categories"
WHATS_ON = "whats_on"
FEATURED_RESTAURANTS = "featured_restaurants"
CONTACTS = "contacts"
ADMIN_USERS = "admin_users"
ADMIN_ROLES = "admin_roles"
SEO_SETTINGS = "seo_settings"
ACTIVITY_LOGS = "activity_logs"

# Actions
VIEW = "view"
CREATE = "create"
EDIT = "edit"
DELETE = "delete"
PUBLISH = "publish"
MANAGE = "manage"
MANAGE_ROLES = "manage_roles"
RESPOND = "respond"
FEATURE = "feature"

CRUD = (VIEW, CREATE, EDIT, DELETE)

PERMISSION_CATALOG: Dict[str, Tuple[str, ...]] = {
    DASHBOARD: (VIEW,),
    ANALYTICS: (VIEW,),
    EVENTS: CRUD + (PUBLISH, FEATURE),
    POSTS: CRUD + (PUBLISH, FEATURE, MANAGE),
    PROMOTIONS: CRUD + (PUBLISH,),
    TENANTS: CRUD + (FEATURE,),
    TENANT_CATEGORIES: CRUD,
    WHATS_ON: (VIEW, MANAGE),
    FEATURED_RESTAURANTS: (VIEW, MANAGE),
    CONTACTS: (VIEW, RESPOND, DELETE),
    ADMIN_USERS: CRUD + (MANAGE_ROLES,),
    ADMIN_ROLES: CRUD + (MANAGE,),
    SEO_SETTINGS: (VIEW, EDIT),
    ACTIVITY_LOGS: (VIEW,),
}

MODULE_NAMES: Dict[str, str] = {
    DASHBOARD: "Dashboard",
    ANALYTICS: "Analytics",
    EVENTS: "Events",
    POSTS: "Blog Posts",
    PROMOTIONS: "Promotions",
    TENANTS: "Tenants",
    TENANT_CATEGORIES: "Tenant Categories",
    WHATS_ON: "What's On",
    FEATURED_RESTAURANTS: "Featured Restaurants",
    CONTACTS: "Contacts",
    ADMIN_USERS: "Admin Users",
    ADMIN_ROLES: "Admin Roles",
    SEO_SETTINGS: "SEO Settings",
    ACTIVITY_LOGS: "Activity Logs",
}

ACTION_NAMES: Dict[str, str] = {
    VIEW: "View",
    CREATE: "Create",
    EDIT: "Edit",
    DELETE: "Delete",
    PUBLISH: "Publish",
    MANAGE: "Manage",
    MANAGE_ROLES: "Manage Roles",
    RESPOND: "Respond",
    FEATURE: "Feature",
}


def catalog_pairs() -> FrozenSet[Tuple[str, str]]:
    return frozenset(
        (module, action)
        for module, actions in PERMISSION_CATALOG.items()
        for action in actions
    )


def is_known(module: str, action: str) -> bool:
    return action in PERMISSION_CATALOG.get(module, ())


def permission_name(module: str, action: str) -> str:
    return f"{module}.{action}"


def permission_display_name(module: str, action: str) -> str:
    module_name = MODULE_NAMES.get(module, module.replace("_", " ").title())
    action_name = ACTION_NAMES.get(action, action.replace("_", " ").title())
    return f"{action_name} {module_name}"


def _pairs_for(modules: List[str], actions: Optional[Tuple[str, ...]] = None) -> List[str]:
    names = []
    for module in modules:
        for action in PERMISSION_CATALOG[module]:
            if actions is None or action in actions:
                names.append(permission_name(module, action))
    return names


CONTENT_MODULES = [EVENTS, POSTS, PROMOTIONS, WHATS_ON, FEATURED_RESTAURANTS]
OPERATIONS_MODULES = [CONTACTS, SEO_SETTINGS, ANALYTICS]
LEASING_MODULES = [TENANTS, TENANT_CATEGORIES]

# Role name -> definition; "permissions" holds "module.action" names
DEFAULT_ROLES: Dict[str, dict] = {
    "super_admin": {
        "display_name": "Super Admin",
        "description": "Full access to every module",
        "color": "#dc2626",
        "permissions": sorted(
            permission_name(module, action) for module, action in catalog_pairs()
        ),
    },
    "content_manager": {
        "display_name": "Content Manager",
        "description": "Manages events, blog posts, promotions and homepage content",
        "color": "#2563eb",
        "permissions": sorted(
            _pairs_for([DASHBOARD]) + _pairs_for(CONTENT_MODULES)
        ),
    },
    "operations_manager": {
        "display_name": "Operations Manager",
        "description": "Handles contacts, SEO settings and analytics",
        "color": "#059669",
        "permissions": sorted(
            _pairs_for([DASHBOARD, ACTIVITY_LOGS]) + _pairs_for(OPERATIONS_MODULES)
        ),
    },
    "leasing_manager": {
        "display_name": "Leasing Manager",
        "description": "Manages tenants and tenant categories",
        "color": "#d97706",
        "permissions": sorted(_pairs_for([DASHBOARD]) + _pairs_for(LEASING_MODULES)),
    },
    "viewer": {
        "display_name": "Viewer",
        "description": "Read-only access",
        "color": "#6b7280",
        "permissions": sorted(
            _pairs_for(list(PERMISSION_CATALOG), actions=(VIEW,))
        ),
    },
}
