# =============================================================================
# core/navigation.py - Role-Based Navigation
# =============================================================================
# The console sidebar is a static table of (label, route, icon, roles).
# Visibility is a plain membership test of the session user's role against
# the item's roles; the same test gates the pages themselves.
# =============================================================================

from typing import Iterable, NamedTuple

from core.models.user import Role, UserView


class NavItem(NamedTuple):
    label: str
    route: str
    icon: str
    roles: frozenset[Role]


_ALL_ROLES = frozenset(Role)


NAVIGATION: tuple[NavItem, ...] = (
    NavItem("Dashboard", "/dashboard", "LayoutDashboard", _ALL_ROLES),
    NavItem("Users", "/users", "Users", frozenset({Role.SUPER_ADMIN})),
    NavItem("Events", "/events", "Calendar", frozenset({
        Role.SUPER_ADMIN, Role.ADMIN, Role.SUPPORT_TECH, Role.SOCIETY,
    })),
    NavItem("Venues", "/venues", "Building2", frozenset({
        Role.SUPER_ADMIN, Role.ADMIN, Role.SALES_MARKETING,
    })),
    NavItem("Vendors", "/vendors", "Truck", frozenset({
        Role.SUPER_ADMIN, Role.ADMIN, Role.LOGISTICS,
    })),
    NavItem("Exhibitors", "/exhibitors", "UserCheck", frozenset({
        Role.SUPER_ADMIN, Role.ADMIN, Role.SALES_MARKETING,
    })),
    NavItem("Societies", "/societies", "Home", frozenset({Role.SUPER_ADMIN, Role.ADMIN})),
    NavItem("Calendar", "/calendar", "Calendar", frozenset({
        Role.SUPER_ADMIN, Role.ADMIN, Role.SUPPORT_TECH, Role.SOCIETY,
    })),
    NavItem("Plans & Billing", "/billing", "CreditCard", frozenset({
        Role.SUPER_ADMIN, Role.ADMIN, Role.ACCOUNTING,
    })),
    NavItem("Ads & Sponsors", "/ads-sponsors", "Megaphone", frozenset({
        Role.SUPER_ADMIN, Role.ADMIN, Role.SALES_MARKETING,
    })),
    NavItem("Reports", "/reports", "BarChart3", frozenset({
        Role.SUPER_ADMIN, Role.ADMIN, Role.ACCOUNTING,
    })),
    NavItem("Settings", "/settings", "Settings", frozenset({Role.SUPER_ADMIN, Role.ADMIN})),
)


def has_role(user: UserView | None, roles: Iterable[Role | str]) -> bool:
    """
    Whether the session user holds one of the given roles.

    Returns False when nobody is signed in. Roles may be given as Role members
    or their string values.
    """
    if user is None:
        return False
    return user.role in {Role(role) for role in roles}


def visible_navigation(user: UserView | None) -> list[NavItem]:
    """Sidebar items the user may see, in table order."""
    return [item for item in NAVIGATION if has_role(user, item.roles)]


def roles_for(route: str) -> frozenset[Role]:
    """Roles allowed on a top-level route (empty when the route is unknown)."""
    for item in NAVIGATION:
        if item.route == route:
            return item.roles
    return frozenset()
