from app.domains.access.guard import (
    AuthState, RouteRequirement, GuardAction, GuardDecision,
    evaluate_guard, has_role,
    LOGIN_PATH, DEFAULT_AUTHENTICATED_PATH, UNAUTHORIZED_PATH
)
from app.domains.access.routes import Route, ROUTES, match_route, decide_navigation, navigation_items

__all__ = [
    "AuthState", "RouteRequirement", "GuardAction", "GuardDecision",
    "evaluate_guard", "has_role",
    "LOGIN_PATH", "DEFAULT_AUTHENTICATED_PATH", "UNAUTHORIZED_PATH",
    "Route", "ROUTES", "match_route", "decide_navigation", "navigation_items"
]
