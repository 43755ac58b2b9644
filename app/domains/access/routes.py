from dataclasses import dataclass
from typing import Dict, List, Optional, TYPE_CHECKING

from app.domains.access.guard import AuthState, GuardDecision, RouteRequirement, evaluate_guard, has_role

if TYPE_CHECKING:
    from app.domains.identity.entities import User


@dataclass(frozen=True)
class Route:
    path: str
    requirement: Optional[RouteRequirement]

    def matches(self, path: str) -> Optional[Dict[str, str]]:
        """Сопоставление пути с шаблоном, возвращает параметры или None"""
        pattern = [p for p in self.path.split("/") if p]
        parts = [p for p in path.split("?")[0].split("/") if p]
        if len(pattern) != len(parts):
            return None

        params = {}
        for expected, actual in zip(pattern, parts):
            if expected.startswith(":"):
                params[expected[1:]] = actual
            elif expected != actual:
                return None
        return params


PUBLIC_ONLY = RouteRequirement(require_auth=False)
AUTHENTICATED = RouteRequirement(require_auth=True)
ADMIN_ONLY = RouteRequirement(require_auth=True, allowed_roles=("admin",))

ROUTES: List[Route] = [
    Route("/", PUBLIC_ONLY),
    Route("/login", PUBLIC_ONLY),
    Route("/register", PUBLIC_ONLY),
    Route("/dashboard", AUTHENTICATED),
    Route("/documents", AUTHENTICATED),
    Route("/documents/new", AUTHENTICATED),
    Route("/qa", AUTHENTICATED),
    Route("/qa/:id", AUTHENTICATED),
    Route("/users", ADMIN_ONLY),
    # Без проверки
    Route("/unauthorized", None),
]


def match_route(path: str) -> Optional[Route]:
    for route in ROUTES:
        if route.matches(path) is not None:
            return route
    return None


def decide_navigation(auth: AuthState, path: str) -> GuardDecision:
    """Решение для перехода на путь по таблице маршрутов

    Неизвестные и неохраняемые пути пропускаются, отрисовка страницы
    «не найдено» остаётся за вызывающей стороной.
    """
    route = match_route(path)
    if route is None or route.requirement is None:
        return evaluate_guard(AuthState(), RouteRequirement(require_auth=False))
    return evaluate_guard(auth, route.requirement, location=path)


def navigation_items(user: Optional["User"]) -> List[Dict[str, str]]:
    """Пункты бокового меню для пользователя"""
    items = [
        {"text": "Dashboard", "href": "/dashboard"},
        {"text": "Documents", "href": "/documents"},
        {"text": "Q&A", "href": "/qa"},
    ]
    if has_role(user, "admin"):
        items.append({"text": "Users", "href": "/users"})
    return items
