"""Решение о допуске к маршруту по состоянию сессии и требованиям маршрута.

``evaluate_guard`` — чистая функция: одинаковые входные данные всегда дают
одинаковое решение, скрытого состояния нет.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from app.domains.identity.entities import User

LOGIN_PATH = "/login"
DEFAULT_AUTHENTICATED_PATH = "/dashboard"
UNAUTHORIZED_PATH = "/unauthorized"


class GuardAction(str, Enum):
    WAIT = "wait"
    REDIRECT = "redirect"
    ALLOW = "allow"


@dataclass(frozen=True)
class AuthState:
    """Снимок состояния сессии для проверки маршрута"""
    loading: bool = False
    is_authenticated: bool = False
    user: Optional["User"] = None


@dataclass(frozen=True)
class RouteRequirement:
    """Требования маршрута к сессии"""
    require_auth: bool = True
    allowed_roles: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if self.allowed_roles is not None:
            roles = tuple(getattr(r, "value", r) for r in self.allowed_roles)
            object.__setattr__(self, "allowed_roles", roles)


@dataclass(frozen=True)
class GuardDecision:
    action: GuardAction
    redirect_to: Optional[str] = None
    replace: bool = False
    state: Dict[str, Any] = field(default_factory=dict)

    @property
    def allowed(self) -> bool:
        return self.action == GuardAction.ALLOW


def evaluate_guard(
    auth: AuthState,
    requirement: RouteRequirement = RouteRequirement(),
    location: Optional[str] = None
) -> GuardDecision:
    """Вычисление решения для попытки навигации"""
    if auth.loading:
        return GuardDecision(action=GuardAction.WAIT)

    if requirement.require_auth and not auth.is_authenticated:
        return GuardDecision(
            action=GuardAction.REDIRECT,
            redirect_to=LOGIN_PATH,
            replace=True,
            state={"from": location}
        )

    if not requirement.require_auth and auth.is_authenticated:
        return GuardDecision(
            action=GuardAction.REDIRECT,
            redirect_to=DEFAULT_AUTHENTICATED_PATH,
            replace=True
        )

    if (
        requirement.require_auth
        and requirement.allowed_roles
        and auth.user is not None
        and not has_role(auth.user, requirement.allowed_roles)
    ):
        return GuardDecision(
            action=GuardAction.REDIRECT,
            redirect_to=UNAUTHORIZED_PATH,
            replace=True
        )

    return GuardDecision(action=GuardAction.ALLOW)


def has_role(user: Optional["User"], role: Union[str, Iterable[str]]) -> bool:
    """Проверка роли; без пользователя всегда False"""
    if user is None:
        return False
    user_role = getattr(user.role, "value", user.role)
    if isinstance(role, str):
        return user_role == getattr(role, "value", role)
    return user_role in {getattr(r, "value", r) for r in role}
