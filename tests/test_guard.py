import pytest

from app.domains.access import (
    AuthState, GuardAction, RouteRequirement, evaluate_guard, has_role,
    match_route, decide_navigation, navigation_items,
    LOGIN_PATH, DEFAULT_AUTHENTICATED_PATH, UNAUTHORIZED_PATH
)
from app.domains.identity.entities import User, UserRole

VIEWER = User(id="3", name="Viewer", email="viewer@example.com", role="viewer")
ADMIN = User(id="1", name="Admin", email="admin@example.com", role="admin")


def _signed_in(user):
    return AuthState(loading=False, is_authenticated=True, user=user)


SIGNED_OUT = AuthState(loading=False, is_authenticated=False, user=None)


class TestDecisionTable:
    def test_loading_waits(self):
        decision = evaluate_guard(AuthState(loading=True), RouteRequirement(require_auth=True))
        assert decision.action == GuardAction.WAIT
        assert decision.redirect_to is None

    def test_loading_waits_even_when_authenticated(self):
        state = AuthState(loading=True, is_authenticated=True, user=ADMIN)
        assert evaluate_guard(state, RouteRequirement(require_auth=False)).action == GuardAction.WAIT

    def test_unauthenticated_redirects_to_login_with_origin(self):
        decision = evaluate_guard(SIGNED_OUT, RouteRequirement(require_auth=True), location="/qa/2")
        assert decision.action == GuardAction.REDIRECT
        assert decision.redirect_to == LOGIN_PATH
        assert decision.state == {"from": "/qa/2"}

    def test_public_only_redirects_authenticated_to_dashboard(self):
        decision = evaluate_guard(_signed_in(VIEWER), RouteRequirement(require_auth=False))
        assert decision.redirect_to == DEFAULT_AUTHENTICATED_PATH

    def test_public_only_allows_anonymous(self):
        assert evaluate_guard(SIGNED_OUT, RouteRequirement(require_auth=False)).allowed

    def test_role_outside_allow_list_redirects_to_unauthorized(self):
        requirement = RouteRequirement(require_auth=True, allowed_roles=("admin",))
        decision = evaluate_guard(_signed_in(VIEWER), requirement)
        assert decision.action == GuardAction.REDIRECT
        assert decision.redirect_to == UNAUTHORIZED_PATH

    def test_role_in_allow_list_allowed(self):
        requirement = RouteRequirement(require_auth=True, allowed_roles=(UserRole.ADMIN, UserRole.EDITOR))
        assert evaluate_guard(_signed_in(ADMIN), requirement).allowed

    def test_empty_allow_list_means_any_role(self):
        requirement = RouteRequirement(require_auth=True, allowed_roles=())
        assert evaluate_guard(_signed_in(VIEWER), requirement).allowed

    def test_authenticated_allowed(self):
        assert evaluate_guard(_signed_in(VIEWER)).allowed

    def test_same_inputs_same_decision(self):
        requirement = RouteRequirement(require_auth=True, allowed_roles=("admin",))
        states = [SIGNED_OUT, _signed_in(VIEWER), AuthState(loading=True), _signed_in(ADMIN)]
        first = [evaluate_guard(s, requirement, "/users") for s in states]
        second = [evaluate_guard(s, requirement, "/users") for s in reversed(states)]
        assert first == list(reversed(second))


class TestHasRole:
    def test_single_role(self):
        assert has_role(ADMIN, "admin")
        assert not has_role(VIEWER, "admin")

    def test_role_list(self):
        assert has_role(VIEWER, ["admin", "viewer"])
        assert not has_role(VIEWER, [UserRole.ADMIN, UserRole.EDITOR])

    def test_no_user(self):
        assert not has_role(None, "viewer")

    def test_entity_predicate_agrees(self):
        assert VIEWER.has_role(["editor", "viewer"])
        assert not VIEWER.has_role("editor")


class TestRoutes:
    @pytest.mark.parametrize("path,expected", [
        ("/", "/"),
        ("/qa/42", "/qa/:id"),
        ("/documents/new", "/documents/new"),
        ("/users?page=2", "/users"),
        ("/nowhere", None),
    ])
    def test_match_route(self, path, expected):
        route = match_route(path)
        assert (route.path if route else None) == expected

    def test_admin_route_for_viewer(self):
        decision = decide_navigation(_signed_in(VIEWER), "/users")
        assert decision.redirect_to == UNAUTHORIZED_PATH

    def test_protected_route_signed_out(self):
        decision = decide_navigation(SIGNED_OUT, "/documents")
        assert decision.redirect_to == LOGIN_PATH
        assert decision.state == {"from": "/documents"}

    def test_login_page_when_signed_in(self):
        assert decide_navigation(_signed_in(ADMIN), "/login").redirect_to == DEFAULT_AUTHENTICATED_PATH

    def test_unguarded_pages_always_allowed(self):
        assert decide_navigation(AuthState(loading=True), "/unauthorized").allowed
        assert decide_navigation(SIGNED_OUT, "/nowhere").allowed

    def test_navigation_items(self):
        assert [i["href"] for i in navigation_items(VIEWER)] == ["/dashboard", "/documents", "/qa"]
        assert navigation_items(ADMIN)[-1] == {"text": "Users", "href": "/users"}
        assert len(navigation_items(None)) == 3
