"""Unit tests for AuthorizationDecider.

Tests cover:
- Administrator bypass for every pair, whatever the profile
- Empty profile denies every pair
- Mask resources read the 4-bit mask, one bit per action
- Cases and tasks: view presence test + DML mask
- Unknown resource or action fails fast
- Capability matrix and require()
- Decision logging
"""

from unittest.mock import MagicMock

import pytest

from src.application.services.authorization_decider import AuthorizationDecider
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Success
from src.domain.enums import Action, Resource, UserRole
from src.domain.errors import UnknownResourceOrActionError
from tests.conftest import create_subject

ALL_PAIRS = [(resource, action) for resource in Resource for action in Action]

MASK_FIELDS = {
    Resource.CLIENTS: "client_permissions",
    Resource.SESSIONS: "session_permission",
    Resource.DOCUMENTS: "document_permissions",
    Resource.FINANCE: "finance_permission",
}


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def decider(mock_logger: MagicMock) -> AuthorizationDecider:
    """AuthorizationDecider with a mocked logger."""
    return AuthorizationDecider(logger=mock_logger)


# ============================================================================
# Administrator Bypass
# ============================================================================


@pytest.mark.unit
class TestAdminBypass:
    """Test the office administrator is allowed everything."""

    @pytest.mark.parametrize(("resource", "action"), ALL_PAIRS)
    def test_admin_allowed_every_pair_with_empty_profile(
        self, decider: AuthorizationDecider, resource: Resource, action: Action
    ):
        """Test admin with an all-zero profile is allowed every pair."""
        admin = create_subject(role=UserRole.OFFICE_ADMIN.value)

        assert decider.can(admin, resource, action) is True

    def test_admin_ignores_profile_contents(self, decider: AuthorizationDecider):
        """Test the profile is not consulted for the admin."""
        admin = create_subject(role="OfficeAdmin", finance_permission=0)

        assert decider.can(admin, Resource.FINANCE, Action.DELETE) is True

    def test_admin_role_is_case_sensitive(self, decider: AuthorizationDecider):
        """Test a differently cased role does not bypass."""
        subject = create_subject(role="officeadmin")

        assert decider.can(subject, Resource.CLIENTS, Action.VIEW) is False

    def test_admin_bypass_runs_before_pair_validation(
        self, decider: AuthorizationDecider
    ):
        """Test the admin is allowed even for a pair that does not exist."""
        admin = create_subject(role="OfficeAdmin")

        assert decider.can(admin, "invoices", "approve") is True

    def test_custom_admin_role(self, mock_logger: MagicMock):
        """Test the bypass role is configurable."""
        decider = AuthorizationDecider(logger=mock_logger, admin_role="Partner")

        assert decider.can(create_subject(role="Partner"), "finance", "view")
        assert not decider.can(create_subject(role="OfficeAdmin"), "finance", "view")


# ============================================================================
# Non-Admin Decisions
# ============================================================================


@pytest.mark.unit
class TestMaskResources:
    """Test clients, sessions, documents and finance."""

    @pytest.mark.parametrize(("resource", "action"), ALL_PAIRS)
    def test_empty_profile_denies_every_pair(
        self, decider: AuthorizationDecider, resource: Resource, action: Action
    ):
        """Test a non-admin with an all-zero profile is denied everything."""
        assert decider.can(create_subject(), resource, action) is False

    def test_view_and_create_mask(self, decider: AuthorizationDecider):
        """Test 9 grants view and create on clients, nothing else."""
        subject = create_subject(client_permissions=9)

        assert decider.can(subject, Resource.CLIENTS, Action.VIEW) is True
        assert decider.can(subject, Resource.CLIENTS, Action.CREATE) is True
        assert decider.can(subject, Resource.CLIENTS, Action.UPDATE) is False
        assert decider.can(subject, Resource.CLIENTS, Action.DELETE) is False

    @pytest.mark.parametrize("resource", list(MASK_FIELDS))
    @pytest.mark.parametrize(
        ("bit", "action"),
        [(8, Action.VIEW), (1, Action.CREATE), (2, Action.UPDATE), (4, Action.DELETE)],
    )
    def test_each_bit_grants_exactly_one_action(
        self,
        decider: AuthorizationDecider,
        resource: Resource,
        bit: int,
        action: Action,
    ):
        """Test a single bit grants its action and no other."""
        subject = create_subject(**{MASK_FIELDS[resource]: bit})

        granted = [a for a in Action if decider.can(subject, resource, a)]

        assert granted == [action]

    def test_masks_are_per_resource(self, decider: AuthorizationDecider):
        """Test one resource's mask does not leak into another."""
        subject = create_subject(finance_permission=15)

        assert decider.can(subject, Resource.FINANCE, Action.DELETE) is True
        assert decider.can(subject, Resource.DOCUMENTS, Action.VIEW) is False

    def test_oversized_mask_is_clamped(self, decider: AuthorizationDecider):
        """Test an out-of-range value behaves like 15."""
        subject = create_subject(document_permissions=99)

        assert all(
            decider.can(subject, Resource.DOCUMENTS, action) for action in Action
        )

    def test_string_arguments(self, decider: AuthorizationDecider):
        """Test plain strings are accepted for resource and action."""
        subject = create_subject(session_permission=8)

        assert decider.can(subject, "sessions", "view") is True


@pytest.mark.unit
class TestSplitResources:
    """Test cases and tasks (view field + DML mask)."""

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_any_view_level_grants_view(
        self, decider: AuthorizationDecider, level: int
    ):
        """Test view is a presence test on the view field."""
        subject = create_subject(view_case_permissions=level)

        assert decider.can(subject, Resource.CASES, Action.VIEW) is True

    def test_view_level_does_not_grant_dml(self, decider: AuthorizationDecider):
        """Test a view level alone grants no create/update/delete."""
        subject = create_subject(view_task_permissions=3)

        for action in Action.dml():
            assert decider.can(subject, Resource.TASKS, action) is False

    def test_dml_mask_without_view(self, decider: AuthorizationDecider):
        """Test the DML mask is independent of the view field."""
        subject = create_subject(view_case_permissions=0, dml_case_permissions=4)

        assert decider.can(subject, Resource.CASES, Action.VIEW) is False
        assert decider.can(subject, Resource.CASES, Action.DELETE) is True
        assert decider.can(subject, Resource.CASES, Action.CREATE) is False

    def test_cases_and_tasks_read_their_own_fields(
        self, decider: AuthorizationDecider
    ):
        """Test case fields do not affect task decisions."""
        subject = create_subject(view_case_permissions=1, dml_case_permissions=7)

        assert decider.can(subject, Resource.CASES, Action.UPDATE) is True
        assert decider.can(subject, Resource.TASKS, Action.VIEW) is False
        assert decider.can(subject, Resource.TASKS, Action.UPDATE) is False

    def test_negative_view_level_denies(self, decider: AuthorizationDecider):
        """Test a negative view value does not count as present."""
        subject = create_subject(view_task_permissions=-1)

        assert decider.can(subject, Resource.TASKS, Action.VIEW) is False


# ============================================================================
# Unknown Pairs
# ============================================================================


@pytest.mark.unit
class TestUnknownPairs:
    """Test unknown resources and actions fail fast."""

    @pytest.mark.parametrize(
        ("resource", "action"),
        [("invoices", "view"), ("cases", "approve"), ("", "")],
    )
    def test_unknown_pair_raises(
        self, decider: AuthorizationDecider, resource: str, action: str
    ):
        """Test non-admin checks on unknown pairs raise instead of deny."""
        with pytest.raises(UnknownResourceOrActionError) as exc_info:
            decider.can(create_subject(client_permissions=15), resource, action)

        assert exc_info.value.resource == resource
        assert exc_info.value.action == action
        assert exc_info.value.code is ErrorCode.UNKNOWN_RESOURCE_OR_ACTION

    def test_unknown_pair_is_a_value_error(self, decider: AuthorizationDecider):
        """Test the error can be caught as ValueError."""
        with pytest.raises(ValueError):
            decider.can(create_subject(), "invoices", "view")

    def test_unknown_pair_is_logged(
        self, decider: AuthorizationDecider, mock_logger: MagicMock
    ):
        """Test the misconfigured call site is logged at error level."""
        with pytest.raises(UnknownResourceOrActionError):
            decider.can(create_subject(), "invoices", "view")

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "unknown_permission_check"
        assert mock_logger.error.call_args.kwargs["resource"] == "invoices"


# ============================================================================
# Matrix and Require
# ============================================================================


@pytest.mark.unit
class TestCapabilities:
    """Test capabilities() and require()."""

    def test_matrix_covers_every_pair(self, decider: AuthorizationDecider):
        """Test the matrix has 6 resources x 4 actions."""
        matrix = decider.capabilities(create_subject())

        assert set(matrix) == set(Resource)
        assert all(set(actions) == set(Action) for actions in matrix.values())

    def test_matrix_matches_can(self, decider: AuthorizationDecider):
        """Test each matrix entry equals the single-pair decision."""
        subject = create_subject(
            client_permissions=9,
            finance_permission=8,
            view_case_permissions=2,
            dml_case_permissions=3,
        )

        matrix = decider.capabilities(subject)

        for resource, action in ALL_PAIRS:
            assert matrix[resource][action] == decider.can(subject, resource, action)

    def test_admin_matrix_is_all_true(self, decider: AuthorizationDecider):
        """Test the admin matrix allows everything."""
        matrix = decider.capabilities(create_subject(role="OfficeAdmin"))

        assert all(all(actions.values()) for actions in matrix.values())

    def test_require_success(self, decider: AuthorizationDecider):
        """Test an allowed pair returns Success(None)."""
        result = decider.require(
            create_subject(document_permissions=8), Resource.DOCUMENTS, Action.VIEW
        )

        assert result == Success(value=None)

    def test_require_failure(self, decider: AuthorizationDecider):
        """Test a denied pair returns Failure(AuthorizationError)."""
        result = decider.require(create_subject(), "finance", "delete")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code is ErrorCode.PERMISSION_DENIED
        assert result.error.required_permission == "finance:delete"

    def test_require_unknown_pair_raises(self, decider: AuthorizationDecider):
        """Test require() keeps the fail-fast contract."""
        with pytest.raises(UnknownResourceOrActionError):
            decider.require(create_subject(), "finance", "approve")


# ============================================================================
# Logging and Purity
# ============================================================================


@pytest.mark.unit
class TestDecisionLogging:
    """Test decisions are traced and inputs untouched."""

    def test_decision_logged_at_debug(
        self, decider: AuthorizationDecider, mock_logger: MagicMock
    ):
        """Test each decision emits one debug event."""
        decider.can(create_subject(client_permissions=8), "clients", "view")

        mock_logger.debug.assert_called_once_with(
            "authorization_decided",
            user_id=7,
            resource="clients",
            action="view",
            allowed=True,
            admin_bypass=False,
        )

    def test_admin_bypass_logged(
        self, decider: AuthorizationDecider, mock_logger: MagicMock
    ):
        """Test the bypass is visible in the log."""
        decider.can(create_subject(role="OfficeAdmin"), Resource.TASKS, Action.DELETE)

        kwargs = mock_logger.debug.call_args.kwargs
        assert kwargs["admin_bypass"] is True
        assert kwargs["resource"] == "tasks"
        assert kwargs["action"] == "delete"

    def test_subject_not_mutated(self, decider: AuthorizationDecider):
        """Test repeated calls see the same subject and give the same answer."""
        subject = create_subject(client_permissions=9)
        before = subject.profile.to_payload()

        first = decider.can(subject, "clients", "create")
        second = decider.can(subject, "clients", "create")

        assert first is second is True
        assert subject.profile.to_payload() == before
