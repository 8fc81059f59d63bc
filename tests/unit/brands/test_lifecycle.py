"""
Unit tests for BrandLifecycleManager.
"""
import uuid

import pytest

from accounts.domain.principal import PrincipalDescriptor
from authorization.kernel import AuthorizationKernel
from authorization.policy import Action, AuthorizationDecision, DenyReason
from brands.application.commands.transition_brand_status import TransitionBrandStatusCommand
from brands.application.handlers.brand_lifecycle_handlers import TransitionBrandStatusHandler
from brands.domain.brand import Brand
from brands.domain.events import BrandStatusChanged
from brands.domain.services import BRAND_TRANSITIONS, BrandLifecycleManager
from core.domain.events import EventHandler
from core.domain.exceptions import (
    DomainValidationError,
    ForbiddenError,
    InvalidTransitionError,
    ResourceNotFoundError,
)
from core.domain.value_objects import BrandStatus, Role
from core.infrastructure.events import event_bus
from tests.fakes import RacingBrandRepository

ALLOWED_EDGES = [
    (BrandStatus.PENDING, BrandStatus.APPROVED),
    (BrandStatus.PENDING, BrandStatus.REJECTED),
    (BrandStatus.APPROVED, BrandStatus.BANNED),
]

FORBIDDEN_EDGES = [
    (current, target)
    for current in BrandStatus
    for target in BrandStatus
    if (current, target) not in ALLOWED_EDGES
]


class RecordingHandler(EventHandler):
    """Collects the events it receives."""

    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


@pytest.fixture
def status_events():
    """Record BrandStatusChanged events for the duration of a test."""
    handler = RecordingHandler()
    event_bus.subscribe(BrandStatusChanged, handler)
    yield handler.events
    event_bus.unsubscribe(BrandStatusChanged, handler)


class TestTransitionTable:
    """Tests for the static transition table."""

    def test_terminal_statuses_have_no_edges(self):
        """Test rejected and banned are terminal."""
        assert BRAND_TRANSITIONS[BrandStatus.REJECTED] == frozenset()
        assert BRAND_TRANSITIONS[BrandStatus.BANNED] == frozenset()

    @pytest.mark.parametrize("current,target", ALLOWED_EDGES)
    def test_allowed_edges(self, current, target):
        """Test every allowed edge."""
        assert BrandLifecycleManager.can_transition(current, target)

    @pytest.mark.parametrize("current,target", FORBIDDEN_EDGES)
    def test_forbidden_edges(self, current, target):
        """Test every other pair, same-status included, is refused."""
        assert not BrandLifecycleManager.can_transition(current, target)

    def test_initial_status(self):
        """Test sign-up statuses."""
        assert BrandLifecycleManager.initial_status() == BrandStatus.APPROVED
        assert BrandLifecycleManager.initial_status("pending") == BrandStatus.PENDING

    @pytest.mark.parametrize("configured", ["banned", "rejected", "archived"])
    def test_invalid_initial_status(self, configured):
        """Test brands cannot start terminal or unknown."""
        with pytest.raises(ValueError):
            BrandLifecycleManager.initial_status(configured)


@pytest.mark.asyncio
class TestTransition:
    """Tests for BrandLifecycleManager.transition."""

    @pytest.mark.parametrize("current,target", ALLOWED_EDGES)
    async def test_allowed_transition(
        self, lifecycle_manager, brand_repository, seed_brand, admin, current, target
    ):
        """Test an admin moves a brand along an edge."""
        brand, _ = await seed_brand(status=current)

        result = await lifecycle_manager.transition(brand.id, target, admin)

        assert result.status == target
        assert (await brand_repository.find_by_id(brand.id)).status == target

    @pytest.mark.parametrize("current,target", FORBIDDEN_EDGES)
    async def test_forbidden_transition(
        self, lifecycle_manager, brand_repository, seed_brand, admin, current, target
    ):
        """Test no write happens for a missing edge."""
        brand, _ = await seed_brand(status=current)

        with pytest.raises(InvalidTransitionError):
            await lifecycle_manager.transition(brand.id, target, admin)

        assert (await brand_repository.find_by_id(brand.id)).status == current

    @pytest.mark.parametrize("role", [Role.CLIENT, Role.BRAND_OWNER])
    async def test_non_admin_is_forbidden(
        self, lifecycle_manager, brand_repository, seed_brand, role
    ):
        """Test only admins change status."""
        brand, _ = await seed_brand()
        actor = PrincipalDescriptor(principal_id=uuid.uuid4(), role=role)

        with pytest.raises(ForbiddenError):
            await lifecycle_manager.transition(brand.id, BrandStatus.BANNED, actor)

        assert (await brand_repository.find_by_id(brand.id)).status == BrandStatus.APPROVED

    async def test_owner_cannot_ban_own_brand(self, lifecycle_manager, seed_brand):
        """Test ownership gives no lifecycle rights."""
        brand, owner = await seed_brand()
        with pytest.raises(ForbiddenError):
            await lifecycle_manager.transition(brand.id, BrandStatus.BANNED, owner)

    async def test_anonymous_is_forbidden(self, lifecycle_manager, seed_brand):
        """Test a missing actor."""
        brand, _ = await seed_brand()
        with pytest.raises(ForbiddenError):
            await lifecycle_manager.transition(brand.id, BrandStatus.BANNED, None)

    async def test_permission_comes_from_kernel(self, brand_repository, seed_brand, admin):
        """Test a kernel deny stops even an admin, and is reported as Forbidden."""
        asked = []

        class DenyingKernel:
            async def authorize(self, principal, action, resource=None):
                asked.append(action)
                return AuthorizationDecision.deny(DenyReason.WRONG_ROLE)

        manager = BrandLifecycleManager(brand_repository=brand_repository, kernel=DenyingKernel())
        brand, _ = await seed_brand()

        with pytest.raises(ForbiddenError):
            await manager.transition(brand.id, BrandStatus.BANNED, admin)

        assert asked == [Action.TRANSITION_BRAND_STATUS]
        assert (await brand_repository.find_by_id(brand.id)).status == BrandStatus.APPROVED

    async def test_missing_brand(self, lifecycle_manager, admin):
        """Test an unknown brand id."""
        with pytest.raises(ResourceNotFoundError):
            await lifecycle_manager.transition(uuid.uuid4(), BrandStatus.BANNED, admin)

    async def test_event_published(self, lifecycle_manager, seed_brand, admin, status_events):
        """Test a successful transition publishes BrandStatusChanged."""
        brand, _ = await seed_brand()

        await lifecycle_manager.transition(brand.id, BrandStatus.BANNED, admin, reason="fraud")

        assert len(status_events) == 1
        event = status_events[0]
        assert event.aggregate_id == str(brand.id)
        assert event.previous_status == "approved"
        assert event.new_status == "banned"
        assert event.actor_id == admin.principal_id
        assert event.reason == "fraud"

    async def test_refused_transition_publishes_nothing(
        self, lifecycle_manager, seed_brand, admin, status_events
    ):
        """Test no event for a refused transition."""
        brand, _ = await seed_brand(status=BrandStatus.BANNED)
        with pytest.raises(InvalidTransitionError):
            await lifecycle_manager.transition(brand.id, BrandStatus.APPROVED, admin)
        assert status_events == []


@pytest.mark.asyncio
class TestConcurrentTransition:
    """Tests for the compare-and-set on status."""

    async def test_losing_writer_gets_invalid_transition(
        self, admin, product_repository, status_events
    ):
        """Test a concurrent change makes the second writer fail."""
        repository = RacingBrandRepository(interloper_status=BrandStatus.REJECTED)
        brand = await repository.create(
            Brand.create(owner_id=uuid.uuid4(), name="Alice Wear", status=BrandStatus.PENDING)
        )
        manager = BrandLifecycleManager(
            brand_repository=repository,
            kernel=AuthorizationKernel(
                brand_repository=repository, product_repository=product_repository
            ),
        )

        with pytest.raises(InvalidTransitionError, match="rejected"):
            await manager.transition(brand.id, BrandStatus.APPROVED, admin)

        assert (await repository.find_by_id(brand.id)).status == BrandStatus.REJECTED
        assert status_events == []


@pytest.mark.asyncio
class TestTransitionBrandStatusHandler:
    """Tests for TransitionBrandStatusHandler."""

    async def test_handle_returns_dto(self, lifecycle_manager, seed_brand, admin):
        """Test the handler maps the result to a DTO."""
        brand, _ = await seed_brand(status=BrandStatus.PENDING)
        handler = TransitionBrandStatusHandler(lifecycle_manager=lifecycle_manager)

        result = await handler.handle(
            TransitionBrandStatusCommand(brand_id=brand.id, target_status="approved", actor=admin)
        )

        assert result.id == brand.id
        assert result.status == "approved"

    async def test_unknown_status(self, lifecycle_manager, seed_brand, admin):
        """Test an unknown target status."""
        brand, _ = await seed_brand()
        handler = TransitionBrandStatusHandler(lifecycle_manager=lifecycle_manager)

        with pytest.raises(DomainValidationError):
            await handler.handle(
                TransitionBrandStatusCommand(brand_id=brand.id, target_status="archived", actor=admin)
            )
