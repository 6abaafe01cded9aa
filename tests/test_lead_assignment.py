import pytest

from leadengine.core.exceptions import OwnerNotFoundError
from leadengine.schemas.common import OwnerRole
from leadengine.schemas.lead import Owner
from leadengine.services.lead_assignment import UNASSIGNED, LeadAssignmentManager


@pytest.fixture
def manager() -> LeadAssignmentManager:
    return LeadAssignmentManager()


def _pool(make_lead, owner_counts, city="Bangalore"):
    """Build pool leads: ``{"1": 3}`` gives owner 1 three leads in *city*."""
    pool = []
    for owner_id, count in owner_counts.items():
        for n in range(count):
            pool.append(
                make_lead(id=f"{city}-{owner_id}-{n}", owner=owner_id, city=city)
            )
    return pool


class TestAssignLead:
    """Verify city-scoped load balancing."""

    def test_least_loaded_owner_wins(self, manager, make_lead, owners):
        pool = _pool(make_lead, {"1": 3, "2": 1})
        lead = make_lead(id="new")
        assert manager.assign_lead(lead, pool, owners) == "2"

    def test_expertise_breaks_tie(self, manager, make_lead, owners):
        pool = _pool(make_lead, {"1": 2, "2": 2})
        lead = make_lead(id="new", preferred_model="Punch")
        assert manager.assign_lead(lead, pool, owners) == "2"

    def test_tie_without_expertise_uses_roster_order(self, manager, make_lead, owners):
        pool = _pool(make_lead, {"1": 1, "2": 1})
        lead = make_lead(id="new", preferred_model="Safari")
        assert manager.assign_lead(lead, pool, owners) == "1"

    def test_expertise_does_not_override_load(self, manager, make_lead, owners):
        pool = _pool(make_lead, {"1": 0, "2": 4})
        lead = make_lead(id="new", preferred_model="Punch")
        assert manager.assign_lead(lead, pool, owners) == "1"

    def test_load_counted_per_city(self, manager, make_lead, owners):
        pool = _pool(make_lead, {"1": 5}, city="Mumbai") + _pool(
            make_lead, {"2": 1}
        )
        lead = make_lead(id="new", city="Bangalore")
        assert manager.assign_lead(lead, pool, owners) == "1"

    def test_business_manager_never_assigned(self, manager, make_lead, owners):
        pool = _pool(make_lead, {"1": 3, "2": 3})
        lead = make_lead(id="new")
        assert manager.assign_lead(lead, pool, owners) != "3"

    def test_only_business_managers_leaves_unassigned(
        self, manager, make_lead, owners
    ):
        managers = [o for o in owners if o.role == OwnerRole.BUSINESS_MANAGER]
        assert manager.assign_lead(make_lead(), [], managers) == UNASSIGNED

    def test_empty_roster_leaves_unassigned(self, manager, make_lead):
        assert manager.assign_lead(make_lead(), [], []) == ""

    def test_deterministic(self, manager, make_lead, owners):
        pool = _pool(make_lead, {"1": 1, "2": 1})
        lead = make_lead(id="new", preferred_model="Tiago")
        first = manager.assign_lead(lead, pool, owners)
        assert all(manager.assign_lead(lead, pool, owners) == first for _ in range(5))

    def test_inputs_not_mutated(self, manager, make_lead, owners):
        pool = _pool(make_lead, {"1": 1})
        snapshot = [lead.model_dump() for lead in pool]
        manager.assign_lead(make_lead(id="new"), pool, owners)
        assert [lead.model_dump() for lead in pool] == snapshot

    def test_owner_order_is_input_order(self, manager, make_lead):
        roster = [
            Owner(id="b", name="B", role=OwnerRole.SALES_EXECUTIVE),
            Owner(id="a", name="A", role=OwnerRole.SALES_EXECUTIVE),
        ]
        assert manager.assign_lead(make_lead(), [], roster) == "b"


class TestReassignLead:
    def test_returns_copy_with_new_owner(self, manager, make_lead, owners):
        lead = make_lead(owner="1")
        updated = manager.reassign_lead(lead, "2", owners)
        assert updated.owner == "2"
        assert lead.owner == "1"

    def test_unknown_owner_raises(self, manager, make_lead, owners):
        with pytest.raises(OwnerNotFoundError):
            manager.reassign_lead(make_lead(), "99", owners)
