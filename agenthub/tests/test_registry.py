"""Tests for the agent registry lifecycle."""

import pytest

from agenthub.errors import BadRequestError, NotFoundError
from agenthub.registry import AgentRegistry


def _create(registry, **fields):
    payload = {"name": "Bot", "description": "does things", "category": "Sales"}
    payload.update(fields)
    return registry.create_agent(payload)


class TestCreateAgent:
    """Identity and timestamp assignment."""

    def test_assigns_id_and_equal_timestamps(self, registry):
        """New agents get a fresh id and createdAt == updatedAt."""
        agent = _create(registry)
        assert agent.id
        assert agent.created_at == agent.updated_at

    def test_ignores_client_supplied_id(self, registry):
        """The registry is the only source of ids."""
        agent = _create(registry, id="client-chosen")
        assert agent.id != "client-chosen"
        assert registry.get_agent(agent.id).name == "Bot"

    def test_ids_are_unique(self, registry):
        ids = {_create(registry).id for _ in range(20)}
        assert len(ids) == 20

    def test_persists_passthrough_attributes(self, registry, store):
        """Extra fields are stored at the top level of the record."""
        agent = _create(registry, author="ops", version="1.2")
        item = store.get(agent.id)
        assert item["author"] == "ops"
        assert item["version"] == "1.2"

    def test_missing_name_is_bad_request(self, registry):
        with pytest.raises(BadRequestError) as exc_info:
            registry.create_agent({"description": "anonymous"})
        assert "name" in str(exc_info.value)

    def test_uses_injected_id_factory(self, store, clock):
        """Identifier generation is a constructor dependency."""
        registry = AgentRegistry(store, id_factory=lambda: "fixed-id", clock=clock)
        assert _create(registry).id == "fixed-id"


class TestGetAgent:
    def test_returns_stored_agent(self, registry):
        agent = _create(registry)
        assert registry.get_agent(agent.id) == agent

    def test_missing_agent_raises_not_found(self, registry):
        with pytest.raises(NotFoundError):
            registry.get_agent("nonexistent-id")


class TestListAgents:
    """Scan versus category index selection."""

    def test_empty_store_returns_empty_listing(self, registry):
        """Listing never fails on an empty table."""
        listing = registry.list_agents()
        assert listing.items == []
        assert listing.count == 0

    def test_category_filter_is_exact(self, registry):
        """Only agents whose category matches exactly are returned."""
        _create(registry, name="A", category="Marketing")
        _create(registry, name="B", category="Sales")
        _create(registry, name="C", category="marketing")

        listing = registry.list_agents("Marketing")
        assert listing.count == 1
        assert [a.name for a in listing.items] == ["A"]

    def test_all_and_none_scan_everything(self, registry):
        """'All' and no filter both return the full table."""
        _create(registry, name="A", category="Marketing")
        _create(registry, name="B", category="Sales")
        _create(registry, name="C", category=None)

        assert registry.list_agents().count == 3
        assert registry.list_agents("All").count == 3

    def test_uses_index_for_categories(self, registry, store, monkeypatch):
        """A category filter goes through the index, never a scan."""
        _create(registry, category="Sales")

        def fail_scan():
            raise AssertionError("scan should not be used")

        monkeypatch.setattr(store, "scan", fail_scan)
        assert registry.list_agents("Sales").count == 1

    def test_unknown_category_is_not_an_error(self, registry):
        _create(registry)
        assert registry.list_agents("Nope").count == 0


class TestUpdateAgent:
    """Sparse updates and immutable creation metadata."""

    def test_sparse_update_leaves_other_fields(self, registry, store):
        """Only the sent field changes (apart from updatedAt)."""
        agent = _create(registry, author="ops")
        before = store.get(agent.id)

        registry.update_agent(agent.id, {"description": "new text"})
        after = store.get(agent.id)

        assert after["description"] == "new text"
        for key in before:
            if key not in ("description", "updatedAt"):
                assert after[key] == before[key]

    def test_cannot_change_id_or_created_at(self, registry):
        """id and createdAt in the payload are dropped silently."""
        agent = _create(registry)
        updated = registry.update_agent(agent.id, {
            "id": "hijack",
            "createdAt": "1999-01-01T00:00:00+00:00",
            "name": "Renamed",
        })
        assert updated.id == agent.id
        assert updated.created_at == agent.created_at
        assert updated.name == "Renamed"
        with pytest.raises(NotFoundError):
            registry.get_agent("hijack")

    def test_updated_at_always_refreshes(self, registry):
        """Even an empty update bumps updatedAt."""
        agent = _create(registry)
        first = registry.update_agent(agent.id, {})
        second = registry.update_agent(agent.id, {})
        assert agent.updated_at < first.updated_at < second.updated_at
        assert first.created_at == agent.created_at

    def test_passthrough_attribute_can_be_updated(self, registry):
        """Attributes that exist on the record are recognized fields."""
        agent = _create(registry, author="ops")
        updated = registry.update_agent(agent.id, {"author": "platform"})
        assert updated.attributes["author"] == "platform"

    def test_unknown_field_is_rejected(self, registry, store):
        """Fields unknown to the record are refused and nothing changes."""
        agent = _create(registry)
        before = store.get(agent.id)
        with pytest.raises(BadRequestError) as exc_info:
            registry.update_agent(agent.id, {"name": "X", "injected": True})
        assert "injected" in str(exc_info.value)
        assert store.get(agent.id) == before

    def test_reserved_category_is_rejected(self, registry):
        agent = _create(registry)
        with pytest.raises(BadRequestError):
            registry.update_agent(agent.id, {"category": "All"})

    def test_updated_at_never_precedes_created_at(self, store):
        """A clock stepping backwards does not move updatedAt before createdAt."""
        stamps = iter([
            "2024-01-02T00:00:00+00:00",
            "2024-01-01T00:00:00+00:00",
        ])
        registry = AgentRegistry(store, clock=lambda: next(stamps))
        agent = _create(registry)

        updated = registry.update_agent(agent.id, {})
        assert updated.updated_at >= updated.created_at
        assert updated.created_at == "2024-01-02T00:00:00+00:00"

    def test_agent_deleted_during_update_is_not_found(self, registry, store, monkeypatch):
        """Losing a race with delete reports the agent, not the raw record."""
        agent = _create(registry)
        update_partial = store.update_partial

        def delete_then_update(key, fields):
            store.delete(key)
            return update_partial(key, fields)

        monkeypatch.setattr(store, "update_partial", delete_then_update)
        with pytest.raises(NotFoundError) as exc_info:
            registry.update_agent(agent.id, {"name": "Late"})
        assert exc_info.value.resource == "Agent"
        assert store.get(agent.id) is None

    def test_missing_agent_raises_not_found(self, registry):
        """Updates never create records."""
        with pytest.raises(NotFoundError):
            registry.update_agent("nonexistent-id", {"name": "Ghost"})
        assert registry.list_agents().count == 0


class TestDeleteAgent:
    def test_delete_removes_agent(self, registry):
        agent = _create(registry)
        registry.delete_agent(agent.id)
        with pytest.raises(NotFoundError):
            registry.get_agent(agent.id)

    def test_delete_is_idempotent(self, registry):
        """Deleting twice, or deleting an unknown id, is fine."""
        agent = _create(registry)
        registry.delete_agent(agent.id)
        registry.delete_agent(agent.id)
        registry.delete_agent("nonexistent-id")
