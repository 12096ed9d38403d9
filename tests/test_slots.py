"""
Tests for per-identity discovery slots and supersession.
"""
from mythdetector.models import DiscoveryRecord
from mythdetector.orchestration import DiscoverySlots


def _record(label="owl"):
    return DiscoveryRecord(
        subject_label=label,
        confidence=90.0,
        encyclopedia_summary=None,
        domain_description="desc",
        source_image_ref="ref-" + label,
    )


class TestDiscoverySlots:

    def test_commit_current_request(self):
        slots = DiscoverySlots()
        token = slots.begin("ada")

        assert slots.commit("ada", token, _record())
        assert slots.get("ada").subject_label == "owl"

    def test_stale_result_is_discarded(self):
        slots = DiscoverySlots()
        old = slots.begin("ada")
        new = slots.begin("ada")

        assert slots.commit("ada", new, _record("cat"))
        assert not slots.commit("ada", old, _record("owl"))
        assert slots.get("ada").subject_label == "cat"

    def test_stale_result_does_not_fill_empty_slot(self):
        slots = DiscoverySlots()
        old = slots.begin("ada")
        slots.begin("ada")

        assert not slots.commit("ada", old, _record())
        assert slots.get("ada") is None

    def test_begin_clears_previous_record(self):
        slots = DiscoverySlots()
        slots.commit("ada", slots.begin("ada"), _record())

        slots.begin("ada")

        assert slots.get("ada") is None

    def test_identities_are_independent(self):
        slots = DiscoverySlots()
        ada = slots.begin("ada")
        bob = slots.begin("bob")

        assert slots.commit("ada", ada, _record("owl"))
        assert slots.commit("bob", bob, _record("cat"))
        assert slots.get("ada").subject_label == "owl"

    def test_replace_requires_expected_record(self):
        slots = DiscoverySlots()
        original = _record()
        slots.commit("ada", slots.begin("ada"), original)

        assert slots.replace("ada", original, original.with_narrative("story"))
        assert not slots.replace("ada", original, original.with_narrative("other"))
        assert slots.get("ada").narrative == "story"

    def test_clear(self):
        slots = DiscoverySlots()
        token = slots.begin("ada")
        slots.commit("ada", token, _record())

        slots.clear("ada")

        assert slots.get("ada") is None
        assert not slots.commit("ada", token, _record())
