"""Tests for Linkman gates G1-G3."""

import pytest

from linkman.gates import GateError, Gates


pytestmark = pytest.mark.django_db


class TestG1IdentifierPresence:
    def test_email_only_passes(self):
        assert Gates.identifier_presence("a@x.com", None).passed

    def test_phone_only_passes(self):
        assert Gates.identifier_presence(None, "123").passed

    def test_neither_raises(self):
        with pytest.raises(GateError, match="G1_IdentifierPresence"):
            Gates.identifier_presence(None, "")

    def test_check_variant_returns_bool(self):
        assert Gates.check_identifier_presence("a@x.com", None)
        assert not Gates.check_identifier_presence("", None)


class TestG2LinkPrecedence:
    def test_primary_passes(self, primary):
        assert Gates.link_precedence(primary.pk).passed

    def test_secondary_passes(self, secondary):
        assert Gates.link_precedence(secondary.pk).passed

    def test_linked_primary_raises(self, primary, make_contact):
        other = make_contact(email="other@x.com")
        other.linked = primary
        other.save()

        with pytest.raises(GateError) as exc_info:
            Gates.link_precedence(other.pk)
        assert exc_info.value.details["linked_id"] == primary.pk

    def test_unlinked_secondary_raises(self, secondary):
        secondary.linked = None
        secondary.save()

        assert not Gates.check_link_precedence(secondary.pk)

    def test_unknown_contact_raises(self):
        with pytest.raises(GateError, match="not found"):
            Gates.link_precedence(999)


class TestG3FlatLink:
    def test_primary_passes(self, primary):
        assert Gates.flat_link(primary.pk).passed

    def test_direct_secondary_passes(self, secondary):
        assert Gates.flat_link(secondary.pk).passed

    def test_chain_raises(self, make_contact, secondary):
        chained = make_contact(email="chained@x.com", linked=secondary)

        with pytest.raises(GateError, match="G3_FlatLink") as exc_info:
            Gates.flat_link(chained.pk)
        assert exc_info.value.details["linked_id"] == secondary.pk
        assert not Gates.check_flat_link(chained.pk)
