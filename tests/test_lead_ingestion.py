import pytest

from leadengine.core.exceptions import InvalidLeadDataError
from leadengine.schemas.common import Channel, LeadStatus, Priority
from leadengine.schemas.lead import LeadIngest
from leadengine.services.lead_ingestion import LeadIngestionService


@pytest.fixture
def service() -> LeadIngestionService:
    return LeadIngestionService()


class TestBuildLead:
    def test_fresh_lead_defaults(self, service, now):
        lead = service.build_lead(
            LeadIngest(name="Riya Sharma", phone="08012345678"), now, lead_id="x1"
        )
        assert lead.id == "x1"
        assert lead.status == LeadStatus.NEW
        assert lead.priority == Priority.MEDIUM
        assert lead.owner == ""
        assert lead.score == 0
        assert lead.created_at == now
        assert lead.last_contact_at is None

    def test_generates_id_when_missing(self, service, now):
        first = service.build_lead(LeadIngest(name="A", phone="1"), now)
        second = service.build_lead(LeadIngest(name="A", phone="1"), now)
        assert first.id and first.id != second.id

    def test_city_inferred_from_phone(self, service, now):
        lead = service.build_lead(LeadIngest(name="A", phone="02212345678"), now)
        assert lead.city == "Mumbai"

    def test_supplied_city_wins(self, service, now):
        lead = service.build_lead(
            LeadIngest(name="A", phone="02212345678", city="Pune"), now
        )
        assert lead.city == "Pune"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("website", Channel.WEBSITE),
            ("WEBSITE", Channel.WEBSITE),
            ("fb", Channel.FB),
            ("Twitter", Channel.TWITTER),
            ("instagram", Channel.OFFLINE),
            ("", Channel.OFFLINE),
            (None, Channel.OFFLINE),
        ],
    )
    def test_channel_normalised(self, service, now, raw, expected):
        lead = service.build_lead(LeadIngest(name="A", phone="1", channel=raw), now)
        assert lead.channel == expected

    def test_blank_optional_fields_become_absent(self, service, now):
        lead = service.build_lead(
            LeadIngest(name=" A ", phone=" 1 ", email=" ", preferred_model=""), now
        )
        assert lead.name == "A"
        assert lead.phone == "1"
        assert lead.email is None
        assert lead.preferred_model is None

    @pytest.mark.parametrize(
        "raw",
        [
            LeadIngest(phone="08012345678"),
            LeadIngest(name="Riya"),
            LeadIngest(name="  ", phone="08012345678"),
            LeadIngest(),
        ],
    )
    def test_missing_name_or_phone_rejected(self, service, now, raw):
        with pytest.raises(InvalidLeadDataError):
            service.build_lead(raw, now)
