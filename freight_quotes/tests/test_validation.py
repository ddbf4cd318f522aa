import pytest
from pydantic import ValidationError

from freight_quotes.core.enums import SenderKind, ParcelType
from freight_quotes.core.errors import InvalidRequest
from freight_quotes.schemas.quote import QuoteRequest, Parcel
from freight_quotes.services.validation import validate_quote_request, REQUIRED_GROUPS
from freight_quotes.utils.sanitize import sanitize_input

pytestmark = pytest.mark.unit


def test_complete_request_passes_through(valid_quote_data):
    payload = QuoteRequest.model_validate(valid_quote_data)
    validated = validate_quote_request(payload)

    assert validated.sender == payload.sender
    assert validated.parcel.type == ParcelType.STANDARD
    assert validated.sender.kind == SenderKind.INDIVIDUAL


@pytest.mark.parametrize("group", REQUIRED_GROUPS)
@pytest.mark.parametrize("how", ["absent", "null"])
def test_missing_group_is_rejected(valid_quote_data, group, how):
    if how == "absent":
        del valid_quote_data[group]
    else:
        valid_quote_data[group] = None
    payload = QuoteRequest.model_validate(valid_quote_data)

    with pytest.raises(InvalidRequest) as exc_info:
        validate_quote_request(payload)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Informations incorrectes."
    assert group in exc_info.value.detail


def test_sender_accepts_kind_key(valid_quote_data):
    sender = valid_quote_data["sender"]
    sender["kind"] = sender.pop("type")
    payload = QuoteRequest.model_validate(valid_quote_data)

    assert payload.sender.kind == SenderKind.INDIVIDUAL


def test_unknown_parcel_type_does_not_parse():
    with pytest.raises(ValidationError):
        Parcel(type="pallet", weight_kg=1)


def test_unknown_option_does_not_parse():
    with pytest.raises(ValidationError):
        Parcel(type="standard", weight_kg=1, options=["gift_wrap"])


def test_parcel_defaults():
    parcel = Parcel(type="document", weight_kg=0.5)

    assert parcel.declared_value == 0.0
    assert parcel.options == []


class TestSanitize:

    @pytest.mark.parametrize("raw,expected", [
        ("  Marie  ", "Marie"),
        ("<script>alert(1)</script>", "scriptalert(1)/script"),
        ("JavaScript:alert(1)", "alert(1)"),
        ("data:text/html,hi", "text/html,hi"),
        ("12 rue de la Paix", "12 rue de la Paix"),
    ])
    def test_sanitize_input(self, raw, expected):
        assert sanitize_input(raw) == expected

    def test_request_text_fields_are_sanitized(self, valid_quote_data):
        valid_quote_data["sender"]["name"] = "  <b>Marie</b> "
        valid_quote_data["pickup"]["city"] = "javascript:Paris"
        payload = QuoteRequest.model_validate(valid_quote_data)

        assert payload.sender.name == "bMarie/b"
        assert payload.pickup.city == "Paris"
