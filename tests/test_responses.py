from conftest import FixedRandomSource
from valentine_api.app.schemas.valentine import ValentineMessage
from valentine_api.app.services.quote_service import DEFAULT_QUOTE_BANK, Selector
from valentine_api.app.services.response_service import ResponseService


def test_build_health_is_constant():
    first = ResponseService.build_health()
    second = ResponseService.build_health()
    assert first == second
    assert first.model_dump() == {"status": "ok", "service": "valentine-backend"}


def test_build_valentine_uses_selector():
    selector = Selector(DEFAULT_QUOTE_BANK, FixedRandomSource(0))
    message = ResponseService.build_valentine(selector)
    assert message.message == "You are the reason I believe in love."
    assert message.from_ == "Your Valentine"


def test_valentine_message_serializes_from_key():
    message = ValentineMessage(message="hi", from_="me")
    assert message.model_dump(by_alias=True) == {"message": "hi", "from": "me"}
    assert list(message.model_dump(by_alias=True)) == ["message", "from"]


def test_valentine_message_accepts_alias():
    assert ValentineMessage(**{"message": "hi", "from": "me"}).from_ == "me"
