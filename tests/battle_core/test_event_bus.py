import logging

import pytest

from src.battle_core.enums import BattleEventType
from src.battle_core.event_bus import EventBus, create_event


def test_subscribers_called_in_subscription_order():
    bus = EventBus()
    calls = []
    bus.subscribe(BattleEventType.MOVE_USED, lambda e: calls.append("first"))
    bus.subscribe("*", lambda e: calls.append("wildcard"))
    bus.subscribe("move:used", lambda e: calls.append("third"))

    bus.emit(BattleEventType.MOVE_USED, pokemon="Pikachu")
    assert calls == ["first", "wildcard", "third"]


def test_only_matching_subscribers_receive_event():
    bus = EventBus()
    fainted, turns = [], []
    bus.subscribe(BattleEventType.POKEMON_FAINTED, fainted.append)
    bus.subscribe(BattleEventType.TURN_STARTED, turns.append)

    bus.emit(BattleEventType.TURN_STARTED, turn=3)
    assert fainted == []
    assert len(turns) == 1
    assert turns[0].data == {"turn": 3}


def test_unsubscribe_callable_and_method():
    bus = EventBus()
    seen = []
    unsubscribe = bus.subscribe(BattleEventType.MOVE_USED, seen.append)
    bus.subscribe(BattleEventType.MOVE_MISSED, seen.append)

    unsubscribe()
    bus.unsubscribe(BattleEventType.MOVE_MISSED, seen.append)
    bus.emit(BattleEventType.MOVE_USED)
    bus.emit(BattleEventType.MOVE_MISSED)
    assert seen == []
    assert bus.subscriber_count() == 0


def test_failing_subscriber_is_isolated(caplog):
    bus = EventBus()
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe("*", broken)
    bus.subscribe("*", seen.append)

    with caplog.at_level(logging.ERROR, logger="src.battle_core.event_bus"):
        bus.emit(BattleEventType.BATTLE_STARTED)

    assert len(seen) == 1
    assert "Event subscriber failed" in caplog.text


def test_reset_drops_stale_subscribers():
    bus = EventBus()
    seen = []
    bus.subscribe("*", seen.append)
    bus.reset()
    bus.emit(BattleEventType.BATTLE_STARTED)
    assert seen == []


def test_separate_buses_do_not_share_subscribers():
    first, second = EventBus(), EventBus()
    seen = []
    first.subscribe("*", seen.append)
    second.emit(BattleEventType.BATTLE_STARTED)
    assert seen == []


def test_unknown_event_tag_is_rejected():
    with pytest.raises(ValueError):
        EventBus().subscribe("not:an-event", lambda e: None)


def test_create_event_carries_payload_and_timestamp():
    event = create_event(BattleEventType.DAMAGE_APPLIED, pokemon="Onix", damage_amount=12)
    assert event.type == BattleEventType.DAMAGE_APPLIED
    assert event.data == {"pokemon": "Onix", "damage_amount": 12}
    assert event.timestamp > 0
