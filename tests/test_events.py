from dice_clicker.core.event_listener import EventListener
from dice_clicker.core.game_event import GameEvent, GameEventType
from tests.test_utils import EventCollector


def test_filtered_subscription_only_receives_its_types():
    listener = EventListener()
    rolls = EventCollector()
    everything = EventCollector()
    listener.subscribe(rolls.on_event, [GameEventType.DIE_ROLLED])
    listener.subscribe(everything.on_event)
    listener.publish(GameEvent(GameEventType.DIE_ROLLED, payload={"face": 3}))
    listener.publish(GameEvent(GameEventType.LEVEL_UP))
    assert rolls.types() == [GameEventType.DIE_ROLLED]
    assert everything.types() == [GameEventType.DIE_ROLLED, GameEventType.LEVEL_UP]
    assert rolls.events[0].get("face") == 3


def test_events_published_during_dispatch_are_queued():
    listener = EventListener()
    order = []

    def chain(event):
        order.append(event.type)
        if event.type == GameEventType.REQUEST_ROLL:
            listener.publish(GameEvent(GameEventType.DIE_ROLLED))

    def tail(event):
        order.append(("tail", event.type))

    listener.subscribe(chain)
    listener.subscribe(tail)
    listener.publish(GameEvent(GameEventType.REQUEST_ROLL))
    assert order == [
        GameEventType.REQUEST_ROLL, ("tail", GameEventType.REQUEST_ROLL),
        GameEventType.DIE_ROLLED, ("tail", GameEventType.DIE_ROLLED),
    ]


def test_failing_subscriber_does_not_block_others():
    listener = EventListener()
    collector = EventCollector()

    def broken(event):
        raise RuntimeError("subscriber bug")

    listener.subscribe(broken)
    listener.subscribe(collector.on_event)
    listener.publish(GameEvent(GameEventType.MESSAGE, payload={"text": "hi"}))
    assert collector.messages() == ["hi"]


def test_unsubscribe():
    listener = EventListener()
    collector = EventCollector()
    listener.subscribe(collector.on_event, [GameEventType.ATTACK])
    listener.unsubscribe(collector.on_event)
    listener.publish(GameEvent(GameEventType.ATTACK))
    assert collector.events == []


def test_get_falls_back_to_default():
    ev = GameEvent(GameEventType.MESSAGE)
    assert ev.get("text", "none") == "none"
