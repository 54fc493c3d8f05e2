from dice_clicker.core.game_event import GameEvent, GameEventType

RESET_PROMPT = "Are you sure you want to reset your game? This cannot be undone."


class InputController:
    """Listens for REQUEST_* events, validates them, and invokes Game / engine actions.

    Invalid requests publish REQUEST_DENIED plus a MESSAGE so the player sees why.
    """
    def __init__(self, game):
        self.game = game

    def on_event(self, event: GameEvent):  # type: ignore[override]
        t = event.type
        g = self.game
        if t == GameEventType.REQUEST_ROLL:
            g.roll()
        elif t == GameEventType.REQUEST_BUY:
            index = event.get('index')
            if index is None:
                self._deny("No shop item selected."); return
            g.engine.buy_shop_item(index)
        elif t == GameEventType.REQUEST_UPGRADE_SKILL:
            index = event.get('index')
            if index is None:
                self._deny("No skill selected."); return
            g.engine.upgrade_skill(index)
        elif t == GameEventType.REQUEST_ATTACK:
            if not g.state.combat_unlocked:
                self._deny("Combat unlocks at level 3."); return
            g.engine.attack()
        elif t == GameEventType.REQUEST_TOGGLE_PANEL:
            panel = event.get('panel')
            if panel not in g.panels.panels:
                self._deny(f"Unknown panel '{panel}'."); return
            if panel == 'combat' and not g.state.combat_unlocked:
                self._deny("Combat unlocks at level 3."); return
            g.panels.toggle(panel)
        elif t == GameEventType.REQUEST_TOGGLE_AUTO_ROLL:
            if not g.engine.auto_roller_owned:
                self._deny("Buy the Auto Roller first."); return
            g.engine.toggle_auto_roller()
        elif t == GameEventType.REQUEST_RESET:
            g.confirm_dialog.open(RESET_PROMPT, GameEventType.REQUEST_RESET_CONFIRMED)
        elif t == GameEventType.REQUEST_RESET_CONFIRMED:
            g.reset()

    def _emit(self, etype: GameEventType, payload=None):
        self.game.event_listener.publish(GameEvent(etype, payload=payload or {}))

    def _deny(self, reason: str):
        self._emit(GameEventType.REQUEST_DENIED, {"reason": reason})
        self._emit(GameEventType.MESSAGE, {"text": reason, "tone": "error"})
