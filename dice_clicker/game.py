import logging
import pygame
from dice_clicker.core.game_event import GameEvent, GameEventType
from dice_clicker.core.event_listener import EventListener
from dice_clicker.core.game_state import GameState
from dice_clicker.core.random_source import RandomSource
from dice_clicker.core.scheduler import Scheduler
from dice_clicker.dice.renderer import DiceRenderer
from dice_clicker.progression.engine import ProgressionEngine, RollOutcome
from dice_clicker.ui.confirm_dialog import ConfirmDialog
from dice_clicker.ui.input_controller import InputController
from dice_clicker.ui.panels import PanelManager, PanelPhase
from dice_clicker.ui.renderer import GameRenderer
from dice_clicker.ui.settings import FONT_SIZE_SMALL, FONT_SIZE_TOAST
from dice_clicker.ui.toasts import ToastManager
from dice_clicker.ui.ui_objects import build_core_buttons, build_panel_buttons, build_volume_slider

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, screen, font, clock, *, rng_seed: int | None = None, auto_initialize: bool = True):
        """Core gameplay model: state, engine, dice canvas, panels and events.

        The pygame loop lives in App/GameScreen; this class only reacts to input
        events, advances time via update(dt_ms) and draws on request, so tests can
        drive it with synthetic events.

        Args:
            screen: Pygame display surface
            font: Main font for rendering
            clock: Pygame clock for timing
            rng_seed: Optional seed for deterministic testing
            auto_initialize: If True, calls initialize() immediately.
        """
        self.screen = screen
        self.font = font
        self.clock = clock
        self._rng_seed = rng_seed
        self.small_font = pygame.font.Font(None, FONT_SIZE_SMALL)
        self.toast_font = pygame.font.Font(None, FONT_SIZE_TOAST)
        self.rng = None
        self.state = None
        self.event_listener = None
        self.last_outcome: RollOutcome | None = None
        if auto_initialize:
            self.initialize()

    def initialize(self):
        """Build every subsystem. Order matters: the event hub exists before anything publishes."""
        self.rng = RandomSource(seed=self._rng_seed)
        self.state = GameState()
        self.event_listener = EventListener()
        self.scheduler = Scheduler()
        self.engine = ProgressionEngine(self.state, self.rng, self.event_listener, self.scheduler)
        # Automatic rolls take the same path as clicks so the die animates
        self.engine.on_auto_roll = self.roll
        self.dice_renderer = DiceRenderer(self.scheduler, self.rng)
        self.dice_renderer.on_finished = self._on_animation_finished
        self.dice_renderer.draw_static(1)
        self.panels = PanelManager(on_change=self._on_panel_change)
        self.toasts = ToastManager(self.toast_font)
        self.toasts.activate(self, events=[GameEventType.MESSAGE])
        self.confirm_dialog = ConfirmDialog()
        self.ui_buttons = build_core_buttons(self)
        self.panel_buttons = build_panel_buttons(self)
        self.volume_slider = build_volume_slider()
        self.renderer = GameRenderer(self)
        self._init_sprites()
        self.input_controller = InputController(self)
        self.event_listener.subscribe(self.input_controller.on_event)
        # A record already past the unlock level shows combat straight away
        self.engine.sync_unlocks()

    def _init_sprites(self):
        from dice_clicker.ui.sprites.ui_sprites import UIButtonSprite
        from dice_clicker.ui.sprites.hud_sprites import PlayerHUDSprite
        for btn in self.ui_buttons + self.panel_buttons:
            UIButtonSprite(btn, self, self.renderer.layered)
        self.hud_sprite = PlayerHUDSprite(self, self.renderer.layered)

    def _on_panel_change(self, name: str, old: PanelPhase, new: PanelPhase):
        if new is PanelPhase.OPENING:
            self.event_listener.publish(GameEvent(GameEventType.PANEL_OPENED, payload={"panel": name}))
        elif new is PanelPhase.HIDDEN:
            self.event_listener.publish(GameEvent(GameEventType.PANEL_CLOSED, payload={"panel": name}))

    def _on_animation_finished(self, face: int):
        self.event_listener.publish(GameEvent(GameEventType.ANIMATION_FINISHED, payload={"face": face}))

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def roll(self) -> RollOutcome:
        """Roll, animate towards the rolled face, then refresh displayed counters."""
        outcome = self.engine.roll_die()
        self.last_outcome = outcome
        self.dice_renderer.play(outcome.face)
        self.event_listener.publish(GameEvent(GameEventType.ANIMATION_STARTED, payload={"face": outcome.face}))
        self.event_listener.publish(GameEvent(GameEventType.STATE_CHANGED, payload=self.state.snapshot()))
        return outcome

    def reset(self):
        self.dice_renderer.stop()
        self.engine.reset()
        self.dice_renderer.draw_static(1)
        self.confirm_dialog.close()
        self.panels.close_all()
        self.event_listener.publish(GameEvent(GameEventType.STATE_CHANGED, payload=self.state.snapshot()))

    def request(self, event_type: GameEventType, **payload):
        """Publish a REQUEST_* event as if a button had been clicked."""
        self.event_listener.publish(GameEvent(event_type, payload=payload))

    # ------------------------------------------------------------------
    # Frame loop hooks
    # ------------------------------------------------------------------
    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.renderer.handle_click(self, event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self.volume_slider.handle_drag(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.volume_slider.release()
        elif event.type == pygame.KEYDOWN:
            if self.confirm_dialog.handle_key(self, event.key):
                return
            if event.key == pygame.K_SPACE:
                self.request(GameEventType.REQUEST_ROLL)
            elif event.key == pygame.K_ESCAPE:
                self.panels.close_all()

    def update(self, dt_ms: int):
        self.scheduler.advance(dt_ms)
        self.panels.update(dt_ms)
        self.toasts.update(dt_ms)

    def draw(self):
        self.renderer.draw()
