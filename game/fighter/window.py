"""
Arcade front end: keyboard -> InputIntent, SimulationState -> shapes

The periodic tick is armed with arcade.schedule when a session starts and
disarmed as soon as a tick leaves the playing phase.

Run:
    python -m game.fighter.window
"""

from __future__ import annotations

import arcade

from .config import FighterConfig
from .entities import Action, SimulationState
from .session import Session

KEY_BINDINGS = {
    arcade.key.LEFT: Action.MOVE_LEFT,
    arcade.key.RIGHT: Action.MOVE_RIGHT,
    arcade.key.UP: Action.MOVE_UP,
    arcade.key.DOWN: Action.MOVE_DOWN,
    arcade.key.SPACE: Action.FIRE,
}

START_KEYS = (arcade.key.ENTER, arcade.key.RETURN)

BG = (17, 24, 39)
PLAYER_C = (96, 165, 250)
ENEMY_C = (239, 68, 68)
BULLET_C = (250, 204, 21)
PARTICLE_C = (249, 115, 22)
HUD_C = (220, 220, 220)
GAME_OVER_C = (239, 68, 68)


def _rect(x: float, y: float, w: float, h: float, field_h: float, color) -> None:
    # field origin is top-left, arcade's is bottom-left
    arcade.draw_lrbt_rectangle_filled(x, x + w, field_h - (y + h), field_h - y, color)


def draw_state(state: SimulationState, config: FighterConfig) -> None:
    """Project every entity of a snapshot onto the current window"""
    h = config.height

    if state.is_playing or state.is_game_over:
        p = state.player
        _rect(p.x, p.y, config.player_width, config.player_height, h, PLAYER_C)

        for b in state.projectiles:
            _rect(b.x, b.y, config.bullet_width, config.bullet_height, h, BULLET_C)

        for e in state.enemies:
            _rect(e.x, e.y, config.enemy_width, config.enemy_height, h, ENEMY_C)

        for burst in state.explosions:
            for part in burst.particles:
                alpha = int(255 * max(0.0, min(1.0, part.alpha)))
                arcade.draw_circle_filled(part.x, h - part.y, part.size / 2, (*PARTICLE_C, alpha))

    arcade.draw_text(f"Score: {state.score}", 10, h - 24, HUD_C, 14)

    if state.is_game_over:
        arcade.draw_text("Game Over!", config.width / 2, h / 2 + 10, GAME_OVER_C, 22, anchor_x="center")
        arcade.draw_text("Press Enter to play again", config.width / 2, h / 2 - 20, HUD_C, 12, anchor_x="center")
    elif not state.is_playing:
        arcade.draw_text("Press Enter to start", config.width / 2, h / 2, HUD_C, 14, anchor_x="center")


class FighterWindow(arcade.Window):
    """Arcade window wired to a Session"""

    def __init__(self, session: Session, interactive: bool = True):
        cfg = session.config
        super().__init__(int(cfg.width), int(cfg.height), "Airplane Fighter - Arcade")
        self.session = session
        self.interactive = interactive
        self._armed = False

    # ----------------------------
    # Timer
    # ----------------------------

    def start(self) -> None:
        self.session.start_session()
        if self.interactive and not self._armed:
            arcade.schedule(self._on_tick, self.session.config.tick_interval)
            self._armed = True

    def _disarm(self) -> None:
        if self._armed:
            arcade.unschedule(self._on_tick)
            self._armed = False

    def _on_tick(self, delta_time: float) -> None:
        # one callback, one step: no catch-up on late timers
        state = self.session.tick()
        if not state.is_playing:
            self._disarm()

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, key, modifiers):
        if key in START_KEYS and self.interactive and not self.session.is_playing:
            self.start()
            return
        action = KEY_BINDINGS.get(key)
        if action is not None:
            self.session.press(action)

    def on_key_release(self, key, modifiers):
        action = KEY_BINDINGS.get(key)
        if action is not None:
            self.session.release(action)

    # ----------------------------
    # Rendering
    # ----------------------------

    def on_draw(self):
        self.clear(color=BG)
        draw_state(self.session.state, self.session.config)

    def on_close(self):
        self._disarm()
        super().on_close()


def play() -> None:
    """Open the window and hand control to arcade's event loop"""
    FighterWindow(Session())
    arcade.run()


if __name__ == "__main__":
    play()
