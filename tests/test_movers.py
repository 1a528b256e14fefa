"""Tests for the player, projectile and enemy movers."""

from __future__ import annotations

import random

import pytest

from game.fighter.entities import EnemyCraft, InputIntent, Player, Projectile
from game.fighter.movers import move_player, update_enemies, update_projectiles


pytestmark = pytest.mark.unit

FIRE = InputIntent(fire=True)
IDLE = InputIntent()


# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------

class TestMovePlayer:
    def test_no_intent_keeps_position(self, config):
        assert move_player(Player(50, 80), IDLE, config) == Player(50, 80)

    def test_single_direction(self, config):
        assert move_player(Player(50, 80), InputIntent(move_left=True), config) == Player(45, 80)
        assert move_player(Player(50, 80), InputIntent(move_up=True), config) == Player(50, 75)

    def test_diagonal_is_full_speed_on_both_axes(self, config):
        moved = move_player(Player(50, 80), InputIntent(move_right=True, move_down=True), config)
        assert moved == Player(55, 85)

    def test_opposite_directions_cancel(self, config):
        moved = move_player(Player(50, 80), InputIntent(move_left=True, move_right=True), config)
        assert moved == Player(50, 80)

    def test_clamps_at_origin(self, config):
        moved = move_player(Player(2, 3), InputIntent(move_left=True, move_up=True), config)
        assert moved == Player(0, 0)

    def test_clamps_box_inside_far_edges(self, config):
        moved = move_player(Player(358, 559), InputIntent(move_right=True, move_down=True), config)
        assert moved == Player(config.width - config.player_width, config.height - config.player_height)

    def test_random_walk_stays_inside_field(self, config):
        r = random.Random(99)
        player = Player(*config.player_spawn)
        for _ in range(2000):
            intent = InputIntent(*(r.random() < 0.5 for _ in range(5)))
            player = move_player(player, intent, config)
            assert 0 <= player.x and player.x + config.player_width <= config.width
            assert 0 <= player.y and player.y + config.player_height <= config.height


# ---------------------------------------------------------------------------
# Projectiles
# ---------------------------------------------------------------------------

class TestUpdateProjectiles:
    def test_moves_up_by_bullet_speed(self, config, ids):
        out = update_projectiles((Projectile(1, 10, 100),), Player(50, 80), IDLE, config, ids)
        assert out == (Projectile(1, 10, 93),)

    def test_drops_projectiles_leaving_the_top(self, config, ids):
        out = update_projectiles(
            (Projectile(1, 10, 7), Projectile(2, 10, 7.5)),
            Player(50, 80), IDLE, config, ids,
        )
        assert [p.id for p in out] == [2]
        assert out[0].y == pytest.approx(0.5)

    def test_fire_spawns_one_at_muzzle(self, config, ids):
        out = update_projectiles((), Player(50, 80), FIRE, config, ids)
        assert len(out) == 1
        assert (out[0].x, out[0].y) == (50 + 40 / 2 - 5 / 2, 80)
        assert out[0].id == 1000

    def test_fire_below_cap_adds_exactly_one(self, config, ids):
        existing = tuple(Projectile(i, 10, 300) for i in range(4))
        out = update_projectiles(existing, Player(50, 80), FIRE, config, ids)
        assert len(out) == 5

    def test_fire_at_cap_adds_nothing(self, config, ids):
        existing = tuple(Projectile(i, 10, 300) for i in range(5))
        out = update_projectiles(existing, Player(50, 80), FIRE, config, ids)
        assert [p.id for p in out] == [0, 1, 2, 3, 4]

    def test_cap_counts_survivors_after_despawn(self, config, ids):
        existing = (Projectile(0, 10, 5),) + tuple(Projectile(i, 10, 300) for i in range(1, 5))
        out = update_projectiles(existing, Player(50, 80), FIRE, config, ids)
        assert len(out) == 5
        assert 0 not in [p.id for p in out]

    def test_new_projectile_skips_same_tick_despawn(self, config, ids):
        # muzzle at y=0 would fail the y > 0 filter if it ran after spawning
        out = update_projectiles((), Player(50, 0), FIRE, config, ids)
        assert len(out) == 1
        assert out[0].y == 0

    def test_zero_cap_never_fires(self, config, ids):
        cfg = config.with_overrides(max_bullets=0)
        assert update_projectiles((), Player(50, 80), FIRE, cfg, ids) == ()

    def test_input_is_not_mutated(self, config, ids):
        existing = (Projectile(1, 10, 100),)
        update_projectiles(existing, Player(50, 80), FIRE, config, ids)
        assert existing == (Projectile(1, 10, 100),)


# ---------------------------------------------------------------------------
# Enemies
# ---------------------------------------------------------------------------

class TestUpdateEnemies:
    def test_moves_down_by_enemy_speed(self, config, rng, ids):
        out = update_enemies((EnemyCraft(1, 10, 100),), config, rng, ids)
        assert out == (EnemyCraft(1, 10, 103),)

    def test_drops_enemies_leaving_the_bottom(self, config, rng, ids):
        out = update_enemies(
            (EnemyCraft(1, 10, 597), EnemyCraft(2, 10, 596)),
            config, rng, ids,
        )
        assert [e.id for e in out] == [2]
        assert out[0].y == 599

    def test_no_spawn_when_probability_is_zero(self, config, rng, ids):
        for _ in range(200):
            assert update_enemies((), config, rng, ids) == ()

    def test_spawn_at_top_edge_within_width(self, config, rng, ids):
        cfg = config.with_overrides(p_spawn=1.0)
        for _ in range(200):
            (enemy,) = update_enemies((), cfg, rng, ids)
            assert enemy.y == -cfg.enemy_height
            assert 0 <= enemy.x <= cfg.width - cfg.enemy_width

    def test_single_trial_per_tick(self, config, rng, ids):
        cfg = config.with_overrides(p_spawn=1.0)
        existing = tuple(EnemyCraft(i, 10 * i, 100) for i in range(3))
        out = update_enemies(existing, cfg, rng, ids)
        assert len(out) == 4

    def test_spawned_ids_come_from_counter(self, config, rng, ids):
        cfg = config.with_overrides(p_spawn=1.0)
        first = update_enemies((), cfg, rng, ids)
        second = update_enemies(first, cfg, rng, ids)
        assert [e.id for e in second] == [1000, 1001]
