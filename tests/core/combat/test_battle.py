"""Tests for the turn-based battle loop."""

from src.cli.prompt import ScriptedPrompt
from src.core.combat.battle import (
    ENEMY_DEFEATED_MESSAGE,
    FLEE_SUCCESS_MESSAGE,
    ITEM_BLOCKED_MESSAGE,
    PLAYER_DEFEATED_MESSAGE,
    Battle,
    BattleAction,
    BattleState,
    attack_round,
    check_state,
)
from src.core.enemy import Enemy
from src.core.player import Player
from src.core.stats import Stats


class TestCheckState:
    def test_ongoing(self, player: Player, rabbit: Enemy):
        assert check_state(player, rabbit) is BattleState.ONGOING

    def test_player_defeat_checked_first(self, player: Player, rabbit: Enemy):
        player.health = 0
        rabbit.health = 0
        assert check_state(player, rabbit) is BattleState.PLAYER_DEFEATED

    def test_enemy_defeated(self, player: Player, rabbit: Enemy):
        rabbit.health = -3
        assert check_state(player, rabbit) is BattleState.ENEMY_DEFEATED


class TestAttackRound:
    def test_enemy_strikes_first_on_tie(self, player: Player, rabbit: Enemy):
        outcomes = attack_round(player, rabbit)
        assert [o.attacker.name for o in outcomes] == ["Rabbit", "Quincy"]

    def test_faster_player_strikes_first(self, rabbit: Enemy):
        player = Player.create("Quincy", Stats(1, 3, 1))
        outcomes = attack_round(player, rabbit)
        assert [o.attacker.name for o in outcomes] == ["Quincy", "Rabbit"]

    def test_second_striker_skipped_when_dead(self):
        player = Player.create("Quincy", Stats(10, 1, 1))
        enemy = Enemy("Rabbit").with_stats(1, 1, 1)
        enemy.health = 5
        # 적 선공(technique 동률) → 플레이어 반격 9 → 적 사망, 끝
        outcomes = attack_round(player, enemy)
        assert len(outcomes) == 2

        player = Player.create("Quincy", Stats(10, 2, 1))
        enemy = Enemy("Rabbit").with_stats(1, 1, 1)
        enemy.health = 5
        outcomes = attack_round(player, enemy)
        assert len(outcomes) == 1
        assert enemy.health < 1

    def test_player_killed_by_first_strike(self, player: Player):
        ogre = Enemy("Ogre").with_stats(50, 5, 0)
        outcomes = attack_round(player, ogre)
        assert len(outcomes) == 1
        assert player.health < 1


class TestBattle:
    def test_attack_until_enemy_defeated(self):
        player = Player.create("Quincy", Stats(10, 1, 1))
        rabbit = Enemy("Rabbit").with_stats(1, 1, 1)
        prompt = ScriptedPrompt([0, 0, 0, 0])

        state = Battle(player, rabbit, prompt).run()

        # 32 → 23 → 14 → 5 → -4
        assert state is BattleState.ENEMY_DEFEATED
        assert rabbit.health == -4
        assert prompt.remaining == 0
        assert prompt.messages[-1].endswith(ENEMY_DEFEATED_MESSAGE)

    def test_flee_never_ends_scripted_battle(self):
        player = Player.create("Quincy", Stats(10, 1, 1))
        rabbit = Enemy("Rabbit").with_stats(1, 1, 1)
        prompt = ScriptedPrompt([2, 2, 1, 0, 0, 0, 0])

        battle = Battle(player, rabbit, prompt)
        state = battle.run()

        assert state is BattleState.ENEMY_DEFEATED
        assert ITEM_BLOCKED_MESSAGE in prompt.messages
        assert any("try to flee" in m for m in prompt.messages)
        assert battle.turns == 7

    def test_player_defeated(self, player: Player):
        ogre = Enemy("Ogre").with_stats(40, 1, 1)
        prompt = ScriptedPrompt([0])

        state = Battle(player, ogre, prompt).run()

        assert state is BattleState.PLAYER_DEFEATED
        assert prompt.messages[-1].endswith(PLAYER_DEFEATED_MESSAGE)

    def test_already_defeated_enemy_ends_immediately(self, player: Player, rabbit: Enemy):
        rabbit.health = 0
        prompt = ScriptedPrompt([])
        assert Battle(player, rabbit, prompt).run() is BattleState.ENEMY_DEFEATED
        assert prompt.screens == []

    def test_flee_allowed(self, player: Player, rabbit: Enemy):
        prompt = ScriptedPrompt([BattleAction.FLEE.value])
        state = Battle(player, rabbit, prompt, allow_flee=True).run()
        assert state is BattleState.FLED
        assert FLEE_SUCCESS_MESSAGE in prompt.messages

    def test_log_records_every_exchange(self):
        player = Player.create("Quincy", Stats(10, 1, 1))
        rabbit = Enemy("Rabbit").with_stats(1, 1, 1)
        battle = Battle(player, rabbit, ScriptedPrompt([0, 0, 0, 0]))
        battle.run()
        # 3라운드 x 2 + 마지막 라운드 (적 선공 → 플레이어 반격)
        assert len(battle.log) == 8
        assert sum(o.damage for o in battle.log if o.defender is rabbit) == 36

    def test_screen_shows_hp(self, player: Player, rabbit: Enemy):
        battle = Battle(player, rabbit, ScriptedPrompt())
        screen = battle.render()
        assert "Rabbit HP: 32" in screen
        assert f"HP: {player.health}" in screen
        assert "(Strikes first)" in screen
