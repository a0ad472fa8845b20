"""메뉴/상점/장비 대화 흐름

상태 변경은 Core 함수(buy/sell/equip_swap)에 위임하고,
여기서는 ChoicePrompt로 선택을 받아 결과 메시지만 보여준다.
"""

from __future__ import annotations

from src.core.choice import QUIT, ChoicePrompt
from src.core.item.equip import equip_swap
from src.core.item.inventory import weapon_indices
from src.core.item.models import Weapon
from src.core.item.trade import NOT_SELLABLE_MESSAGE, buy, sell
from src.core.logging import get_logger
from src.core.player import Player
from src.core.stats import STAT_NAMES, Stats, allocate_point
from src.services.catalog.base import ContentCatalog
from src.services.game_service import GameService

logger = get_logger(__name__)

EMPTY_SHOP_MESSAGE = "Me shelves be empty! Come back another day."

TITLE = "*_*_*_*_*_*_*_*_*_*_*\nWelcome to Quincy RPG\n*_*_*_*_*_*_*_*_*_*_*\n"
MAIN_OPTIONS = ["New Game", "Load Game", "View Character", "Options", "Exit"]
TOWN_OPTIONS = ["Shop", "Equipment", "Hunt", "View Character", "Save"]

STAT_HELP = (
    "Physique: Physical Damage, and major for Combat type people.\n"
    "Technique: Technical Damage, and major for Agile type people.\n"
    "Mystique: Mystical Damage, and major for Magic type people.\n"
)


# === 캐릭터 생성 ===


def creation_screen(stats: Stats, points: int, total_points: int) -> str:
    if points == total_points:
        question = "Where do you want your first point to go?\n"
    elif points > 1:
        question = "Where do you want the next point to go?\n"
    else:
        question = "Where do you want the last point to go?\n"
    return (
        f"{STAT_HELP}{question}"
        f"Max Health: {stats.max_health()}\n"
        f"Max Stamina: {stats.max_stamina()}\n"
        f"Max Mana: {stats.max_mana()}\n"
        f"Points left: {points}\n"
        "Choose Stats: "
    )


def create_character(prompt: ChoicePrompt, points: int = 5) -> tuple[str, Stats]:
    """이름 입력 + (1, 1, 1)에서 시작해 포인트를 1개씩 배분."""
    name = ""
    while not name:
        name = prompt.ask("What is the name of your character?")

    stats = Stats(1, 1, 1)
    remaining = points
    while remaining > 0:
        selection = prompt.choose(
            creation_screen(stats, remaining, points), list(STAT_NAMES)
        )
        allocate_point(stats, selection)
        remaining -= 1
    return name, stats


# === 상점 ===


class ShopFlow:
    """상점: 구매 / 판매 (무기만)"""

    def __init__(self, player: Player, catalog: ContentCatalog, prompt: ChoicePrompt):
        self.player = player
        self.catalog = catalog
        self.prompt = prompt

    def run(self) -> Player:
        while True:
            selection = self.prompt.choose(
                "Welcome to ye ol' shoppe! What must ye be buyin, or sellin?..",
                ["Buy", "Sell"],
                allow_quit=True,
            )
            if selection == 0:
                self.buy_menu()
            elif selection == 1:
                self.sell_menu()
            else:
                self.prompt.pause("Cya later buddy!")
                break
        return self.player

    def buy_menu(self) -> None:
        weapons = self.catalog.list_weapons()
        if not weapons:
            self.prompt.pause(EMPTY_SHOP_MESSAGE)
            return

        while True:
            header = (
                "What ye be wantin to buy?\n"
                "Here are thee weapons I have to offer ye'!\n"
                f"Ye have ${self.player.money}.\n"
                f"Your inventory [{self.player.item_names()}]."
            )
            selection = self.prompt.choose(header, weapons, allow_quit=True)
            if selection == QUIT:
                break

            weapon = weapons[selection]
            if self.prompt.confirm(f"Ye want to buy a {weapon}, for ${weapon.value}?"):
                result = buy(self.player, weapon)
                self.prompt.pause(result.message)

    def sell_menu(self) -> None:
        if not self.player.inventory:
            self.prompt.pause("Ye can't sell, if ye has no valuables!")
            return

        while self.player.inventory:
            selection = self.prompt.choose(
                f"What're ye sellin'!\nYour money ${self.player.money}",
                self.player.inventory,
                allow_quit=True,
            )
            if selection == QUIT:
                break

            entry = self.player.inventory[selection]
            if not isinstance(entry, Weapon):
                self.prompt.pause(NOT_SELLABLE_MESSAGE)
                continue

            answer = self.prompt.choose(
                f"I'll take ye, {entry.name} for ${entry.value}\n"
                "Ye be sure, ye want to sell thee?",
                ["yes", "no"],
                allow_quit=True,
            )
            if answer == 0:
                sell(self.player, selection)


# === 장비 ===


def equip_menu(player: Player, prompt: ChoicePrompt) -> Player:
    """장착 무기 교체. 인벤토리가 비어 있으면 아무것도 하지 않음."""
    if not player.inventory:
        return player

    while True:
        header = (
            "Do you want to change your equipped weapon?\n"
            f"Your current one is: {player.equipped}\n"
        )
        if prompt.choose(header, ["yes", "no"], allow_quit=True) != 0:
            break

        candidates = weapon_indices(player.inventory)
        if not candidates:
            prompt.pause("You have no weapons to switch to.")
            break

        options = [player.inventory[i] for i in candidates]
        selection = prompt.choose("Switch to which weapon?", options, allow_quit=True)
        if selection == QUIT:
            continue

        weapon = equip_swap(player, candidates[selection])
        prompt.pause(f"Swapped to the {weapon.name}!")
    return player


# === 메뉴 ===


def town_menu(service: GameService, player: Player) -> Player:
    prompt = service.prompt
    while True:
        header = f"{player.name} | HP {player.health} | ${player.money}\nWhat now?"
        selection = prompt.choose(header, TOWN_OPTIONS, allow_quit=True)
        if selection == QUIT:
            break
        if selection == 0:
            ShopFlow(player, service.catalog, prompt).run()
        elif selection == 1:
            equip_menu(player, prompt)
        elif selection == 2:
            service.hunt(player)
        elif selection == 3:
            prompt.pause(str(player))
        else:
            prompt.pause(service.save_player(player).message)
    return player


def main_menu(service: GameService, creation_points: int = 5) -> None:
    prompt = service.prompt
    while True:
        selection = prompt.choose(TITLE, MAIN_OPTIONS)

        if selection == 0:
            name, stats = create_character(prompt, creation_points)
            player = service.new_player(name, stats)
            result = service.save_player(player)
            prompt.pause("Character created!" if result.success else result.message)
            player = service.run_story(player)
            town_menu(service, player)

        elif selection == 1:
            slot = prompt.ask("What character do you want to load?")
            result = service.load_player(slot)
            if not result.success:
                prompt.pause(result.message)
                continue
            prompt.pause(str(result.player))
            player = service.run_story(result.player)
            town_menu(service, player)

        elif selection == 2:
            slot = prompt.ask("What character do you want to load?")
            result = service.load_player(slot)
            prompt.pause(str(result.player) if result.success else result.message)

        elif selection == 3:
            prompt.pause("options")

        else:
            logger.info("Exit selected")
            break
