"""Tests for inventory helpers."""

from src.core.item.inventory import (
    calculate_current_weight,
    can_add_item,
    format_item_names,
    weapon_indices,
)
from src.core.item.models import Item, Weapon


class TestInventory:
    def test_weapon_indices_skip_items(self, torch: Item, dagger: Weapon, longsword: Weapon):
        inventory = [torch, dagger, torch, longsword]
        assert weapon_indices(inventory) == [1, 3]

    def test_weapon_indices_empty(self):
        assert weapon_indices([]) == []

    def test_format_item_names(self, torch: Item, dagger: Weapon):
        assert format_item_names([]) == "None"
        assert format_item_names([dagger, torch]) == "Dagger, Torch"

    def test_weight(self, torch: Item, longsword: Weapon):
        assert calculate_current_weight([torch, longsword]) == 6.5
        assert can_add_item(6.5, 15, 8.5)
        assert not can_add_item(6.5, 15, 9.0)

    def test_player_carry_capacity(self, player, longsword: Weapon):
        # physique 1 → 15
        player.inventory.extend([longsword, longsword])
        assert player.carried_weight() == 12.0
        assert player.can_carry(Item("Rock", 3.0, 0))
        assert not player.can_carry(longsword)
