"""Quincy RPG Core Engine"""
__version__ = "0.2.0"

from src.core.stats import Stats
from src.core.item.models import Item, Weapon, InventoryEntry, unarmed
from src.core.combat import Attacker, Defender, BattleOutcome, Battle, BattleState, resolve
from src.core.player import Player
from src.core.enemy import Enemy
