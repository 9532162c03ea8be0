from hanabi_rules.hanabi_card import HanabiCard
from hanabi_rules.hanabi_deck import HanabiDeck
from hanabi_rules.hanabi_env import HanabiEnv
from hanabi_rules.hanabi_game import HanabiGame
from hanabi_rules.hanabi_hand import CardKnowledge, HanabiHand, ValueKnowledge
from hanabi_rules.hanabi_history_item import HanabiHistoryItem
from hanabi_rules.hanabi_move import HanabiMove
from hanabi_rules.hanabi_state import CHANCE_PLAYER, ChancePlayer, EndOfGameType, HanabiState
from hanabi_rules.hanabi_state_editor import HanabiStateEditor
from hanabi_rules.util import HanabiRequirementError
