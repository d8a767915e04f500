"""
uno_engine/constants.py

Defines card colors, values, deck composition, and rule messages for the UNO engine.
"""

# Card Colors (String representation)
RED = "Red"
YELLOW = "Yellow"
GREEN = "Green"
BLUE = "Blue"

"""Wild cards carry the Wild pseudo-color until played"""
WILD = "Wild"

SUIT_COLORS = [RED, YELLOW, GREEN, BLUE]
ALL_COLORS = SUIT_COLORS + [WILD]

# Card Values (String representation)
ZERO = "Zero"
ONE = "One"
TWO = "Two"
THREE = "Three"
FOUR = "Four"
FIVE = "Five"
SIX = "Six"
SEVEN = "Seven"
EIGHT = "Eight"
NINE = "Nine"
SKIP = "Skip"
REVERSE = "Reverse"
DRAW_TWO = "Draw Two"
WILD_CARD = "Wild"
WILD_DRAW_FOUR = "Wild Draw Four"

NUMBER_VALUES = [ZERO, ONE, TWO, THREE, FOUR, FIVE, SIX, SEVEN, EIGHT, NINE]
ACTION_VALUES = [SKIP, REVERSE, DRAW_TWO]
WILD_VALUES = [WILD_CARD, WILD_DRAW_FOUR]
COLORED_VALUES = NUMBER_VALUES + ACTION_VALUES
ALL_VALUES = COLORED_VALUES + WILD_VALUES


# --- Deck Composition ---
COPIES_PER_COLORED_VALUE = 2
"""Each colored value except Zero appears twice per color."""

COPIES_OF_ZERO = 1

COPIES_PER_WILD_VALUE = 4
"""Four Wild and four Wild Draw Four cards."""

INITIAL_HAND_SIZE = 7
"""Number of cards dealt to each player at the start of a game."""


# --- Rule Messages ---
NOT_PARTICIPANT_MESSAGE = "You cannot participate in a game you do not belong"
NOT_YOUR_TURN_MESSAGE = "It is not your turn to play"
