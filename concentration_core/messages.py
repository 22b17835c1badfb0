EXIT_KEYWORD = "quit"
AFFIRMATIVE_RESPONSE = "yes"
NEGATIVE_RESPONSE = "no"

INPUT_INSTRUCTIONS = (
    f'Enter the row-column pair of two cards to flip, or type "{EXIT_KEYWORD}" to end the game.'
)
INPUT_EXAMPLE = 'Example: "(0, 0) (0, 1)" or "0 0 0 1"'
INPUT_SUGGESTION = "Please choose two different, available cards as an ordered pair."
MATCH_MADE = "You made a match! This pair will be removed."
NO_MATCH = f'No match found. Please try again or type "{EXIT_KEYWORD}" to exit.'
GAME_OVER_MESSAGE = "Game Over."
GAME_WON_MESSAGE = "You Won!"
REPLAY_PROMPT = (
    f'Would you like to play again? "{AFFIRMATIVE_RESPONSE}" or "{NEGATIVE_RESPONSE}"'
)
INPUT_PROMPT = "Input: "
ANSWER_PROMPT = "Answer: "
INVALID_INPUT = "Invalid input!"


def flipping(first, second) -> str:
    return f"Flipping cards at ({first[0]}, {first[1]}) and ({second[0]}, {second[1]})..."


def input_error(message: str) -> str:
    return f"\n{message}\n{INPUT_SUGGESTION}\n{INPUT_EXAMPLE}\n"


def summary(moves: int, matches: int) -> str:
    move_word = "move" if moves == 1 else "moves"
    match_word = "match" if matches == 1 else "matches"
    return f"You made {moves} {move_word} and {matches} {match_word}."
