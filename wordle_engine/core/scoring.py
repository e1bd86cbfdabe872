"""
Guess Scoring

Letter evaluation for a single guess and the keyboard hints derived from
every guess made so far.
"""

from typing import Dict, List, Optional, Sequence

from ..config.game_settings import ALPHABET
from ..models.game import LetterStatus

# Higher value wins when several occurrences of a key disagree
_KEY_PRIORITY = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


def score_guess(guess: str, target: str) -> List[LetterStatus]:
    """
    Evaluates each letter of ``guess`` against ``target``.

    A letter in the right position is CORRECT. Otherwise it is PRESENT when
    the target contains it anywhere and ABSENT when it does not. Repeated
    letters are not count-limited: every misplaced occurrence of a letter
    found in the target is PRESENT, even if the target holds it only once.

    Raises:
        ValueError: If the two words differ in length
    """
    if len(guess) != len(target):
        raise ValueError(
            f"Guess '{guess}' and target must have the same length "
            f"({len(guess)} != {len(target)})"
        )

    result = []
    for position, letter in enumerate(guess):
        if letter == target[position]:
            result.append(LetterStatus.CORRECT)
        elif letter in target:
            result.append(LetterStatus.PRESENT)
        else:
            result.append(LetterStatus.ABSENT)
    return result


def aggregate_key_status(letter: str, guesses: Sequence[str], target: str) -> Optional[LetterStatus]:
    """
    Best information seen so far for one keyboard key.

    Every occurrence of ``letter`` across ``guesses`` is scored and the
    strongest status wins (CORRECT > PRESENT > ABSENT). Returns None when the
    letter was never guessed.
    """
    best: Optional[LetterStatus] = None
    for guess in guesses:
        if letter not in guess:
            continue
        statuses = score_guess(guess, target)
        for position, guessed in enumerate(guess):
            if guessed != letter:
                continue
            status = statuses[position]
            if best is None or _KEY_PRIORITY[status] > _KEY_PRIORITY[best]:
                best = status
            if best is LetterStatus.CORRECT:
                return best
    return best


def keyboard_statuses(guesses: Sequence[str], target: str) -> Dict[str, Optional[LetterStatus]]:
    """Key status for every letter A-Z. Unused keys map to None."""
    return {letter: aggregate_key_status(letter, guesses, target) for letter in ALPHABET}
