"""
Slack Formatter

Turns submit outcomes into Slack slash-command replies.
"""

from typing import Any, Dict, List, Optional, Union
from ..models.game import LetterStatus, OutcomeKind, SubmitOutcome
from .game_session import GameSession

# U+200E left-to-right mark
TILE_SEPARATOR = "\u200e"

STATUS_EMOJI = {
    LetterStatus.FULL: ":large_green_circle:",
    LetterStatus.PARTIAL: ":large_orange_circle:",
    LetterStatus.NONE: ":white_circle:",
}

SlackReply = Union[str, Dict[str, Any]]


def format_attempt(session: GameSession, attempt: str, abstract: bool = False) -> str:
    """
    Renders one attempt against the session word.

    Args:
        session: Game the attempt belongs to
        attempt: Guess text
        abstract: Emoji tiles when True, otherwise letters (``*X*`` full,
            ``X`` partial, ``x`` absent)
    """
    tiles = []
    for letter, status in session.evaluate(attempt):
        if abstract:
            tiles.append(STATUS_EMOJI[status])
        elif status == LetterStatus.FULL:
            tiles.append(f"*{letter}*")
        elif status == LetterStatus.PARTIAL:
            tiles.append(letter)
        else:
            tiles.append(letter.lower())
    return TILE_SEPARATOR.join(tiles)


def _attempt_lines(session: GameSession, attempts: List[str]) -> str:
    return "\n>".join(
        f"{format_attempt(session, attempt, True)} - {format_attempt(session, attempt)}"
        for attempt in attempts
    )


def _section(text: str) -> Dict[str, Any]:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def winner_reply(session: GameSession, user_name: str, attempts: List[str]) -> Dict[str, Any]:
    """Channel-wide announcement of the winner and today's players."""
    tiles = "\n>".join(format_attempt(session, attempt, True) for attempt in attempts)
    players = session.players
    return {
        "response_type": "in_channel",
        "blocks": [
            _section(f"The winner is <@{user_name}> with *{session.word}*! :tada: \n>{tiles}"),
            _section(
                f"Today's players ({len(players)}): " + " ".join(f"<@{p}>" for p in players)
            ),
        ],
    }


def final_attempt_reply(session: GameSession, attempts: List[str]) -> Dict[str, Any]:
    return {
        "type": "mrkdwn",
        "text": f"Sorry, you have run out of guesses. The answer is *{session.word}*: \n>"
                f"{_attempt_lines(session, attempts)}",
    }


def guesses_reply(session: GameSession, attempts: List[str]) -> Dict[str, Any]:
    return {
        "type": "mrkdwn",
        "text": f"Your guesses: \n>{_attempt_lines(session, attempts)}",
    }


def invalid_guess_reply(guess: Optional[str]) -> str:
    return f"Invalid guess: {guess or ''}"


def attempts_exhausted_reply() -> str:
    return "Sorry, you have run out of guesses for today."


def game_finished_reply(word: str, winner: Optional[str]) -> str:
    if winner:
        return f"The game is finished, the winner is <@{winner}>\n>Answer: {word}"
    return f"The game is finished.\n>Answer: {word}"


def not_started_reply(start_hour: int, start_minute: int) -> str:
    """e.g. ``The game starts at 9:30AM :sunrise: :bird:``"""
    suffix = "AM" if start_hour < 12 else "PM"
    hour = start_hour % 12 or 12
    return f"The game starts at {hour}:{start_minute:02d}{suffix} :sunrise: :bird:"


def error_reply() -> str:
    return "Something went wrong, please contact <@devs>"


def render_outcome(outcome: SubmitOutcome, session: GameSession, user_name: str) -> SlackReply:
    """
    Builds the reply for a submit outcome.

    Returns:
        Plain text for failures, a Slack message payload for accepted guesses
    """
    if outcome.kind == OutcomeKind.ACCEPTED:
        if outcome.is_correct:
            return winner_reply(session, user_name, outcome.attempts)
        if outcome.is_final_attempt:
            return final_attempt_reply(session, outcome.attempts)
        return guesses_reply(session, outcome.attempts)
    if outcome.kind == OutcomeKind.INVALID_GUESS:
        return invalid_guess_reply(outcome.guess)
    if outcome.kind == OutcomeKind.ATTEMPTS_EXHAUSTED:
        return attempts_exhausted_reply()
    if outcome.kind == OutcomeKind.GAME_FINISHED:
        return game_finished_reply(outcome.word, outcome.winner)
    raise ValueError(f"Unknown outcome kind: {outcome.kind}")
