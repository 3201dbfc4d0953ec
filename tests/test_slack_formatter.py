import pytest

from slack_wordle.models.game import AttemptsExhausted, GameFinished, GuessAccepted, InvalidGuess
from slack_wordle.services import slack_formatter
from slack_wordle.services.game_session import GameSession

GREEN = ":large_green_circle:"
ORANGE = ":large_orange_circle:"
WHITE = ":white_circle:"
SEP = "\u200e"


@pytest.fixture
def session():
    return GameSession("novel", {"another-player": ["weird"]})


def test_format_attempt_letters(session):
    assert slack_formatter.format_attempt(session, "HELLO") == SEP.join(["h", "E", "L", "l", "O"])
    assert slack_formatter.format_attempt(session, "NOVEL") == SEP.join(["*N*", "*O*", "*V*", "*E*", "*L*"])


def test_format_attempt_emoji(session):
    assert slack_formatter.format_attempt(session, "HELLO", abstract=True) == SEP.join(
        [WHITE, ORANGE, ORANGE, WHITE, ORANGE]
    )


def test_guesses_reply(session):
    reply = slack_formatter.guesses_reply(session, ["HELLO"])
    assert reply == {
        "type": "mrkdwn",
        "text": "Your guesses: \n>"
                + SEP.join([WHITE, ORANGE, ORANGE, WHITE, ORANGE])
                + " - " + SEP.join(["h", "E", "L", "l", "O"]),
    }


def test_final_attempt_reply_reveals_answer(session):
    reply = slack_formatter.final_attempt_reply(session, ["HELLO", "WORLD", "MELLO"])
    assert reply["type"] == "mrkdwn"
    assert reply["text"].startswith("Sorry, you have run out of guesses. The answer is *NOVEL*: \n>")
    assert reply["text"].count("\n>") == 3


def test_winner_reply(session):
    session.submit("csk", "NOVEL")
    reply = slack_formatter.winner_reply(session, "csk", ["NOVEL"])
    assert reply == {
        "response_type": "in_channel",
        "blocks": [
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": "The winner is <@csk> with *NOVEL*! :tada: \n>" + SEP.join([GREEN] * 5),
                },
            },
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": "Today's players (2): <@another-player> <@csk>",
                },
            },
        ],
    }


def test_game_finished_reply():
    assert slack_formatter.game_finished_reply("NOVEL", "csk") == \
        "The game is finished, the winner is <@csk>\n>Answer: NOVEL"
    assert slack_formatter.game_finished_reply("NOVEL", None) == "The game is finished.\n>Answer: NOVEL"


@pytest.mark.parametrize("hour,minute,expected", [
    (9, 30, "The game starts at 9:30AM :sunrise: :bird:"),
    (13, 5, "The game starts at 1:05PM :sunrise: :bird:"),
    (0, 0, "The game starts at 12:00AM :sunrise: :bird:"),
])
def test_not_started_reply(hour, minute, expected):
    assert slack_formatter.not_started_reply(hour, minute) == expected


def test_render_outcome_dispatches_on_kind(session):
    assert slack_formatter.render_outcome(
        InvalidGuess(guess="ABC", expected_length=5), session, "csk"
    ) == "Invalid guess: ABC"
    assert slack_formatter.render_outcome(
        InvalidGuess(guess=None, expected_length=5), session, "csk"
    ) == "Invalid guess: "
    assert slack_formatter.render_outcome(
        AttemptsExhausted(user_id="csk", max_attempts=3), session, "csk"
    ) == "Sorry, you have run out of guesses for today."
    assert slack_formatter.render_outcome(
        GameFinished(word="NOVEL", winner="bob"), session, "csk"
    ) == "The game is finished, the winner is <@bob>\n>Answer: NOVEL"

    accepted = GuessAccepted(is_correct=False, attempts=["HELLO"], is_final_attempt=False)
    assert slack_formatter.render_outcome(accepted, session, "csk")["text"].startswith("Your guesses")

    final = GuessAccepted(is_correct=False, attempts=["HELLO", "WORLD", "MELLO"], is_final_attempt=True)
    assert slack_formatter.render_outcome(final, session, "csk")["text"].startswith("Sorry")

    won = GuessAccepted(is_correct=True, attempts=["NOVEL"], is_final_attempt=False)
    assert slack_formatter.render_outcome(won, session, "csk")["response_type"] == "in_channel"
