from conftest import make_issue

from pullsbot.constants import NO_PRS_MESSAGE
from pullsbot.slack_handlers import handle_mention_text


def mention(brain, text, issues=(), user_id="U123"):
    said = []
    handle_mention_text(text, user_id, brain, lambda: list(issues), said.append)
    return said


def test_mention_without_trigger_is_ignored(brain):
    assert mention(brain, "<@UBOT> hello there") == []


def test_unknown_command_echoes_text_without_mention(brain):
    assert mention(brain, "<@UBOT> pullsfoo") == ["Error: Unknown command `pullsfoo`"]


def test_trigger_word_is_echoed_in_hints(brain):
    assert mention(brain, "<@UBOT> PRS details infra") == [
        "Error: Team does not exist. See `PRS new team infra`."
    ]


def test_register_says_every_reply(brain):
    said = mention(brain, "<@UBOT> pulls username alice", user_id="U42")

    assert said == [
        "Github username registered: `alice`! From now on, just type 'pulls' to see your issues.",
        NO_PRS_MESSAGE,
    ]
    assert brain.get("U42") == ["alice"]


def test_report_for_own_profile(brain):
    brain.set("U123", ["alice"])
    issues = [make_issue(repo="core", author="alice", number=5)]

    assert mention(brain, "<@UBOT> pulls", issues) == [
        "*core*\n - <https://github.com/acme/core/pull/5|Fix things> (PR -> alice)"
    ]
