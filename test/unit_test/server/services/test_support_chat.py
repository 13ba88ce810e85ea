"""Unit tests for the scripted support replies."""

import pytest

from mylife_companion.server.services.support_chat import DEFAULT_REPLY, REPLY_RULES, reply_for


class TestReplyFor:
    @pytest.mark.parametrize(
        "message, rule_index",
        [
            ("I am so SAD today", 0),
            ("feeling depressed", 0),
            ("Exams make me stressed", 1),
            ("I'm anxious about tomorrow", 1),
            ("Today was a good day", 2),
            ("I need some advice", 3),
        ],
    )
    def test_keyword_rules(self, message, rule_index):
        assert reply_for(message) == REPLY_RULES[rule_index][1]

    def test_first_matching_rule_wins(self):
        # both "sad" and "happy" appear; the sad rule is listed first
        assert reply_for("happy but also sad") == REPLY_RULES[0][1]

    def test_default_reply(self):
        assert reply_for("Just checking in") == DEFAULT_REPLY
        assert reply_for("") == DEFAULT_REPLY
