"""
Scripted emotional support replies.

Replies are chosen by keyword; the first matching rule wins, and a generic
listening reply covers everything else.
"""

from __future__ import annotations

from typing import Tuple

REPLY_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (
        ("sad", "depressed"),
        "I'm sorry to hear that you're feeling down. Remember that it's okay to have these feelings. "
        "Would you like to talk more about what's causing this, or would you like some suggestions "
        "for activities that might help lift your mood?",
    ),
    (
        ("stress", "anxious"),
        "Dealing with stress can be challenging. Let's take a moment to breathe together. "
        "Inhale deeply for 4 counts, hold for 4, and exhale for 6. "
        "Would it help to talk about what's causing your anxiety?",
    ),
    (
        ("happy", "good"),
        "I'm glad to hear you're doing well! It's important to acknowledge and celebrate positive feelings. "
        "Would you like to share what's contributing to your happiness today?",
    ),
    (
        ("help", "advice"),
        "I'm here to support you. To provide better guidance, could you share more about what you're "
        "experiencing or what kind of help you're looking for?",
    ),
)

DEFAULT_REPLY = (
    "Thank you for sharing. I'm here to listen and support you. "
    "Would you like to explore any specific emotions or situations you're dealing with?"
)


def reply_for(message: str) -> str:
    """Pick the scripted reply for a user message."""
    text = message.lower()
    for keywords, reply in REPLY_RULES:
        if any(keyword in text for keyword in keywords):
            return reply
    return DEFAULT_REPLY
