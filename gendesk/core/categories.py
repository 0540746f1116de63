"""Category guessing: maps a package description to a freedesktop category path.

Rules are tried top-down and the first rule with a keyword in the
description wins. Broad keywords such as "player" or "emulator" sit low in
the table so that the more specific rules above them get the first chance.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

DEFAULT_CATEGORY = "Application"

# Stripped from both ends of every word before comparing
PUNCTUATION = "-_.,!?()[]{}\\/:;+@"


class CategoryRule(NamedTuple):
    keywords: frozenset[str]
    category: str


def _rule(keywords: Sequence[str], category: str) -> CategoryRule:
    return CategoryRule(frozenset(keywords), category)


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    _rule(["rendering", "modeling", "modeler", "render", "raytracing"], "Application;Graphics;3DGraphics"),
    _rule(["non-linear", "audio", "sound", "graphics", "draw", "demo"], "Application;Multimedia"),
    _rule(["network", "p2p", "browser"], "Application;Network"),
    _rule(["synth", "synthesizer"], "Application;AudioVideo"),
    _rule(["ebook", "e-book"], "Application;Office"),
    _rule(["editor"], "Application;Development;TextEditor"),
    _rule(["gps", "inspecting"], "Application;Science"),
    _rule(["git"], "Application;Development;RevisionControl"),
    _rule(["combat", "arcade", "racing", "fighting", "fight"], "Application;Game;ArcadeGame"),
    _rule(["shooter", "fps"], "Application;Game;ActionGame"),
    _rule(["roguelike", "rpg"], "Application;Game;AdventureGame"),
    _rule(["puzzle"], "Application;Game;LogicGame"),
    _rule(["board", "chess", "goban", "chessboard"], "Application;Game;BoardGame"),
    _rule(["game", "rts", "mmorpg", "emulator", "player"], "Application;Game"),
    _rule(["code", "ide", "programming", "develop", "compile"], "Application;Development"),
    _rule(["sensor"], "Application;System"),
)


def words(text: str) -> set[str]:
    """Return the lowercased words of text with surrounding punctuation removed."""
    result = set()
    for word in text.lower().split():
        word = word.strip(PUNCTUATION)
        if word:
            result.add(word)
    return result


def has_keyword(text: str, keyword: str) -> bool:
    """Check if keyword appears as a whole word in text ("carded" is not "card")."""
    return keyword in words(text)


def guess_category(description: str, rules: Sequence[CategoryRule] = CATEGORY_RULES) -> str:
    """Return the category of the first matching rule, or DEFAULT_CATEGORY."""
    found = words(description)
    for rule in rules:
        if rule.keywords & found:
            return rule.category
    return DEFAULT_CATEGORY
