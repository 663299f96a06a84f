"""Battle narration -- render :class:`LogEntry` keys as display text.

Unknown keys, or templates whose parameters are missing, render as the key
itself so a gap in a catalogue never breaks the battle log.
"""

from __future__ import annotations

from typing import Literal

from termicrawler.core.battle_state import LogEntry

Language = Literal["en", "ja"]

CATALOGUES: dict[str, dict[str, str]] = {
    "en": {
        "battle.encounter": "Encountered {enemy}!",
        "battle.critical": "Critical hit!",
        "battle.player_attack": "Player attacks! Dealt {damage} damage.",
        "battle.weak_hit": "Weak letters hit x{hits}! +{bonus} damage.",
        "battle.trait_heal": "Traits restored {amount} HP.",
        "battle.trait_en": "Traits restored {amount} EN.",
        "battle.enemy_defeated": "{enemy} was defeated!",
        "battle.enemy_attack": "{enemy} attacks! Dealt {damage} damage.",
        "battle.shield_block": "Shield blocked {enemy}'s attack!",
        "battle.player_defeated": "Player was defeated...",
        "battle.skill_heal": "{skill}: restored {amount} HP.",
        "battle.skill_shield": "{skill}: shield is up.",
        "battle.skill_scan": "{skill}: weak letters are [{letters}].",
        "battle.skill_damage": "{skill}: dealt {damage} damage.",
    },
    "ja": {
        "battle.encounter": "{enemy} が現れた！",
        "battle.critical": "クリティカルヒット！",
        "battle.player_attack": "プレイヤーの攻撃！ {damage} のダメージ。",
        "battle.weak_hit": "弱点文字 x{hits}！ +{bonus} ダメージ。",
        "battle.trait_heal": "特性で HP が {amount} 回復した。",
        "battle.trait_en": "特性で EN が {amount} 回復した。",
        "battle.enemy_defeated": "{enemy} を倒した！",
        "battle.enemy_attack": "{enemy} の攻撃！ {damage} のダメージ。",
        "battle.shield_block": "シールドが {enemy} の攻撃を防いだ！",
        "battle.player_defeated": "プレイヤーは倒れた...",
        "battle.skill_heal": "{skill}: HP が {amount} 回復した。",
        "battle.skill_shield": "{skill}: シールド展開。",
        "battle.skill_scan": "{skill}: 弱点文字は [{letters}]。",
        "battle.skill_damage": "{skill}: {damage} のダメージ。",
    },
}


def render(entry: LogEntry, language: Language = "en") -> str:
    template = CATALOGUES.get(language, CATALOGUES["en"]).get(entry.key)
    if template is None:
        return entry.key
    try:
        return template.format(**entry.params)
    except KeyError:
        return entry.key


def render_log(log: list[LogEntry], language: Language = "en") -> list[str]:
    return [render(entry, language) for entry in log]
