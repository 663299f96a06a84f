"""Combat word list.

Each entry pairs the word to type with its Japanese and English glosses,
which the word picker shows beneath the target.
"""

from __future__ import annotations

from pydantic import BaseModel


class CombatWord(BaseModel):
    target: str
    ja: str
    en: str


COMBAT_WORDS: list[CombatWord] = [
    CombatWord(target=target, ja=ja, en=en)
    for target, ja, en in [
        ("attack", "攻撃", "attack"),
        ("buffer", "バッファ", "buffer"),
        ("compile", "コンパイル", "compile"),
        ("debug", "デバッグ", "debug"),
        ("execute", "実行", "execute"),
        ("function", "関数", "function"),
        ("garbage", "ゴミ", "garbage"),
        ("hash", "ハッシュ", "hash"),
        ("import", "インポート", "import"),
        ("json", "ジェイソン", "json"),
        ("kernel", "カーネル", "kernel"),
        ("lambda", "ラムダ", "lambda"),
        ("memory", "メモリ", "memory"),
        ("network", "ネットワーク", "network"),
        ("object", "オブジェクト", "object"),
        ("pointer", "ポインタ", "pointer"),
        ("query", "クエリ", "query"),
        ("router", "ルーター", "router"),
        ("socket", "ソケット", "socket"),
        ("thread", "スレッド", "thread"),
        ("unicode", "ユニコード", "unicode"),
        ("variable", "変数", "variable"),
        ("widget", "ウィジェット", "widget"),
        ("xor", "排他的論理和", "xor"),
        ("yield", "イールド", "yield"),
        ("zip", "圧縮", "zip"),
    ]
]


def word_targets(excluded: set[str] | None = None) -> list[str]:
    """Return the typeable words, minus any the player has excluded."""
    excluded = excluded or set()
    return [w.target for w in COMBAT_WORDS if w.target not in excluded]
