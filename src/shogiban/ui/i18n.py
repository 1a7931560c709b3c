"""Internationalisation strings for the Shogiban UI.

Usage::

    from shogiban.ui.i18n import t, set_language

    set_language("Japanese")
    print(t().sente_hand)      # "先手の持ち駒"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Diagram captions ─────────────────────────────────────────────────
    gote_hand: str
    sente_hand: str
    empty_hand: str

    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_file: str
    menu_open: str
    menu_reload: str
    menu_quit: str
    menu_view: str
    menu_theme: str
    menu_language: str

    status_ready: str
    status_loaded: str  # "Loaded {name}: {boards} board(s), {errors} error(s)"
    status_no_blocks: str  # "No shogi blocks in {name}"

    open_title: str
    open_filter: str
    open_failed: str  # "Failed to open document:\n{exc}"

    # ── Block errors ─────────────────────────────────────────────────────
    block_error: str  # "Shogi notation error: {msg}"


_EN = Strings(
    gote_hand="Gote pieces in hand",
    sente_hand="Sente pieces in hand",
    empty_hand="-",
    window_title="Shogiban",
    menu_file="&File",
    menu_open="&Open…",
    menu_reload="&Reload",
    menu_quit="&Quit",
    menu_view="&View",
    menu_theme="Board theme",
    menu_language="Language",
    status_ready="Ready",
    status_loaded="Loaded {name}: {boards} board(s), {errors} error(s)",
    status_no_blocks="No shogi blocks in {name}",
    open_title="Open document",
    open_filter="Markdown / text (*.md *.markdown *.txt);;All files (*)",
    open_failed="Failed to open document:\n{exc}",
    block_error="Shogi notation error: {msg}",
)

_JA = Strings(
    gote_hand="後手の持ち駒",
    sente_hand="先手の持ち駒",
    empty_hand="-",
    window_title="将棋盤",
    menu_file="ファイル(&F)",
    menu_open="開く(&O)…",
    menu_reload="再読み込み(&R)",
    menu_quit="終了(&Q)",
    menu_view="表示(&V)",
    menu_theme="盤のテーマ",
    menu_language="言語",
    status_ready="準備完了",
    status_loaded="{name} を読み込みました: 盤面 {boards} 件、エラー {errors} 件",
    status_no_blocks="{name} に将棋ブロックがありません",
    open_title="文書を開く",
    open_filter="Markdown / テキスト (*.md *.markdown *.txt);;すべてのファイル (*)",
    open_failed="文書を開けませんでした:\n{exc}",
    block_error="棋譜表記エラー: {msg}",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Japanese": _JA,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
