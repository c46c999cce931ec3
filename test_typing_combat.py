"""test_typing_combat.py — Behavioural tests for the typing combat engine.

Covers letter matching, the cursor/marks invariant, accuracy, mistake
penalties, backspace, word completion, the defeat latch and the
test-hit path.  All tests use a scripted word source and explicit
damage numbers so they do not depend on data/tuning.toml.

Run:  python test_typing_combat.py
"""
from __future__ import annotations
import sys, random, traceback

# ── Bootstrap ────────────────────────────────────────────────────────
import core.tuning as _tuning
_tuning.override({})          # code defaults only

from components import Monster, Player, Mark
from logic.session import SessionState
from logic.typing_combat import normalize_letter
from logic.words import FALLBACK_WORDS


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
        raise AssertionError(f"{label} — {detail}" if detail else label)


# ── Fixtures ─────────────────────────────────────────────────────────

class _Words:
    """Hands out words in order, cycling; counts how often it was asked."""

    def __init__(self, *words: str):
        self.words = list(words)
        self.calls = 0

    def next_word(self) -> str:
        w = self.words[self.calls % len(self.words)]
        self.calls += 1
        return w


def _session(*words: str, hp: int = 40, damage: int = 8,
             penalty: float = 4.0) -> tuple[SessionState, _Words]:
    src = _Words(*(words or ("nova", "ember")))
    s = SessionState(
        words=src,
        monster=Monster(max_hp=hp, hp=hp),
        player=Player(x=100.0, y=388.0, grounded=True),
        letter_damage=damage,
        mistake_penalty=penalty,
    )
    return s, src


def _state(s: SessionState) -> tuple:
    p = s.progress
    return (p.word, tuple(p.marks), p.index, p.total_typed, p.correct_typed,
            s.monster.hp, s.player.hp)


# ═══════════════════════════════════════════════════════════════════
#  1. Correct letters
# ═══════════════════════════════════════════════════════════════════

def test_nova_scenario():
    """Word 'nova', 8 damage per letter, monster at 40 hp."""
    print("\n=== 1: 'nova' scenario ===")
    s, src = _session("nova", "ember")
    check(s.progress.word == "nova", "1a: first word comes from the source",
          f"word={s.progress.word!r}")

    hps = [s.monster.hp]
    for i, ch in enumerate("nov"):
        s.engine.submit_character(ch)
        hps.append(s.monster.hp)
        check(s.progress.index == i + 1, f"1b: cursor at {i + 1} after '{ch}'",
              f"index={s.progress.index}")
    s.engine.submit_character("a")
    hps.append(s.monster.hp)

    check(hps == [40, 32, 24, 16, 8], "1c: hp sequence 40→32→24→16→8",
          f"got {hps}")
    check(src.calls == 2, "1d: completing the word requested a new one",
          f"calls={src.calls}")
    check(s.progress.word == "ember" and s.monster.current_word == "ember",
          "1e: monster now shows the next word")
    check(s.progress.index == 0 and s.progress.marks == [Mark.UNSET] * 5,
          "1f: cursor and marks reset for the new word")
    check(s.monster.alive and s.monster.hp == 8,
          "1g: word completion does not kill the monster")
    check(s.progress.correct_typed == 4 and s.progress.total_typed == 4,
          "1h: counters carry across the word change")
    check(s.player.damage_dealt == 32 and s.player.score == 32,
          "1i: damage dealt and score track letter damage",
          f"dealt={s.player.damage_dealt} score={s.player.score}")


def test_marks_follow_cursor():
    print("\n=== 2: Marks and cursor ===")
    s, _ = _session("nova")
    s.engine.submit_character("n")
    s.engine.submit_character("o")
    p = s.progress
    check(p.marks == [Mark.CORRECT, Mark.CORRECT, Mark.UNSET, Mark.UNSET],
          "2a: two correct marks, rest unset", f"marks={p.marks}")

    s.engine.submit_character("z")
    check(p.marks[2] == Mark.WRONG and p.index == 2,
          "2b: wrong letter marks the cursor cell without advancing")

    s.engine.submit_character("v")
    check(p.marks[2] == Mark.CORRECT and p.index == 3,
          "2c: correct retry overwrites the wrong mark")


# ═══════════════════════════════════════════════════════════════════
#  2. Mistakes and accuracy
# ═══════════════════════════════════════════════════════════════════

def test_mistake_penalty():
    print("\n=== 3: Mistake penalty ===")
    s, _ = _session("nova", penalty=4.0)
    s.engine.submit_character("x")
    check(s.player.hp == 96, "3a: player hp 100 → 96", f"hp={s.player.hp}")
    check(s.monster.hp == 40, "3b: monster hp unchanged")
    check(s.progress.total_typed == 1 and s.progress.correct_typed == 0,
          "3c: total increments, correct does not")
    check(s.player.accuracy == 0.0, "3d: accuracy 0/1",
          f"accuracy={s.player.accuracy}")

    s.player.hp = 2.0
    s.engine.submit_character("x")
    check(s.player.hp == 0.0, "3e: player hp clamps at zero",
          f"hp={s.player.hp}")


def test_accuracy():
    print("\n=== 4: Accuracy ===")
    s, _ = _session("nova")
    check(s.progress.accuracy == 1.0 and s.player.accuracy == 1.0,
          "4a: accuracy is 1 before anything is typed")
    for ch in "xnqo":
        s.engine.submit_character(ch)
    p = s.progress
    check(p.total_typed == 4 and p.correct_typed == 2, "4b: 2 of 4 correct")
    check(abs(s.player.accuracy - 0.5) < 1e-9, "4c: accuracy 0.5",
          f"accuracy={s.player.accuracy}")


# ═══════════════════════════════════════════════════════════════════
#  3. Dropped input
# ═══════════════════════════════════════════════════════════════════

def test_invalid_input_dropped():
    print("\n=== 5: Invalid input ===")
    s, _ = _session("nova")
    before = _state(s)
    for junk in ("1", "!", " ", "nn", "", None, "é", "\n", 7):
        accepted = s.engine.submit_character(junk)
        check(not accepted, f"5a: {junk!r} dropped")
    check(_state(s) == before, "5b: dropped input leaves state untouched")

    check(normalize_letter("N") == "n", "5c: uppercase normalises to lowercase")
    s.engine.submit_character("N")
    check(s.progress.index == 1 and s.monster.hp == 32,
          "5d: 'N' counts as a correct 'n'")

    check(s.progress.expected() == "o" and not s.progress.complete,
          "5e: cursor names the next expected letter")
    s.progress.index = len(s.progress.word)
    before = _state(s)
    check(s.progress.expected() is None and s.progress.complete,
          "5f: cursor past the end expects nothing")
    check(not s.engine.submit_character("a") and _state(s) == before,
          "5g: letters past the end are dropped without penalty")


def test_paused_ignores_typing():
    print("\n=== 6: Typing ignored while paused ===")
    s, _ = _session("nova")
    s.pause()
    check(not s.engine.submit_character("n"), "6a: letter ignored while paused")
    check(not s.engine.submit_backspace(), "6b: backspace ignored while paused")
    s.resume()
    check(s.engine.submit_character("n"), "6c: accepted again after resume")


# ═══════════════════════════════════════════════════════════════════
#  4. Backspace
# ═══════════════════════════════════════════════════════════════════

def test_backspace():
    print("\n=== 7: Backspace ===")
    s, _ = _session("nova")
    before = _state(s)
    check(not s.engine.submit_backspace(), "7a: backspace at 0 reports no-op")
    check(_state(s) == before, "7b: backspace at 0 changes nothing")

    s.engine.submit_character("n")
    s.engine.submit_character("o")
    s.engine.submit_backspace()
    p = s.progress
    check(p.index == 1 and p.marks[1] == Mark.UNSET and p.marks[0] == Mark.CORRECT,
          "7c: retracts exactly the last correct mark")
    check(p.total_typed == 2 and p.correct_typed == 2,
          "7d: counters untouched by backspace")
    check(s.monster.hp == 24, "7e: damage already dealt stays dealt",
          f"hp={s.monster.hp}")

    s.engine.submit_character("o")
    check(s.monster.hp == 16, "7f: retyping the letter deals damage again")


# ═══════════════════════════════════════════════════════════════════
#  5. Defeat
# ═══════════════════════════════════════════════════════════════════

def test_defeat_on_last_letter():
    print("\n=== 8: Defeat on the last letter ===")
    s, src = _session("nova", "ember", hp=32)
    for ch in "nova":
        s.engine.submit_character(ch)
    m = s.monster
    check(m.hp == 0 and not m.alive and m.defeated, "8a: monster defeated")
    check(src.calls == 1, "8b: no new word fetched for a dead monster",
          f"calls={src.calls}")
    check(m.current_word == "" and s.progress.word == "",
          "8c: word cleared on defeat")
    check(m.victory_announced and s.victory.present,
          "8d: victory announced with a banner")
    check(s.victory.item.text == "Training Dummy defeated!",
          "8e: banner names the monster", f"text={s.victory.item.text!r}")
    check(not s.engine.submit_character("e"), "8f: typing disabled after defeat")


def test_victory_latches_once():
    print("\n=== 9: Victory latch ===")
    s, _ = _session("nova", hp=16)
    s.engine.submit_character("n")
    s.engine.submit_character("o")
    check(s.monster.defeated, "9a: defeated mid-word")
    banner = s.victory.item
    check(not s.engine.announce_victory(), "9b: second announce is a no-op")
    check(s.victory.item is banner, "9c: banner not replaced")
    s.bus.drain()
    check(s.bus.stats().get("MonsterDefeated") == 1,
          "9d: exactly one MonsterDefeated event",
          f"stats={s.bus.stats()}")


def test_test_hit():
    print("\n=== 10: Test hit ===")
    s, _ = _session("nova", hp=40)
    check(s.apply_test_damage(10) == 10 and s.monster.hp == 30,
          "10a: test hit removes its amount")
    check(s.damage_text.present and s.damage_text.item.value == "-10",
          "10b: test hit shows damage text")
    check(s.monster.hit_flash > 0 and s.monster.shake_timer > 0,
          "10c: test hit triggers flash and shake")
    check(s.apply_test_damage(-5) == 0 and s.monster.hp == 30,
          "10d: negative amounts never heal")
    check(s.apply_test_damage(1000) == 30 and s.monster.hp == 0,
          "10e: damage clamps at zero hp")
    check(s.monster.defeated and s.victory.present,
          "10f: test hit follows the defeat path")
    check(s.apply_test_damage(10) == 0, "10g: no damage after defeat")


# ═══════════════════════════════════════════════════════════════════
#  6. Word source
# ═══════════════════════════════════════════════════════════════════

def test_word_source_cleanup():
    print("\n=== 11: Word source cleanup ===")
    s, _ = _session("nova", "  Comet ")
    for ch in "nova":
        s.engine.submit_character(ch)
    check(s.progress.word == "comet", "11a: words are stripped and lowercased",
          f"word={s.progress.word!r}")

    s2, _ = _session("nova", "")
    for ch in "nova":
        s2.engine.submit_character(ch)
    check(s2.progress.word in FALLBACK_WORDS,
          "11b: an empty word falls back to the built-in list",
          f"word={s2.progress.word!r}")


# ═══════════════════════════════════════════════════════════════════
#  7. Invariants under random typing
# ═══════════════════════════════════════════════════════════════════

def test_random_typing_invariants():
    print("\n=== 12: Random typing invariants ===")
    rng = random.Random(1234)
    s, _ = _session("nova", "ember", "strike", hp=100_000)
    alphabet = list("novaembrstikxyz") + ["\b"] * 4 + ["1", "?"]
    last_hp = s.monster.hp
    bad = None
    for step in range(2000):
        ch = rng.choice(alphabet)
        before_index = s.progress.index
        before_word = s.progress.word
        if ch == "\b":
            s.engine.submit_backspace()
        else:
            s.engine.submit_character(ch)
        p = s.progress
        m = s.monster
        if not (0 <= p.index <= len(p.word)):
            bad = (step, "index out of range")
        elif len(p.marks) != len(p.word):
            bad = (step, "marks not aligned with word")
        elif any(mk != Mark.CORRECT for mk in p.marks[:p.index]):
            bad = (step, "non-correct mark left of cursor")
        elif p.word == before_word and p.index > before_index + 1:
            bad = (step, "cursor jumped by more than one")
        elif abs(s.player.accuracy - (p.correct_typed / p.total_typed
                                      if p.total_typed else 1.0)) > 1e-12:
            bad = (step, "accuracy drifted from counters")
        elif not (0 <= m.hp <= m.max_hp) or m.hp > last_hp:
            bad = (step, "monster hp left range or increased")
        if bad:
            break
        last_hp = m.hp
    check(bad is None, "12a: 2000 random keystrokes keep every invariant",
          f"step {bad[0]}: {bad[1]}" if bad else "")


# ═══════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("'nova' scenario", test_nova_scenario),
        ("Marks and cursor", test_marks_follow_cursor),
        ("Mistake penalty", test_mistake_penalty),
        ("Accuracy", test_accuracy),
        ("Invalid input", test_invalid_input_dropped),
        ("Paused typing", test_paused_ignores_typing),
        ("Backspace", test_backspace),
        ("Defeat on last letter", test_defeat_on_last_letter),
        ("Victory latch", test_victory_latches_once),
        ("Test hit", test_test_hit),
        ("Word source cleanup", test_word_source_cleanup),
        ("Random typing invariants", test_random_typing_invariants),
    ]

    for name, fn in sections:
        try:
            fn()
        except AssertionError:
            pass  # already reported by check()
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Typing Combat Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
