"""logic — Game systems package.

Modules
-------
input_state     — core input events and the held-key snapshot
input_manager   — raw pygame events → core events & intents
player          — movement, jump & gravity integration
monster         — hit flash / shake timers, damage, reset
words           — word sources (built-in list, TOML packs)
typing_combat   — letter judging, damage, word rotation, victory latch
ui_timers       — damage text / victory banner countdowns
frame_monitor   — frame budget overruns and FPS reports
session         — per-tick orchestrator, pause, restart, snapshots
"""
