"""
main.py — Bootstrap

1. Load tuning constants
2. Load the word pack (falls back to the built-in list)
3. Create the app
4. Push the arena scene
5. Run
"""

from pathlib import Path
import core.tuning as tuning
from core.app import App
from logic.words import TomlWordPack
from scenes.arena_scene import ArenaScene

WORDS_FILE = Path("data/words.toml")


def main():
    tuning.load()
    words = TomlWordPack.from_file(WORDS_FILE)

    app = App(title="Typestrike",
              width=int(tuning.get("window", "width", 800)),
              height=int(tuning.get("window", "height", 480)))
    app.fps = int(tuning.get("frame", "target_fps", 60))

    app.push_scene(ArenaScene(words=words))
    app.run()


if __name__ == "__main__":
    main()
