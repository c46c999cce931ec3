"""scenes — pygame Scenes and their renderers.

arena_scene   the typing fight (input wiring, per-frame tick)
arena_draw    draws a session Snapshot to the virtual surface
"""
