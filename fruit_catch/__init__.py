"""
Fruit Catch
===========

Arcade game: move a basket to catch falling fruit for points. Every miss
costs a life, and the game speeds up the longer a session runs.

The catch_core package holds the simulation (spawning, difficulty ramp,
movement, collision, scoring and the session state machine) together with
the render surfaces front ends draw through. All tunable parameters are in
game_config.yaml.
"""
