"""logic — Game systems package.

Top-level modules
-----------------
tick            — per-frame system orchestrator
physics         — arcade bodies: gravity, bounds, platforms, overlaps
controls        — player running / jumping from input intents
input_manager   — raw input → intent mapping
animation       — spritesheet frame animations
spawning        — platforms, player, stars and bombs
rules           — scoring, bombs, game over, restart
audio           — sound registry + event wiring
particles       — VFX particle simulation
"""
