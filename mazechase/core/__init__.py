"""Core gameplay primitives (maze, sprites, movement, and events).

Kept free of terminal concerns so it can be reused by the game loop, CLI, and tests.
"""
