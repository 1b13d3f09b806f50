"""
Services around the game engine: ticking, input, rendering and video.
"""
