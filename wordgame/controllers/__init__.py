"""
HTTP Controllers Package

Flask blueprints exposing the game engine to the UI layer.
"""
