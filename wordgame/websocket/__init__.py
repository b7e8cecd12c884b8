"""
WebSocket Package

Socket.IO event handlers for live keystroke input.
"""
