"""
Comodoro - hooks and transport selection for a pomodoro timer server.

Components:
- Hooks: shell commands run on server and timer lifecycle events
- Protocols: choose which transports a server binds and a client uses
"""

__version__ = "0.1.0"
