"""nodebot: a minimal IRC client.

Connects to a single server, registers an identity, joins one channel and
answers keep-alive pings plus a small table of in-channel commands.
"""

__version__ = "0.1.0"
