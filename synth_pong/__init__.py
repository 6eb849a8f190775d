"""
Synth Pong: one human paddle, one reactive AI paddle and synthesized sound effects
"""

__version__ = "0.1.0"
