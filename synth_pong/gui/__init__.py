"""
PyGame front end of Synth Pong
"""
