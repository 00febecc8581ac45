"""
Dash presentation layer: layout builders, callbacks and the app factory.
"""
