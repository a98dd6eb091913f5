# ABOUTME: Test fixtures package for Dragon's Escape
# ABOUTME: Walkthrough command sequences and replay helpers
