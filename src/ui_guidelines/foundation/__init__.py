"""
ui_guidelines.foundation - Foundation Layer

Cross-cutting infrastructure: logging and settings.
"""
