"""Presentation layer for Pomodoro CLI."""
