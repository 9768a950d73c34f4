"""Prompting package.

Deterministic builders for model prompts and feedback message text. No model
invocation or transport happens here.
"""
