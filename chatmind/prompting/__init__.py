"""Prompting package.

Renders local replies: static text in `templates`, intent dispatch and level
adaptation in `response_generator`. No model invocation happens here.
"""
