# src/behave_notifier/cli/__init__.py
