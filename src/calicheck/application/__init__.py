"""calicheck application layer.

Rule registry, built-in rules, evaluator, runner and reporters.
"""
