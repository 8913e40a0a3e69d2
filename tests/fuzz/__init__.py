"""Fuzz testing infrastructure for i18ntree.

This package contains:
- shadow_tree: Naive reference resolver for differential testing
- test_backend_oracle: State machine fuzzer using RuleBasedStateMachine

Python 3.13+.
"""
