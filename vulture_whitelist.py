"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic, multiprocessing) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validator - used by framework via @field_validator decorator
_.parse_phonetic  # noqa: F821  # unused method (guesspy/core/config.py:40)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (guesspy/core/config.py:49)

# Public API - re-exported for library callers
get_default_evaluator  # noqa: F821  # unused function (guesspy/core/evaluator.py:156)
