from .actions import Action, ActionError, ActionType, DryRunDispatcher, HyprctlDispatcher
from .errors import RunOrRaiseError
from .Models import WindowInfo
from .run_or_raise import run_or_raise, select_action
from .window_detection import HyprctlSource, QueryError, WindowSource
from .window_rules import (ConditionSet, ConfigurationError, MatchCondition,
                           Matcher, MatchField, MatchMethod, build_conditions,
                           parse_match_condition)

__all__ = [
    'Action', 'ActionError', 'ActionType', 'DryRunDispatcher', 'HyprctlDispatcher',
    'RunOrRaiseError', 'WindowInfo', 'run_or_raise', 'select_action',
    'HyprctlSource', 'QueryError', 'WindowSource',
    'ConditionSet', 'ConfigurationError', 'MatchCondition', 'Matcher',
    'MatchField', 'MatchMethod', 'build_conditions', 'parse_match_condition',
]
