"""Style-rule conformance checking for JavaScript and React projects."""

from __future__ import annotations

from .config import StylegateConfig as StylegateConfig
from .config import load_config as load_config
from .evaluator import EvaluationResult as EvaluationResult
from .evaluator import RuleExecutionError as RuleExecutionError
from .evaluator import evaluate as evaluate
from .reporter import emit as emit
from .rules import DuplicateRuleError as DuplicateRuleError
from .rules import Rule as Rule
from .rules import RuleRegistry as RuleRegistry
from .rules import Violation as Violation
from .rules import default_registry as default_registry
from .scanner import FileDescriptor as FileDescriptor
from .scanner import UnreadablePathError as UnreadablePathError
from .scanner import scan as scan

__version__ = "0.1.0"
