"""resulty: success-or-failure values with combinators that never throw.

Public API:
    - Result: the abstraction and its factories (of, wrap, wrap_async, ...)
    - SuccessResult / FailureResult: the two concrete variants
    - Cases: handler pair for matches() and if_success_or_failure()
    - Option: plain-dict interchange record (to_option / from_option)
    - to_results / ato_results: lift (async) iterables into Result streams
    - config_scope / resolve_config: library configuration
"""

from __future__ import annotations

import logging

from resulty.cases import Cases, CasesLike
from resulty.config import FrozenConfig, config_scope, current_config, resolve_config
from resulty.errors import ConfigurationError, OptionError, RemoteError, ResultyError
from resulty.option import FailureOption, Option, SuccessOption
from resulty.result import FailureResult, Result, SuccessResult
from resulty.streams import ato_results, to_results

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resulty")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resulty").addHandler(logging.NullHandler())

__all__ = [
    "Cases",
    "CasesLike",
    "ConfigurationError",
    "FailureOption",
    "FailureResult",
    "FrozenConfig",
    "Option",
    "OptionError",
    "RemoteError",
    "Result",
    "ResultyError",
    "SuccessOption",
    "SuccessResult",
    "__version__",
    "ato_results",
    "config_scope",
    "current_config",
    "resolve_config",
    "to_results",
]
