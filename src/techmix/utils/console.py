"""
Central Logging and Console Utilities.

Output is split across two channels:
1.  **Reports** go to the proxied Rich ``console`` (stdout by default), so
    machine-readable output such as JSON stays clean.
2.  **Logs** go through the standard ``logging`` library to a ``RichHandler``
    bound to a stderr console, attached to the ``techmix`` logger.

The report console can be swapped at runtime via ``set_console`` (tests use
this to capture tables into a buffer).

Attributes:
    console (_ConsoleProxy): A global, stable reference to the active report console.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "techmix"

# Between INFO and WARNING
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "family": "bold magenta",
  }
)

logger = logging.getLogger(LOGGER_NAME)


def make_console(**kwargs: Any) -> Console:
  """
  Builds a Rich console that knows the techmix style names.

  Args:
      **kwargs: Options forwarded to ``rich.console.Console``.

  Returns:
      Console: The new console.
  """
  return Console(theme=_THEME, **kwargs)


class _ConsoleProxy:
  """
  Forwards printing to a replaceable ``rich.console.Console`` backend.

  Modules import the module-level ``console`` object once; swapping the
  backend keeps that reference valid.
  """

  def __init__(self) -> None:
    self._backend: Console = make_console()

  def set_backend(self, new_console: Console) -> None:
    self._backend = new_console

  def reset(self) -> None:
    self._backend = make_console()

  @property
  def backend(self) -> Console:
    return self._backend

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def configure_logging(verbose: bool = False, log_console: Optional[Console] = None) -> None:
  """
  Attaches a single ``RichHandler`` to the ``techmix`` logger.

  Calling it again replaces the previous handler rather than stacking a new one.

  Args:
      verbose (bool): Emit DEBUG records when True, INFO and above otherwise.
      log_console (Optional[Console]): Destination console. Defaults to stderr.
  """
  for handler in list(logger.handlers):
    if isinstance(handler, RichHandler):
      logger.removeHandler(handler)

  handler = RichHandler(
    console=log_console or make_console(stderr=True),
    show_time=False,
    show_path=False,
    markup=True,
    rich_tracebacks=True,
  )
  logger.addHandler(handler)
  logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def set_console(new_console: Console) -> None:
  """
  Redirects report output to ``new_console``.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Restores report output to standard output."""
  console.reset()


def log_info(msg: str) -> None:
  logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  logger.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  logger.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logger.error(f"❌ {msg}", extra={"markup": True})
